# External package imports
from fastapi import APIRouter

# Local application imports
from ..application.dto.common_dto import ApiResponse
from ..infrastructure.db.mongo_connection import MongoConnection
from ..di.container import get_container


router = APIRouter(tags=["health"])


@router.get("/health", response_model=ApiResponse)
async def health() -> ApiResponse:
    """Liveness probe; reports the last known database state without touching it"""
    container = get_container()
    connection = container.get(MongoConnection)

    database_state = "connected" if connection.connected else "disconnected"
    return ApiResponse(data={"status": "ok", "database": database_state})
