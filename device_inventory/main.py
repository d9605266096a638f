# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

# Local application imports
from .api import auth_router, device_router, health_router, register_exception_handlers
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import get_container
from .infrastructure.db.indexes import ensure_indexes
from .infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Connects to MongoDB (failing startup when every attempt fails), makes sure
    the indexes exist, and starts the connection monitor. On shutdown the
    monitor is stopped and the client closed.
    """
    container = get_container()
    connection = container.get(MongoConnection)

    await connection.connect()
    await ensure_indexes(connection.get_device_collection(), connection.get_user_collection())
    connection.start_monitor()
    logger.info("Application startup complete")

    yield

    await connection.close()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration
    - Exception handlers and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Device Inventory API",
        version="1.0.0",
        description="IoT device inventory backed by MongoDB",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(health_router)
    application.include_router(auth_router, prefix="/api/auth")
    application.include_router(device_router, prefix="/api/devices")

    return application


# Create application instance
app = create_application()


def run() -> None:
    """Serve the application with uvicorn using HOST/PORT from the environment"""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
