from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base DTO: snake_case attributes, camelCase JSON keys"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every response body"""
    success: bool = True
    data: Optional[T] = None
    message: Optional[str] = None
