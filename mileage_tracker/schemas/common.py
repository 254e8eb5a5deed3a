# mileage_tracker/schemas/common.py
"""
Shared schema pieces: camelCase JSON models and the response envelope
{ success, data?, error? } returned by every endpoint.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class CamelModel(BaseModel):
    """Python side uses snake_case, JSON side uses camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        str_strip_whitespace = True


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
