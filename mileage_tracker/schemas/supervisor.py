# mileage_tracker/schemas/supervisor.py
from pydantic import Field, field_validator
from datetime import datetime
from typing import Optional
from mileage_tracker.schemas.common import CamelModel


def normalize_badge(value: str) -> str:
    return value.strip().upper()


class SupervisorCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    badge_number: str = Field(min_length=1, max_length=20)
    is_active: bool = True

    @field_validator("badge_number")
    @classmethod
    def _upper_badge(cls, v: str) -> str:
        return normalize_badge(v)


class SupervisorUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    badge_number: Optional[str] = Field(None, min_length=1, max_length=20)
    is_active: Optional[bool] = None

    @field_validator("badge_number")
    @classmethod
    def _upper_badge(cls, v: Optional[str]) -> Optional[str]:
        return normalize_badge(v) if v is not None else v


class SupervisorOut(CamelModel):
    id: str
    name: str
    badge_number: str
    is_active: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
