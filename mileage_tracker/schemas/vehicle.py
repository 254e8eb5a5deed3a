# mileage_tracker/schemas/vehicle.py
from pydantic import Field, field_validator
from datetime import datetime
from typing import Optional
from mileage_tracker.schemas.common import CamelModel


def normalize_plate(value: str) -> str:
    return value.strip().upper()


class VehicleCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    license_plate: str = Field(min_length=1, max_length=20)
    is_active: bool = True

    @field_validator("license_plate")
    @classmethod
    def _upper_plate(cls, v: str) -> str:
        return normalize_plate(v)


class VehicleUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    license_plate: Optional[str] = Field(None, min_length=1, max_length=20)
    is_active: Optional[bool] = None

    @field_validator("license_plate")
    @classmethod
    def _upper_plate(cls, v: Optional[str]) -> Optional[str]:
        return normalize_plate(v) if v is not None else v


class VehicleOut(CamelModel):
    id: str
    name: str
    license_plate: str
    is_active: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
