# mileage_tracker/schemas/mileage_entry.py
"""
Request/response shapes for mileage entries.
totalMiles is output-only: it is never read from client input.
"""

from pydantic import Field
from datetime import date, datetime
from typing import Literal, Optional
from mileage_tracker.schemas.common import CamelModel

ShiftType = Literal["first", "second"]
EntryStatus = Literal["active", "completed"]
ConditionRating = Literal["excellent", "good", "fair", "poor", "needs_attention"]


class PhotoSet(CamelModel):
    """Six inspection angles, each an optional image reference (URL, path or data URL)."""
    front: Optional[str] = None
    back: Optional[str] = None
    left_side: Optional[str] = None
    right_side: Optional[str] = None
    front_interior: Optional[str] = None
    back_interior: Optional[str] = None

    class Config:
        extra = "forbid"

    def as_stored(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ShiftStart(CamelModel):
    vehicle_id: str = Field(min_length=1, max_length=32)
    supervisor_name: str = Field(min_length=1, max_length=100)
    start_mileage: int = Field(ge=0)
    shift: Optional[ShiftType] = None           # defaults to the current wall-clock shift
    notes: Optional[str] = Field(None, max_length=500)
    start_condition: Optional[ConditionRating] = None
    start_condition_notes: Optional[str] = Field(None, max_length=200)
    start_photos: Optional[PhotoSet] = None


class ShiftEnd(CamelModel):
    end_mileage: int = Field(ge=0)
    notes: Optional[str] = Field(None, max_length=500)
    end_condition: Optional[ConditionRating] = None
    end_condition_notes: Optional[str] = Field(None, max_length=200)
    end_photos: Optional[PhotoSet] = None


class MileageEntryUpdate(CamelModel):
    """PUT body. Supplying endMileage on an active entry ends the shift."""
    supervisor_name: Optional[str] = Field(None, min_length=1, max_length=100)
    shift: Optional[ShiftType] = None
    status: Optional[EntryStatus] = None
    start_mileage: Optional[int] = Field(None, ge=0)
    end_mileage: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=500)
    start_condition: Optional[ConditionRating] = None
    start_condition_notes: Optional[str] = Field(None, max_length=200)
    end_condition: Optional[ConditionRating] = None
    end_condition_notes: Optional[str] = Field(None, max_length=200)
    start_photos: Optional[PhotoSet] = None
    end_photos: Optional[PhotoSet] = None


class MileageEntryOut(CamelModel):
    id: str
    vehicle_id: str
    supervisor_name: str
    shift: ShiftType
    date: date
    start_time: datetime
    end_time: Optional[datetime]
    start_mileage: int
    end_mileage: Optional[int]
    total_miles: Optional[int]
    notes: Optional[str]
    status: EntryStatus
    start_condition: Optional[str]
    start_condition_notes: Optional[str]
    end_condition: Optional[str]
    end_condition_notes: Optional[str]
    start_photos: Optional[dict[str, str]]
    end_photos: Optional[dict[str, str]]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
