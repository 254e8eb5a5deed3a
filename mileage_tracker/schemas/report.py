# mileage_tracker/schemas/report.py
from datetime import date
from typing import Literal, Optional
from mileage_tracker.schemas.common import CamelModel
from mileage_tracker.schemas.mileage_entry import MileageEntryOut

Period = Literal["today", "week", "month", "all"]


class DayCoverageOut(CamelModel):
    date: date
    entry_count: int
    miles: int
    has_entry: bool
    is_today: bool


class VehicleCoverageOut(CamelModel):
    vehicle_id: str
    vehicle_name: str
    license_plate: Optional[str]
    window_days: int
    total_miles: int
    days_with_mileage: int
    days: list[DayCoverageOut]
    missing_days: list[date]
    today: Optional[DayCoverageOut]


class BreakdownOut(CamelModel):
    key: str
    label: str
    shifts: int
    miles: int


class PeriodSummaryOut(CamelModel):
    period: Period
    start_date: Optional[date]
    end_date: date
    total_shifts: int
    total_miles: int
    average_miles_per_shift: float
    active_shifts: int
    first_shift_count: int
    second_shift_count: int
    first_shift_percent: float
    second_shift_percent: float
    by_vehicle: list[BreakdownOut]
    by_supervisor: list[BreakdownOut]


class DashboardOut(CamelModel):
    date: date
    current_shift: str
    current_shift_label: str
    active_shifts: int
    available_vehicles: int
    miles_today: int
    completed_today: int
    first_shift_today: int
    second_shift_today: int
    active_entries: list[MileageEntryOut]
