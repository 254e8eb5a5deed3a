# mileage_tracker/services/report_service.py
"""
Read-only reporting over mileage entries.

Every function here is a pure function of (entries, vehicles, supervisors,
today): no DB access, no clock reads, no mutation. Routers load the rows
and pass them in, tests pass plain model instances.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from mileage_tracker.config import settings
from mileage_tracker.models.mileage_entry import STATUS_ACTIVE, STATUS_COMPLETED
from mileage_tracker.utils.shifts import FIRST, SECOND, current_shift, shift_label

UNKNOWN_VEHICLE = "Unknown vehicle"

# Trailing windows, inclusive of today. None = no lower bound.
PERIOD_DAYS = {"today": 1, "week": 7, "month": 30, "all": None}


@dataclass
class DayCoverage:
    date: date
    entry_count: int
    miles: int
    has_entry: bool
    is_today: bool


@dataclass
class VehicleCoverage:
    vehicle_id: str
    vehicle_name: str
    license_plate: Optional[str]
    window_days: int
    total_miles: int
    days_with_mileage: int
    days: list = field(default_factory=list)
    missing_days: list = field(default_factory=list)
    today: Optional[DayCoverage] = None


@dataclass
class Breakdown:
    key: str
    label: str
    shifts: int = 0
    miles: int = 0


@dataclass
class PeriodSummary:
    period: str
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
    by_vehicle: list = field(default_factory=list)
    by_supervisor: list = field(default_factory=list)


@dataclass
class Dashboard:
    date: date
    current_shift: str
    current_shift_label: str
    active_shifts: int
    available_vehicles: int
    miles_today: int
    completed_today: int
    first_shift_today: int
    second_shift_today: int
    active_entries: list = field(default_factory=list)


def _miles(entry) -> int:
    return entry.total_miles or 0


def _completed(entries: Iterable) -> list:
    return [e for e in entries if e.status == STATUS_COMPLETED]


def _percent(part: int, whole: int) -> float:
    return round(part / whole * 100, 1) if whole else 0.0


def window_dates(today: date, days: int) -> list[date]:
    """The trailing `days` calendar days ending today, oldest first."""
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def daily_coverage(entries: Iterable, vehicle, today: date, days: Optional[int] = None) -> VehicleCoverage:
    """
    Day-by-day mileage for one vehicle over a trailing window.
    Days without a completed entry are reported as missing.
    `vehicle` is a Vehicle row, or a bare id string for a vehicle not in the roster.
    """
    days = days or settings.COVERAGE_WINDOW_DAYS
    if isinstance(vehicle, str):
        vehicle_id, name, plate = vehicle, UNKNOWN_VEHICLE, None
    else:
        vehicle_id, name, plate = vehicle.id, vehicle.name, vehicle.license_plate

    per_day = defaultdict(list)
    for entry in _completed(entries):
        if entry.vehicle_id == vehicle_id:
            per_day[entry.date].append(entry)

    day_rows = []
    for day in window_dates(today, days):
        day_entries = per_day.get(day, [])
        day_rows.append(DayCoverage(
            date=day,
            entry_count=len(day_entries),
            miles=sum(_miles(e) for e in day_entries),
            has_entry=bool(day_entries),
            is_today=day == today,
        ))

    return VehicleCoverage(
        vehicle_id=vehicle_id,
        vehicle_name=name,
        license_plate=plate,
        window_days=days,
        total_miles=sum(d.miles for d in day_rows),
        days_with_mileage=sum(1 for d in day_rows if d.has_entry),
        days=day_rows,
        missing_days=[d.date for d in day_rows if not d.has_entry],
        today=next((d for d in day_rows if d.is_today), None),
    )


def fleet_coverage(entries: Iterable, vehicles: Iterable, today: date,
                   days: Optional[int] = None, include_inactive: bool = False) -> list[VehicleCoverage]:
    entries = list(entries)
    return [
        daily_coverage(entries, v, today, days)
        for v in vehicles
        if include_inactive or v.is_active
    ]


def period_start(period: str, today: date) -> Optional[date]:
    if period not in PERIOD_DAYS:
        raise ValueError(f"Unknown period {period!r}")
    days = PERIOD_DAYS[period]
    return today - timedelta(days=days - 1) if days else None


def _matches(entry, vehicle_id: Optional[str], supervisor_name: Optional[str]) -> bool:
    if vehicle_id and entry.vehicle_id != vehicle_id:
        return False
    if supervisor_name and entry.supervisor_name != supervisor_name:
        return False
    return True


def period_summary(entries: Iterable, vehicles: Iterable, period: str, today: date,
                   vehicle_id: str = None, supervisor_name: str = None) -> PeriodSummary:
    """
    Totals for completed shifts in a period.
    Active-shift count ignores the period (a shift opened last night is still running).
    """
    start = period_start(period, today)
    vehicle_names = {v.id: v.name for v in vehicles}

    filtered = [e for e in entries if _matches(e, vehicle_id, supervisor_name)]
    active = [e for e in filtered if e.status == STATUS_ACTIVE]
    completed = [
        e for e in _completed(filtered)
        if e.date <= today and (start is None or e.date >= start)
    ]

    total_shifts = len(completed)
    total_miles = sum(_miles(e) for e in completed)
    first = sum(1 for e in completed if e.shift == FIRST)
    second = sum(1 for e in completed if e.shift == SECOND)

    by_vehicle: dict[str, Breakdown] = {}
    by_supervisor: dict[str, Breakdown] = {}
    for e in completed:
        v = by_vehicle.setdefault(
            e.vehicle_id, Breakdown(e.vehicle_id, vehicle_names.get(e.vehicle_id, UNKNOWN_VEHICLE))
        )
        v.shifts += 1
        v.miles += _miles(e)
        s = by_supervisor.setdefault(e.supervisor_name, Breakdown(e.supervisor_name, e.supervisor_name))
        s.shifts += 1
        s.miles += _miles(e)

    def ranked(rows: dict) -> list[Breakdown]:
        return sorted(rows.values(), key=lambda b: (-b.miles, -b.shifts, b.label))

    return PeriodSummary(
        period=period,
        start_date=start,
        end_date=today,
        total_shifts=total_shifts,
        total_miles=total_miles,
        average_miles_per_shift=round(total_miles / total_shifts, 1) if total_shifts else 0.0,
        active_shifts=len(active),
        first_shift_count=first,
        second_shift_count=second,
        first_shift_percent=_percent(first, total_shifts),
        second_shift_percent=_percent(second, total_shifts),
        by_vehicle=ranked(by_vehicle),
        by_supervisor=ranked(by_supervisor),
    )


def dashboard(entries: Iterable, vehicles: Iterable, now: datetime) -> Dashboard:
    """Today-at-a-glance numbers for the supervisor home screen."""
    entries = list(entries)
    today = now.date()
    shift = current_shift(now)

    active = [e for e in entries if e.status == STATUS_ACTIVE]
    todays = [e for e in entries if e.date == today]
    completed_today = _completed(todays)

    return Dashboard(
        date=today,
        current_shift=shift,
        current_shift_label=shift_label(shift),
        active_shifts=len(active),
        available_vehicles=sum(1 for v in vehicles if v.is_active),
        miles_today=sum(_miles(e) for e in completed_today),
        completed_today=len(completed_today),
        first_shift_today=sum(1 for e in todays if e.shift == FIRST),
        second_shift_today=sum(1 for e in todays if e.shift == SECOND),
        active_entries=sorted(active, key=lambda e: e.start_time, reverse=True),
    )
