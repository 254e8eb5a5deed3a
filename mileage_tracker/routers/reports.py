# mileage_tracker/routers/reports.py
"""Read-only mileage reports: 7-day coverage, period summary, dashboard."""

from datetime import date, datetime
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from mileage_tracker.database import get_db
from mileage_tracker.models.mileage_entry import MileageEntry
from mileage_tracker.models.vehicle import Vehicle
from mileage_tracker.schemas.common import ApiResponse
from mileage_tracker.schemas.report import DashboardOut, Period, PeriodSummaryOut, VehicleCoverageOut
from mileage_tracker.services import report_service

router = APIRouter()


def _load(db: Session):
    return db.query(MileageEntry).all(), db.query(Vehicle).all()


@router.get("/reports/coverage", response_model=ApiResponse[list[VehicleCoverageOut]],
            summary="Daily mileage coverage for every active vehicle")
def fleet_coverage(days: Optional[int] = Query(None, ge=1, le=90), include_inactive: bool = False,
                   db: Session = Depends(get_db)):
    """Per vehicle: miles per day over the trailing window, with missing days flagged."""
    entries, vehicles = _load(db)
    report = report_service.fleet_coverage(entries, vehicles, date.today(), days, include_inactive)
    return {"success": True, "data": report}


@router.get("/reports/coverage/{vehicle_id}", response_model=ApiResponse[VehicleCoverageOut],
            summary="Daily mileage coverage for one vehicle")
def vehicle_coverage(vehicle_id: str, days: Optional[int] = Query(None, ge=1, le=90),
                     db: Session = Depends(get_db)):
    entries = db.query(MileageEntry).filter(MileageEntry.vehicle_id == vehicle_id).all()
    vehicle = db.get(Vehicle, vehicle_id) or vehicle_id
    report = report_service.daily_coverage(entries, vehicle, date.today(), days)
    return {"success": True, "data": report}


@router.get("/reports/summary", response_model=ApiResponse[PeriodSummaryOut],
            summary="Shift and mileage totals for a period")
def period_summary(period: Period = "week", vehicle_id: Optional[str] = None,
                   supervisor_name: Optional[str] = None, db: Session = Depends(get_db)):
    entries, vehicles = _load(db)
    summary = report_service.period_summary(entries, vehicles, period, date.today(),
                                            vehicle_id=vehicle_id, supervisor_name=supervisor_name)
    return {"success": True, "data": summary}


@router.get("/reports/dashboard", response_model=ApiResponse[DashboardOut], summary="Today at a glance")
def dashboard(db: Session = Depends(get_db)):
    entries, vehicles = _load(db)
    board = report_service.dashboard(entries, vehicles, datetime.now())
    return {"success": True, "data": DashboardOut.model_validate(board)}
