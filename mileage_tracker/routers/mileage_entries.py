# mileage_tracker/routers/mileage_entries.py
"""
Mileage entries — the shift lifecycle over HTTP.
POST   /mileage-entries       → start a shift
PUT    /mileage-entries/{id}  → end a shift (endMileage on an active entry) or edit
DELETE /mileage-entries/{id}  → administrative removal
"""

from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from mileage_tracker.database import get_db
from mileage_tracker.schemas.common import ApiResponse
from mileage_tracker.schemas.mileage_entry import EntryStatus, MileageEntryOut, MileageEntryUpdate, ShiftStart
from mileage_tracker.services import entry_service, notification_service, roster_service

router = APIRouter()


def _completion_notifier(db: Session, background_tasks: BackgroundTasks):
    """Queue a 'shift completed' notification to run after the response is sent."""
    def notify(entry):
        vehicle = roster_service.find_vehicle(db, entry.vehicle_id)
        payload = notification_service.shift_completed(entry, vehicle.name if vehicle else None)
        background_tasks.add_task(notification_service.dispatch, payload)
    return notify


@router.get("/mileage-entries", response_model=ApiResponse[list[MileageEntryOut]], summary="List mileage entries")
def list_entries(vehicle_id: Optional[str] = None, supervisor_name: Optional[str] = None,
                 status: Optional[EntryStatus] = None, limit: Optional[int] = Query(None, ge=1),
                 db: Session = Depends(get_db)):
    """All entries, newest first. Filter by vehicle_id, supervisor_name or status."""
    entries = entry_service.list_entries(db, vehicle_id=vehicle_id, supervisor_name=supervisor_name,
                                         status=status, limit=limit)
    return {"success": True, "data": entries}


@router.get("/mileage-entries/active", response_model=ApiResponse[list[MileageEntryOut]],
            summary="Shifts currently in progress")
def list_active_entries(db: Session = Depends(get_db)):
    return {"success": True, "data": entry_service.list_entries(db, status="active")}


@router.get("/mileage-entries/{entry_id}", response_model=ApiResponse[MileageEntryOut], summary="Get one entry")
def get_entry(entry_id: str, db: Session = Depends(get_db)):
    return {"success": True, "data": entry_service.get_entry(db, entry_id)}


@router.post("/mileage-entries", status_code=201, response_model=ApiResponse[MileageEntryOut],
             summary="Start a shift")
def start_shift(body: ShiftStart, db: Session = Depends(get_db)):
    """
    Opens an active entry. shift defaults to the current wall-clock shift,
    date is the day the shift starts. One active shift per vehicle.
    """
    entry = entry_service.start_shift(db, body)
    return {"success": True, "data": entry}


@router.put("/mileage-entries/{entry_id}", response_model=ApiResponse[MileageEntryOut],
            summary="End a shift or edit an entry")
def update_entry(entry_id: str, body: MileageEntryUpdate, background_tasks: BackgroundTasks,
                 db: Session = Depends(get_db)):
    """
    endMileage on an active entry completes the shift and recomputes totalMiles.
    totalMiles in the request body is ignored.
    """
    entry = entry_service.update_entry(db, entry_id, body,
                                       notifier=_completion_notifier(db, background_tasks))
    return {"success": True, "data": entry}


@router.delete("/mileage-entries/{entry_id}", response_model=ApiResponse[MileageEntryOut],
               summary="Delete an entry")
def delete_entry(entry_id: str, db: Session = Depends(get_db)):
    return {"success": True, "data": entry_service.delete_entry(db, entry_id)}
