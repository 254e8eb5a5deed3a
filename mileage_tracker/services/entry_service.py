# mileage_tracker/services/entry_service.py
"""
Shift lifecycle: the single authority for creating and completing mileage entries.

State machine:
  (none) ──StartShift──▶ active ──EndShift──▶ completed

  - shift (first/second) is fixed at creation and never changes
  - completed never goes back to active
  - total_miles is always recomputed here from end_mileage - start_mileage;
    whatever the client sends for it is ignored
  - at most one active entry per vehicle (checked here, enforced by the
    partial unique index on mileage_entries.vehicle_id)
"""

from datetime import datetime
from typing import Callable, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from mileage_tracker.config import settings
from mileage_tracker.exceptions import ConflictError, MileageTrackerError, NotFoundError, ValidationError
from mileage_tracker.models.mileage_entry import MileageEntry, STATUS_ACTIVE, STATUS_COMPLETED
from mileage_tracker.schemas.mileage_entry import MileageEntryUpdate, ShiftEnd, ShiftStart
from mileage_tracker.services import roster_service
from mileage_tracker.utils.logger import get_logger
from mileage_tracker.utils.shifts import current_shift

logger = get_logger(__name__)

CompletionNotifier = Callable[[MileageEntry], None]


def get_entry(db: Session, entry_id: str) -> MileageEntry:
    entry = db.get(MileageEntry, entry_id)
    if not entry:
        raise NotFoundError("Mileage entry not found")
    return entry


def list_entries(db: Session, vehicle_id: str = None, supervisor_name: str = None,
                 status: str = None, limit: Optional[int] = None) -> list[MileageEntry]:
    """Entries newest first, optionally filtered."""
    q = db.query(MileageEntry)
    if vehicle_id:
        q = q.filter(MileageEntry.vehicle_id == vehicle_id)
    if supervisor_name:
        q = q.filter(MileageEntry.supervisor_name == supervisor_name)
    if status:
        q = q.filter(MileageEntry.status == status)
    q = q.order_by(MileageEntry.created_at.desc())
    if limit:
        q = q.limit(limit)
    return q.all()


def find_active_entry(db: Session, vehicle_id: str) -> Optional[MileageEntry]:
    return (
        db.query(MileageEntry)
        .filter(MileageEntry.vehicle_id == vehicle_id, MileageEntry.status == STATUS_ACTIVE)
        .first()
    )


def _check_roster_references(db: Session, vehicle_id: str, supervisor_name: str):
    vehicle = roster_service.find_vehicle(db, vehicle_id)
    if vehicle is None:
        if settings.STRICT_ROSTER_REFERENCES:
            raise ValidationError(f"Unknown vehicle {vehicle_id}")
        logger.warning(f"[SHIFT] Starting shift for unregistered vehicle id {vehicle_id}")
    elif not vehicle.is_active:
        raise ValidationError(f"Vehicle {vehicle.name} is inactive")

    supervisors = roster_service.find_supervisors_by_name(db, supervisor_name)
    if not supervisors:
        if settings.STRICT_ROSTER_REFERENCES:
            raise ValidationError(f"Unknown supervisor {supervisor_name}")
        logger.warning(f"[SHIFT] Starting shift for unregistered supervisor {supervisor_name}")
    elif not any(s.is_active for s in supervisors):
        raise ValidationError(f"Supervisor {supervisor_name} is inactive")


def start_shift(db: Session, data: ShiftStart, now: Optional[datetime] = None) -> MileageEntry:
    """
    Open a new shift for a vehicle.
    Raises ValidationError for inactive roster records and ConflictError if the
    vehicle already has an active shift.
    """
    now = now or datetime.now()
    _check_roster_references(db, data.vehicle_id, data.supervisor_name)

    if find_active_entry(db, data.vehicle_id):
        logger.warning(f"[SHIFT] Vehicle {data.vehicle_id} already has an active shift")
        raise ConflictError("Vehicle already has an active shift")

    entry = MileageEntry(
        vehicle_id=data.vehicle_id,
        supervisor_name=data.supervisor_name,
        shift=data.shift or current_shift(now),
        date=now.date(),
        start_time=now,
        start_mileage=data.start_mileage,
        notes=data.notes,
        status=STATUS_ACTIVE,
        start_condition=data.start_condition,
        start_condition_notes=data.start_condition_notes,
        start_photos=data.start_photos.as_stored() if data.start_photos else None,
    )
    db.add(entry)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with another StartShift for the same vehicle
        db.rollback()
        raise ConflictError("Vehicle already has an active shift")
    db.refresh(entry)

    logger.info(
        f"[SHIFT] Started {entry.id} | vehicle={entry.vehicle_id} | "
        f"supervisor={entry.supervisor_name} | shift={entry.shift} | start={entry.start_mileage}"
    )
    return entry


def end_shift(db: Session, entry_id: str, data: ShiftEnd, now: Optional[datetime] = None,
              notifier: Optional[CompletionNotifier] = None) -> MileageEntry:
    """
    Complete an active shift.
    NotFoundError if the entry is missing or already completed (nothing is
    written); ValidationError if end_mileage < start_mileage.
    """
    entry = db.get(MileageEntry, entry_id)
    if not entry or entry.status != STATUS_ACTIVE:
        logger.warning(f"[SHIFT] End rejected: no active entry {entry_id}")
        raise NotFoundError("Active mileage entry not found")

    if data.end_mileage < entry.start_mileage:
        logger.warning(
            f"[SHIFT] End rejected for {entry_id}: {data.end_mileage} < start {entry.start_mileage}"
        )
        raise ValidationError("Ending mileage cannot be less than starting mileage")

    entry.end_time = now or datetime.now()
    entry.end_mileage = data.end_mileage
    entry.total_miles = data.end_mileage - entry.start_mileage
    if data.notes is not None:
        entry.notes = data.notes
    entry.end_condition = data.end_condition
    entry.end_condition_notes = data.end_condition_notes
    entry.end_photos = data.end_photos.as_stored() if data.end_photos else None
    entry.status = STATUS_COMPLETED
    db.commit()
    db.refresh(entry)

    logger.info(f"[SHIFT] Completed {entry.id} | vehicle={entry.vehicle_id} | miles={entry.total_miles}")

    if notifier:
        try:
            notifier(entry)
        except Exception as e:
            logger.error(f"[SHIFT] Completion notifier failed for {entry.id}: {e}")
    return entry


def update_entry(db: Session, entry_id: str, data: MileageEntryUpdate, now: Optional[datetime] = None,
                 notifier: Optional[CompletionNotifier] = None) -> MileageEntry:
    """
    Partial edit of an entry (PUT).
    endMileage on an active entry ends the shift; everything else is an edit
    of mutable fields that keeps the lifecycle invariants intact.
    """
    entry = get_entry(db, entry_id)
    fields = data.model_dump(exclude_unset=True)

    if "shift" in fields and fields["shift"] != entry.shift:
        raise ValidationError("Shift cannot be changed after the entry is created")
    if fields.get("status") == STATUS_ACTIVE and entry.status == STATUS_COMPLETED:
        raise ValidationError("A completed entry cannot be reopened")

    if entry.status == STATUS_ACTIVE and data.end_mileage is not None:
        if data.start_mileage is not None and data.start_mileage != entry.start_mileage:
            entry.start_mileage = data.start_mileage
        if data.supervisor_name is not None:
            entry.supervisor_name = data.supervisor_name
        end = ShiftEnd(
            end_mileage=data.end_mileage,
            notes=data.notes,
            end_condition=data.end_condition,
            end_condition_notes=data.end_condition_notes,
            end_photos=data.end_photos,
        )
        try:
            return end_shift(db, entry_id, end, now=now, notifier=notifier)
        except MileageTrackerError:
            db.rollback()
            raise

    if fields.get("status") == STATUS_COMPLETED and entry.status == STATUS_ACTIVE:
        raise ValidationError("Ending mileage is required to complete a shift")
    if entry.status == STATUS_ACTIVE and any(
        k in fields for k in ("end_condition", "end_condition_notes", "end_photos")
    ):
        raise ValidationError("End-of-shift fields can only be set when the shift ends")

    # Readings are checked as a pair before anything on the entry is touched
    new_start = data.start_mileage if data.start_mileage is not None else entry.start_mileage
    new_end = data.end_mileage if data.end_mileage is not None else entry.end_mileage
    if new_end is not None and new_end < new_start:
        raise ValidationError("Ending mileage cannot be less than starting mileage")

    if data.supervisor_name is not None:
        entry.supervisor_name = data.supervisor_name
    if "notes" in fields:
        entry.notes = data.notes
    for name in ("start_condition", "start_condition_notes", "end_condition", "end_condition_notes"):
        if name in fields:
            setattr(entry, name, fields[name])
    if "start_photos" in fields:
        entry.start_photos = data.start_photos.as_stored() if data.start_photos else None
    if "end_photos" in fields:
        entry.end_photos = data.end_photos.as_stored() if data.end_photos else None

    entry.start_mileage = new_start
    entry.end_mileage = new_end
    if new_end is not None:
        entry.total_miles = new_end - new_start

    db.commit()
    db.refresh(entry)
    logger.info(f"[SHIFT] Updated {entry.id} fields={sorted(fields)}")
    return entry


def delete_entry(db: Session, entry_id: str) -> MileageEntry:
    """Permanent removal, no audit trail. Active entries only when allowed by config."""
    entry = get_entry(db, entry_id)
    if entry.status == STATUS_ACTIVE and not settings.ALLOW_ACTIVE_ENTRY_DELETION:
        raise ValidationError("Active shifts cannot be deleted; end the shift first")
    db.delete(entry)
    db.commit()
    logger.info(f"[SHIFT] Deleted {entry_id} (status was {entry.status})")
    return entry
