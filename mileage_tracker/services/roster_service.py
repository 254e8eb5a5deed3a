# mileage_tracker/services/roster_service.py
"""
Vehicle and supervisor rosters — uniqueness-constrained CRUD.
Both rosters behave the same way, so one set of functions serves both,
parameterised by a Roster describing the model and its unique key.

Uniqueness is checked up front for a readable error and enforced again by
the unique index on commit (IntegrityError → ConflictError).
"""

from dataclasses import dataclass
from typing import Callable, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from mileage_tracker.exceptions import ConflictError, NotFoundError
from mileage_tracker.models.vehicle import Vehicle
from mileage_tracker.models.supervisor import Supervisor
from mileage_tracker.schemas.vehicle import normalize_plate
from mileage_tracker.schemas.supervisor import normalize_badge
from mileage_tracker.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Roster:
    model: type
    key_field: str        # column holding the unique key
    key_label: str        # used in error messages
    noun: str
    normalize: Callable[[str], str]


VEHICLES = Roster(model=Vehicle, key_field="license_plate", key_label="License plate",
                  noun="Vehicle", normalize=normalize_plate)
SUPERVISORS = Roster(model=Supervisor, key_field="badge_number", key_label="Badge number",
                     noun="Supervisor", normalize=normalize_badge)


def list_records(db: Session, roster: Roster) -> list:
    """All records, active and inactive, newest first."""
    model = roster.model
    return db.query(model).order_by(model.created_at.desc()).all()


def list_available(db: Session, roster: Roster) -> list:
    """Active records only — the pick list for starting a shift."""
    model = roster.model
    return (
        db.query(model)
        .filter(model.is_active.is_(True))
        .order_by(model.created_at.desc())
        .all()
    )


def get_record(db: Session, roster: Roster, record_id: str):
    record = db.get(roster.model, record_id)
    if not record:
        raise NotFoundError(f"{roster.noun} not found")
    return record


def _find_by_key(db: Session, roster: Roster, key: str):
    column = getattr(roster.model, roster.key_field)
    return db.query(roster.model).filter(column == roster.normalize(key)).first()


def _commit_or_conflict(db: Session, roster: Roster, key: str):
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"[ROSTER] {roster.key_label} {key} collided on commit")
        raise ConflictError(f"{roster.key_label} already exists")


def create_record(db: Session, roster: Roster, fields: dict):
    """Create a roster record. ConflictError if the unique key is taken."""
    key = roster.normalize(fields[roster.key_field])
    if _find_by_key(db, roster, key):
        logger.warning(f"[ROSTER] Rejected duplicate {roster.key_label.lower()} {key}")
        raise ConflictError(f"{roster.key_label} already exists")

    record = roster.model(**{**fields, roster.key_field: key})
    db.add(record)
    _commit_or_conflict(db, roster, key)
    db.refresh(record)
    logger.info(f"[ROSTER] {roster.noun} created: {key} ({record.id})")
    return record


def update_record(db: Session, roster: Roster, record_id: str, fields: dict):
    """Partial update. The conflict check applies only when the key changes."""
    record = get_record(db, roster, record_id)

    new_key = fields.get(roster.key_field)
    if new_key is not None:
        new_key = roster.normalize(new_key)
        fields[roster.key_field] = new_key
        if new_key != getattr(record, roster.key_field):
            clash = _find_by_key(db, roster, new_key)
            if clash and clash.id != record.id:
                logger.warning(f"[ROSTER] Rejected {roster.key_label.lower()} change to {new_key}")
                raise ConflictError(f"{roster.key_label} already exists")

    for name, value in fields.items():
        if value is not None:
            setattr(record, name, value)

    _commit_or_conflict(db, roster, getattr(record, roster.key_field))
    db.refresh(record)
    logger.info(f"[ROSTER] {roster.noun} updated: {record.id} active={record.is_active}")
    return record


def delete_record(db: Session, roster: Roster, record_id: str):
    """
    Unconditional delete. Mileage entries keep their vehicle_id /
    supervisor_name — they become dangling, not cascaded.
    """
    record = get_record(db, roster, record_id)
    db.delete(record)
    db.commit()
    logger.info(f"[ROSTER] {roster.noun} deleted: {record_id}")
    return record


def find_vehicle(db: Session, vehicle_id: str) -> Optional[Vehicle]:
    return db.get(Vehicle, vehicle_id)


def find_supervisors_by_name(db: Session, name: str) -> list:
    return db.query(Supervisor).filter(Supervisor.name == name.strip()).all()
