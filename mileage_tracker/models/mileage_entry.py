# mileage_tracker/models/mileage_entry.py
"""
Mileage entry table — one row per shift.
Created `active` by StartShift, completed exactly once by EndShift.

vehicle_id is deliberately NOT a foreign key: vehicles can be deleted while
their history stays. supervisor_name is a snapshot of who ran the shift,
not a live reference to the supervisors table.

The partial unique index allows at most one active entry per vehicle, so two
concurrent shift starts for the same vehicle cannot both commit.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Date, Text, JSON, Index, text
from mileage_tracker.database import Base
from mileage_tracker.models.vehicle import new_id

STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"

CONDITION_RATINGS = ("excellent", "good", "fair", "poor", "needs_attention")

PHOTO_POSITIONS = ("front", "back", "leftSide", "rightSide", "frontInterior", "backInterior")


class MileageEntry(Base):
    __tablename__ = "mileage_entries"
    __table_args__ = (
        Index(
            "uq_mileage_entries_active_vehicle",
            "vehicle_id",
            unique=True,
            sqlite_where=text("status = 'active'"),
            postgresql_where=text("status = 'active'"),
        ),
        Index("ix_mileage_entries_vehicle_date", "vehicle_id", "date"),
        Index("ix_mileage_entries_supervisor_date", "supervisor_name", "date"),
        Index("ix_mileage_entries_shift_date", "shift", "date"),
    )

    id = Column(String(32), primary_key=True, default=new_id)
    vehicle_id = Column(String(32), nullable=False)
    supervisor_name = Column(String(100), nullable=False)
    shift = Column(String(10), nullable=False)             # first | second
    date = Column(Date, nullable=False, index=True)        # calendar day the shift opened
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime)
    start_mileage = Column(Integer, nullable=False)
    end_mileage = Column(Integer)
    total_miles = Column(Integer)                          # end_mileage - start_mileage
    notes = Column(Text)
    status = Column(String(20), nullable=False, default=STATUS_ACTIVE, index=True)
    start_condition = Column(String(20))
    start_condition_notes = Column(String(200))
    end_condition = Column(String(20))
    end_condition_notes = Column(String(200))
    start_photos = Column(JSON)                            # {position: image reference}
    end_photos = Column(JSON)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @property
    def is_active(self) -> bool:
        return self.status == STATUS_ACTIVE

    def __repr__(self):
        return f"<MileageEntry {self.id} vehicle={self.vehicle_id} status={self.status}>"
