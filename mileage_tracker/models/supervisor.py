# mileage_tracker/models/supervisor.py
"""Supervisor roster table. Badge numbers are unique (trimmed + uppercased)."""

from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime
from mileage_tracker.database import Base
from mileage_tracker.models.vehicle import new_id


class Supervisor(Base):
    __tablename__ = "supervisors"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False, index=True)
    badge_number = Column(String(20), unique=True, nullable=False, index=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Supervisor {self.badge_number} name={self.name} active={self.is_active}>"
