# mileage_tracker/models/vehicle.py
"""
Vehicle roster table.
Plates are stored trimmed + uppercased; the unique index is the final guard
against duplicates. Mileage entries reference vehicles by id only, so
deleting a vehicle leaves historical entries untouched.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime
from mileage_tracker.database import Base


def new_id() -> str:
    return uuid.uuid4().hex


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(100), nullable=False)
    license_plate = Column(String(20), unique=True, nullable=False, index=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Vehicle {self.license_plate} name={self.name} active={self.is_active}>"
