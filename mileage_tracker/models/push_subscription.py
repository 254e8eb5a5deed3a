# mileage_tracker/models/push_subscription.py
"""
Browser push subscriptions.
Kept in the database so every worker process and restart sees the same set.
"""

from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, JSON
from mileage_tracker.database import Base
from mileage_tracker.models.vehicle import new_id


class PushSubscription(Base):
    __tablename__ = "push_subscriptions"

    id = Column(String(32), primary_key=True, default=new_id)
    endpoint = Column(Text, unique=True, nullable=False)
    keys = Column(JSON)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<PushSubscription {self.id}>"
