# mileage_tracker/schemas/notification.py
from pydantic import BaseModel, Field
from typing import Any, Optional
from mileage_tracker.schemas.common import CamelModel


class PushSubscriptionIn(CamelModel):
    """Browser PushSubscription.toJSON() shape."""
    endpoint: str = Field(min_length=1)
    keys: Optional[dict[str, str]] = None
    expiration_time: Optional[float] = None


class PushSubscriptionOut(CamelModel):
    subscription_id: str
    message: str


class SubscriptionStatusOut(CamelModel):
    total_subscriptions: int
    message: str


class NotificationSendIn(CamelModel):
    """Either a free-form title/body or a named template with params."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    body: Optional[str] = Field(None, min_length=1, max_length=1000)
    template: Optional[str] = None
    params: dict[str, Any] = Field(default_factory=dict)
    target_type: Optional[str] = None
    target_id: Optional[str] = None
    data: Optional[dict[str, Any]] = None


class NotificationAction(BaseModel):
    action: str
    title: str


class NotificationPayloadOut(CamelModel):
    title: str
    body: str
    icon: str
    badge: str
    tag: Optional[str]
    data: dict[str, Any]
    actions: list[NotificationAction]


class NotificationSendOut(CamelModel):
    message: str
    recipients: int
    payload: NotificationPayloadOut


class SendStatusOut(CamelModel):
    message: str
    vapid_configured: bool
