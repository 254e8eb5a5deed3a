# mileage_tracker/services/notification_service.py
"""
Notification dispatcher + push subscription store.

Delivery is fire-and-forget: every notification is logged, and when
NOTIFY_WEBHOOK_URL is set it is also POSTed there as JSON. A failed
delivery is logged and dropped; nothing is retried and callers never see
the error. Routers schedule dispatch() as a FastAPI background task so the
HTTP response never waits on it.
"""

import httpx
from dataclasses import asdict, dataclass, field
from sqlalchemy.orm import Session
from mileage_tracker.config import settings
from mileage_tracker.exceptions import ValidationError
from mileage_tracker.models.push_subscription import PushSubscription
from mileage_tracker.utils.logger import get_logger
from mileage_tracker.utils.shifts import shift_label

logger = get_logger(__name__)

ICON = "/icon-192x192.png"
BADGE = "/icon-72x72.png"


@dataclass
class NotificationPayload:
    title: str
    body: str
    tag: str = None
    data: dict = field(default_factory=dict)
    actions: list = field(default_factory=list)
    icon: str = ICON
    badge: str = BADGE

    def to_dict(self) -> dict:
        return asdict(self)


def _actions(*pairs) -> list[dict]:
    return [{"action": action, "title": title} for action, title in pairs]


# ── Templates ────────────────────────────────────────────────────────────────

def shift_completed(entry, vehicle_name: str = None) -> NotificationPayload:
    name = vehicle_name or entry.vehicle_id
    return NotificationPayload(
        title="✅ Shift Completed",
        body=(f"{entry.supervisor_name} completed {shift_label(entry.shift)} on {name}: "
              f"{entry.total_miles} miles logged."),
        tag="shift-completed",
        data={"entryId": entry.id, "vehicleId": entry.vehicle_id, "totalMiles": entry.total_miles},
        actions=_actions(("view", "View"), ("dismiss", "Dismiss")),
    )


def shift_starting_soon(supervisor_name: str) -> NotificationPayload:
    return NotificationPayload(
        title="🚗 Shift Starting Soon",
        body=(f"Hi {supervisor_name}, your shift starts in 15 minutes. "
              f"Don't forget to log your starting mileage!"),
        tag="shift-start",
        actions=_actions(("start-shift", "Start Shift"), ("dismiss", "Dismiss")),
    )


def end_shift_reminder(vehicle_name: str) -> NotificationPayload:
    return NotificationPayload(
        title="⏰ End Shift Reminder",
        body=f"Please log your ending mileage for {vehicle_name} and complete your shift.",
        tag="shift-end",
        actions=_actions(("end-shift", "End Shift"), ("snooze", "Remind Later")),
    )


def missing_mileage(day: str) -> NotificationPayload:
    return NotificationPayload(
        title="📋 Missing Mileage Entry",
        body=f"You haven't logged mileage for {day}. Please update your records.",
        tag="missing-mileage",
        data={"date": day},
        actions=_actions(("add-mileage", "Add Mileage"), ("dismiss", "Dismiss")),
    )


def vehicle_inspection(vehicle_name: str) -> NotificationPayload:
    return NotificationPayload(
        title="🔧 Vehicle Condition Check",
        body=f"Please inspect and report the condition of {vehicle_name} before starting your shift.",
        tag="vehicle-inspection",
        actions=_actions(("inspect-vehicle", "Inspect Now"), ("dismiss", "Already Done")),
    )


def vehicle_added(vehicle_name: str) -> NotificationPayload:
    return NotificationPayload(
        title="🚗 New Vehicle Added",
        body=f"{vehicle_name} has been added to the fleet and is available for shifts.",
        tag="vehicle-added",
    )


def emergency(message: str) -> NotificationPayload:
    return NotificationPayload(
        title="🚨 Emergency Alert",
        body=message,
        tag="emergency",
        actions=_actions(("acknowledge", "Acknowledge"), ("respond", "Respond")),
    )


def custom(title: str, body: str, data: dict = None) -> NotificationPayload:
    return NotificationPayload(
        title=title,
        body=body,
        data=data or {},
        actions=_actions(("view", "View"), ("dismiss", "Dismiss")),
    )


# Templates callable by name from POST /notifications/send
TEMPLATES = {
    "shift_starting_soon": shift_starting_soon,
    "end_shift_reminder": end_shift_reminder,
    "missing_mileage": missing_mileage,
    "vehicle_inspection": vehicle_inspection,
    "vehicle_added": vehicle_added,
    "emergency": emergency,
}


def from_template(name: str, params: dict) -> NotificationPayload:
    """Build a payload from a named template. ValidationError on bad name/params."""
    template = TEMPLATES.get(name)
    if template is None:
        raise ValidationError(f"Unknown notification template {name!r}")
    try:
        return template(**params)
    except TypeError:
        raise ValidationError(f"Invalid parameters for template {name!r}")


# ── Delivery ─────────────────────────────────────────────────────────────────

async def dispatch(payload: NotificationPayload) -> bool:
    """
    Log the notification and forward it to the webhook if one is configured.
    Returns True when the webhook accepted it (or none is configured).
    """
    logger.info(f"[NOTIFY] {payload.title} — {payload.body}")
    if not settings.NOTIFY_WEBHOOK_URL:
        return True

    try:
        async with httpx.AsyncClient(timeout=settings.NOTIFY_TIMEOUT_SECONDS) as client:
            response = await client.post(settings.NOTIFY_WEBHOOK_URL, json=payload.to_dict())
        if response.is_success:
            return True
        logger.warning(f"[NOTIFY] Webhook returned HTTP {response.status_code}")
        return False
    except httpx.HTTPError as e:
        logger.error(f"[NOTIFY] Webhook delivery failed: {e}")
        return False


# ── Subscriptions ────────────────────────────────────────────────────────────

def subscribe(db: Session, endpoint: str, keys: dict = None) -> PushSubscription:
    """Store a push subscription. Re-subscribing the same endpoint updates its keys."""
    sub = db.query(PushSubscription).filter(PushSubscription.endpoint == endpoint).first()
    if sub:
        sub.keys = keys
    else:
        sub = PushSubscription(endpoint=endpoint, keys=keys)
        db.add(sub)
    db.commit()
    db.refresh(sub)
    logger.info(f"[NOTIFY] Push subscription registered: {sub.id}")
    return sub


def subscription_count(db: Session) -> int:
    return db.query(PushSubscription).count()
