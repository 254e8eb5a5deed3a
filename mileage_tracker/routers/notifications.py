# mileage_tracker/routers/notifications.py
"""Push subscription registration and manual notification sending."""

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session
from mileage_tracker.config import settings
from mileage_tracker.database import get_db
from mileage_tracker.exceptions import ValidationError
from mileage_tracker.schemas.common import ApiResponse
from mileage_tracker.schemas.notification import (
    NotificationSendIn, NotificationSendOut, PushSubscriptionIn, PushSubscriptionOut,
    SendStatusOut, SubscriptionStatusOut,
)
from mileage_tracker.services import notification_service

router = APIRouter()


@router.post("/notifications/subscribe", response_model=ApiResponse[PushSubscriptionOut],
             summary="Register a browser push subscription")
def subscribe(body: PushSubscriptionIn, db: Session = Depends(get_db)):
    sub = notification_service.subscribe(db, body.endpoint, body.keys)
    return {"success": True, "data": {
        "subscription_id": sub.id,
        "message": "Successfully subscribed to push notifications",
    }}


@router.get("/notifications/subscribe", response_model=ApiResponse[SubscriptionStatusOut],
            summary="Push subscription count")
def subscription_status(db: Session = Depends(get_db)):
    return {"success": True, "data": {
        "total_subscriptions": notification_service.subscription_count(db),
        "message": "Push notification service is running",
    }}


@router.post("/notifications/send", response_model=ApiResponse[NotificationSendOut],
             summary="Send a notification")
def send_notification(body: NotificationSendIn, background_tasks: BackgroundTasks,
                      db: Session = Depends(get_db)):
    """Free-form (title + body) or from a named template. Delivery happens after the response."""
    if body.template:
        payload = notification_service.from_template(body.template, body.params)
        if body.data:
            payload.data.update(body.data)
    elif body.title and body.body:
        payload = notification_service.custom(body.title, body.body, body.data)
    else:
        raise ValidationError("title and body are required when no template is given")

    if body.target_type:
        payload.data.update({"targetType": body.target_type, "targetId": body.target_id})

    background_tasks.add_task(notification_service.dispatch, payload)
    return {"success": True, "data": {
        "message": "Notification queued",
        "recipients": notification_service.subscription_count(db),
        "payload": payload.to_dict(),
    }}


@router.get("/notifications/send", response_model=ApiResponse[SendStatusOut],
            summary="Notification sender status")
def send_status():
    return {"success": True, "data": {
        "message": "Notification sending service is ready",
        "vapid_configured": settings.VAPID_CONFIGURED,
    }}
