"""
Notification services
"""
import uuid
from datetime import datetime, timezone
from core.database import db
from core.config import logger
from .email import send_email, get_email_template, get_email_settings


async def create_notification(notification_type: str, recipient: str, subject: str,
                              customer_id: str = None, album_id: str = None, channel: str = "email"):
    """Create a pending notification record"""
    notification = {
        "id": str(uuid.uuid4()),
        "type": notification_type,
        "channel": channel,
        "recipient": recipient,
        "subject": subject,
        "status": "pending",
        "sent_at": None,
        "error_message": None,
        "customer_id": customer_id,
        "album_id": album_id,
        "created_at": datetime.now(timezone.utc).isoformat()
    }
    await db.notifications.insert_one(dict(notification))
    return notification


async def deliver_notification(notification_id: str, html_content: str):
    """Send a pending notification and record the outcome"""
    notification = await db.notifications.find_one({"id": notification_id}, {"_id": 0})
    if not notification:
        logger.warning(f"Notification {notification_id} disappeared before delivery")
        return

    settings = await get_email_settings()
    response, error = await send_email(notification["recipient"], notification["subject"], html_content, settings)

    if error is None:
        update = {"status": "sent", "sent_at": datetime.now(timezone.utc).isoformat(), "error_message": None}
    else:
        update = {"status": "failed", "error_message": error}
    await db.notifications.update_one({"id": notification_id}, {"$set": update})


def build_album_notification(notification_type: str, album: dict, customer: dict = None,
                             message: str = None, subject: str = None) -> tuple:
    """Subject and HTML for an album notification email"""
    data = {
        "customer_name": (customer or {}).get("name"),
        "album_title": album.get("title") if album else None,
        "album_slug": album.get("slug") if album else None,
        "message": message,
    }
    default_subject, html = get_email_template(notification_type, data)
    return subject or default_subject, html
