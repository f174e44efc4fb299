"""
Notification and email configuration routes (admin)
"""
from fastapi import APIRouter, HTTPException, Depends, BackgroundTasks
from typing import Optional

from core.config import (
    RESEND_API_KEY, SENDER_EMAIL, SECRET_PLACEHOLDER,
    NOTIFICATION_DEFAULT_LIMIT, NOTIFICATION_PAGE_LIMIT
)
from core.database import db
from core.dependencies import get_admin_user
from models.notification import NotificationCreate, Notification, EmailConfig, EmailTest
from services.audit import log_admin_action
from services.email import get_email_settings, get_email_template, send_email
from services.notifications import create_notification, deliver_notification, build_album_notification
from utils.helpers import clamp_limit, clamp_offset, utc_now_iso

router = APIRouter(prefix="/api/admin/notifications", tags=["notifications"])


async def lookup_by_ids(collection, ids: set, fields: tuple) -> dict:
    if not ids:
        return {}
    docs = await collection.find({"id": {"$in": list(ids)}}, {"_id": 0}).to_list(len(ids))
    return {d["id"]: {f: d.get(f) for f in fields} for d in docs}


@router.get("")
async def get_notifications(
    status: Optional[str] = None,
    type: Optional[str] = None,
    customer_id: Optional[str] = None,
    album_id: Optional[str] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    admin: dict = Depends(get_admin_user)
):
    """Notification history, newest first"""
    limit = clamp_limit(limit, NOTIFICATION_DEFAULT_LIMIT, NOTIFICATION_PAGE_LIMIT)
    offset = clamp_offset(offset)

    query = {}
    if status:
        query["status"] = status
    if type:
        query["type"] = type
    if customer_id:
        query["customer_id"] = customer_id
    if album_id:
        query["album_id"] = album_id

    total = await db.notifications.count_documents(query)
    notifications = await db.notifications.find(query, {"_id": 0}).sort("created_at", -1).skip(offset).limit(limit).to_list(limit)

    customers = await lookup_by_ids(
        db.customers, {n["customer_id"] for n in notifications if n.get("customer_id")}, ("name", "email")
    )
    albums = await lookup_by_ids(
        db.albums, {n["album_id"] for n in notifications if n.get("album_id")}, ("title", "slug")
    )

    formatted = [
        Notification(
            **{k: v for k, v in n.items() if k not in ("customer_id", "album_id")},
            customer=customers.get(n.get("customer_id")),
            album=albums.get(n.get("album_id"))
        ).model_dump()
        for n in notifications
    ]

    return {
        "success": True,
        "data": {
            "notifications": formatted,
            "total": total,
            "limit": limit,
            "offset": offset,
        },
    }


@router.post("", response_model=Notification)
async def send_notification(data: NotificationCreate, background_tasks: BackgroundTasks,
                            admin: dict = Depends(get_admin_user)):
    """Queue an email to a customer about an album"""
    album = None
    if data.album_id:
        album = await db.albums.find_one({"id": data.album_id}, {"_id": 0})
        if not album:
            raise HTTPException(status_code=404, detail="Album not found")
    elif data.type in ("album_ready", "reminder"):
        raise HTTPException(status_code=400, detail=f"{data.type} notifications need an album")

    customer = None
    if data.customer_id:
        customer = await db.customers.find_one({"id": data.customer_id}, {"_id": 0})
        if not customer:
            raise HTTPException(status_code=404, detail="Customer not found")

    if data.type == "custom" and not data.message:
        raise HTTPException(status_code=400, detail="Custom notifications need a message")

    recipient = data.recipient or (customer or {}).get("email")
    if not recipient:
        raise HTTPException(status_code=400, detail="No recipient email address")

    subject, html = build_album_notification(data.type, album, customer, data.message, data.subject)
    notification = await create_notification(
        data.type, recipient, subject, customer_id=data.customer_id, album_id=data.album_id
    )
    background_tasks.add_task(deliver_notification, notification["id"], html)
    await log_admin_action("notification.send", "notification", notification["id"], admin,
                           {"type": data.type, "recipient": recipient})

    return Notification(
        **{k: v for k, v in notification.items() if k not in ("customer_id", "album_id")},
        customer={"name": customer.get("name"), "email": customer.get("email")} if customer else None,
        album={"title": album["title"], "slug": album["slug"]} if album else None
    )


# ============ EMAIL CONFIG ============

@router.get("/email-config")
async def get_email_config(admin: dict = Depends(get_admin_user)):
    config = await db.email_config.find_one({}, {"_id": 0})
    env_config = {
        "from_email": SENDER_EMAIL,
        "has_env_config": bool(RESEND_API_KEY),
    }
    if config:
        config["api_key"] = SECRET_PLACEHOLDER if config.get("api_key") else ""
    return {"success": True, "data": {"config": config, "env_config": env_config}}


@router.post("/email-config")
async def save_email_config(config: EmailConfig, admin: dict = Depends(get_admin_user)):
    existing = await db.email_config.find_one({}, {"_id": 0})
    now = utc_now_iso()

    update_data = {
        "from_email": config.from_email,
        "from_name": config.from_name,
        "is_active": config.is_active,
        "updated_at": now,
    }
    # The masked placeholder means "keep the stored key"
    if config.api_key != SECRET_PLACEHOLDER:
        update_data["api_key"] = config.api_key

    if existing:
        await db.email_config.update_one({"id": existing["id"]}, {"$set": update_data})
    else:
        if "api_key" not in update_data:
            raise HTTPException(status_code=400, detail="An API key is required")
        await db.email_config.insert_one({"id": "default", "created_at": now, **update_data})

    await log_admin_action("email_config.update", "email_config", "default", admin,
                           {"from_email": config.from_email, "is_active": config.is_active})
    return {"success": True, "message": "Email configuration saved"}


@router.put("/email-config")
async def test_email_config(data: EmailTest, admin: dict = Depends(get_admin_user)):
    """Send a test email with the active configuration"""
    settings = await get_email_settings()
    if not settings.get("api_key"):
        raise HTTPException(status_code=400, detail="Email service not configured")

    subject, html = get_email_template("config_test", {"sent_at": utc_now_iso()})
    response, error = await send_email(data.test_email, subject, html, settings)
    if error:
        raise HTTPException(status_code=500, detail=f"Email sending failed: {error}")
    return {"success": True, "message": f"Test email sent to {data.test_email}"}
