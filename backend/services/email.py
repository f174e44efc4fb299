"""
Email notification services
"""
import resend
from core.config import RESEND_API_KEY, SENDER_EMAIL, FRONTEND_URL, logger
from core.database import db


def get_env_email_settings() -> dict:
    """Email settings taken from environment variables"""
    return {
        "api_key": RESEND_API_KEY,
        "from_email": SENDER_EMAIL,
        "from_name": None,
        "source": "env",
    }


async def get_email_settings() -> dict:
    """Active stored email config, falling back to the environment"""
    stored = await db.email_config.find_one({"is_active": True}, {"_id": 0})
    if stored and stored.get("api_key"):
        return {
            "api_key": stored["api_key"],
            "from_email": stored.get("from_email") or SENDER_EMAIL,
            "from_name": stored.get("from_name"),
            "source": "database",
        }
    return get_env_email_settings()


async def send_email(to_email: str, subject: str, html_content: str, settings: dict = None) -> tuple:
    """
    Send email using Resend.

    Returns (response, error). error is None on success; transport failures
    are logged and reported, never raised.
    """
    settings = settings or get_env_email_settings()
    if not settings.get("api_key"):
        logger.warning("Email API key not configured, skipping email")
        return None, "Email service not configured"

    sender = settings["from_email"]
    if settings.get("from_name"):
        sender = f"{settings['from_name']} <{sender}>"

    try:
        resend.api_key = settings["api_key"]
        params = {
            "from": sender,
            "to": [to_email],
            "subject": subject,
            "html": html_content
        }
        response = resend.Emails.send(params)
        logger.info(f"Email sent to {to_email}: {subject}")
        return response, None
    except Exception as e:
        logger.error(f"Failed to send email to {to_email}: {e}")
        return None, str(e)


def album_url(slug: str) -> str:
    return f"{FRONTEND_URL.rstrip('/')}/album/{slug}" if slug else FRONTEND_URL


def get_email_template(template_type: str, data: dict) -> tuple:
    """Get email subject and HTML content for different notification types"""

    if template_type == "album_ready":
        subject = f"📸 Your album is ready: {data.get('album_title', 'Your photos')}"
        html = f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
            <h2 style="color: #d4a574;">Your Photos Are Ready</h2>
            <p>Hi {data.get('customer_name') or 'there'},</p>
            <p>Your album <strong>{data.get('album_title', '')}</strong> has been delivered.</p>
            <div style="background: #f3f4f6; padding: 16px; border-radius: 8px; margin: 16px 0;">
                <p><a href="{album_url(data.get('album_slug'))}">View your album</a></p>
            </div>
            {"<p>" + data['message'] + "</p>" if data.get('message') else ""}
        </div>
        """
        return subject, html

    elif template_type == "reminder":
        subject = f"⏰ Reminder: {data.get('album_title', 'your album')}"
        html = f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
            <h2 style="color: #f59e0b;">A Friendly Reminder</h2>
            <p>Hi {data.get('customer_name') or 'there'},</p>
            <p>Your album <strong>{data.get('album_title', '')}</strong> is waiting for you.</p>
            <div style="background: #fef3c7; padding: 16px; border-radius: 8px; margin: 16px 0;">
                <p><a href="{album_url(data.get('album_slug'))}">Open the album</a></p>
            </div>
            {"<p>" + data['message'] + "</p>" if data.get('message') else ""}
        </div>
        """
        return subject, html

    elif template_type == "custom":
        subject = data.get('album_title') or "A message from your photographer"
        html = f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
            <p>Hi {data.get('customer_name') or 'there'},</p>
            <p>{data.get('message') or ''}</p>
        </div>
        """
        return subject, html

    elif template_type == "config_test":
        subject = "PIS email configuration test"
        html = f"""
        <div style="font-family: sans-serif; padding: 20px;">
            <h2>🎉 Email is configured!</h2>
            <p>If you received this message, the PIS email service is working.</p>
            <p style="color: #666; font-size: 12px;">Sent at: {data.get('sent_at', '')}</p>
        </div>
        """
        return subject, html

    return "Notification", "<p>You have a new notification.</p>"
