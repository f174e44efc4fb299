"""
Notification-related Pydantic models
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Literal, Optional


class NotificationCreate(BaseModel):
    """Send a notification to a customer about an album"""
    type: Literal["album_ready", "reminder", "custom"]
    album_id: Optional[str] = None
    customer_id: Optional[str] = None
    recipient: Optional[EmailStr] = None  # Defaults to the customer's email
    subject: Optional[str] = None
    message: Optional[str] = None


class Notification(BaseModel):
    id: str
    type: str
    channel: str = "email"
    recipient: str
    subject: str
    status: str
    sent_at: Optional[str] = None
    error_message: Optional[str] = None
    created_at: str
    customer: Optional[dict] = None  # {"name", "email"}
    album: Optional[dict] = None  # {"title", "slug"}


class EmailConfig(BaseModel):
    """Email transport configuration"""
    api_key: str = Field(min_length=1)
    from_email: EmailStr
    from_name: Optional[str] = None
    is_active: bool = True


class EmailTest(BaseModel):
    test_email: EmailStr
