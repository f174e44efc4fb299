"""
Admin, translation, audit and backup Pydantic models
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class AdminLogin(BaseModel):
    username: str
    password: str


class AdminToken(BaseModel):
    access_token: str
    token_type: str
    is_admin: bool


class TranslationEntry(BaseModel):
    locale: str
    key: str
    value: str
    updated_at: str


class TranslationUpdate(BaseModel):
    """Translation overrides for one locale, keyed by message key"""
    entries: Dict[str, str] = Field(min_length=1)


class AuditLog(BaseModel):
    id: str
    action: str
    resource_type: str
    resource_id: Optional[str] = None
    actor: str
    details: dict = {}
    created_at: str


class AuditLogPage(BaseModel):
    logs: List[AuditLog]
    total: int
    limit: int
    offset: int


class StyleTemplatePreviewRequest(BaseModel):
    template_id: Optional[str] = None
    previous_template_id: Optional[str] = None  # Template currently applied, reverted first


class BackupSnapshot(BaseModel):
    version: int
    exported_at: Optional[str] = None
    albums: List[dict] = []
    translations: List[dict] = []
    email_config: Optional[dict] = None
