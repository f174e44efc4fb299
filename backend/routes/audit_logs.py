"""
Audit log routes (admin)
"""
from fastapi import APIRouter, Depends
from typing import Optional

from core.config import AUDIT_LOG_PAGE_LIMIT
from core.database import db
from core.dependencies import get_admin_user
from models.schemas import AuditLog, AuditLogPage
from utils.helpers import clamp_limit, clamp_offset

router = APIRouter(prefix="/api/admin/audit-logs", tags=["audit-logs"])


@router.get("", response_model=AuditLogPage)
async def get_audit_logs(
    action: Optional[str] = None,
    resource_type: Optional[str] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    admin: dict = Depends(get_admin_user)
):
    limit = clamp_limit(limit, 50, AUDIT_LOG_PAGE_LIMIT)
    offset = clamp_offset(offset)

    query = {}
    if action:
        query["action"] = action
    if resource_type:
        query["resource_type"] = resource_type

    total = await db.audit_logs.count_documents(query)
    logs = await db.audit_logs.find(query, {"_id": 0}).sort("created_at", -1).skip(offset).limit(limit).to_list(limit)
    return AuditLogPage(logs=[AuditLog(**log) for log in logs], total=total, limit=limit, offset=offset)
