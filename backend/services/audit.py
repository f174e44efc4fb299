"""
Audit log services
"""
import uuid
from datetime import datetime, timezone
from core.database import db
from core.config import logger


async def log_admin_action(action: str, resource_type: str, resource_id: str = None,
                           actor: dict = None, details: dict = None):
    """Record an admin mutation in the audit log"""
    entry = {
        "id": str(uuid.uuid4()),
        "action": action,
        "resource_type": resource_type,
        "resource_id": resource_id,
        "actor": (actor or {}).get("username", "admin"),
        "details": details or {},
        "created_at": datetime.now(timezone.utc).isoformat()
    }
    await db.audit_logs.insert_one(dict(entry))
    logger.info(f"Audit: {entry['actor']} {action} {resource_type} {resource_id or ''}".rstrip())
    return entry
