"""
Utility helper functions for the PIS backend
"""
import secrets
import string
from datetime import datetime, timezone
from typing import Optional


# ============ String Utilities ============

def generate_slug(length: int = 8) -> str:
    """Generate a lowercase share slug for album links"""
    alphabet = string.ascii_lowercase + string.digits
    return ''.join(secrets.choice(alphabet) for _ in range(length))


# ============ Query Utilities ============

def clamp_limit(limit: Optional[int], default: int, maximum: int) -> int:
    """Page size between 1 and maximum"""
    if limit is None:
        return default
    return max(1, min(limit, maximum))


def clamp_offset(offset: Optional[int]) -> int:
    return max(0, offset or 0)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
