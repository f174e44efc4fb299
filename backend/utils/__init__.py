"""
Utils package for the PIS backend
"""
from .helpers import (
    generate_slug,
    clamp_limit,
    clamp_offset,
    utc_now_iso,
)

__all__ = [
    'generate_slug',
    'clamp_limit',
    'clamp_offset',
    'utc_now_iso',
]
