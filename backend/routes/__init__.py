"""
Routes package for PIS API

Routes are organized by domain:
- health: Health check endpoints
- admin: Admin login
- albums, watermarks, style_templates: Album editing
- translations, notifications, audit_logs, backup: Admin settings
- public: Public gallery and home access
"""
from .health import router as health_router
from .admin import router as admin_router
from .albums import router as albums_router
from .watermarks import router as watermarks_router
from .style_templates import router as style_templates_router
from .translations import router as translations_router
from .notifications import router as notifications_router
from .audit_logs import router as audit_logs_router
from .backup import router as backup_router
from .public import router as public_router

__all__ = [
    'health_router',
    'admin_router',
    'albums_router',
    'watermarks_router',
    'style_templates_router',
    'translations_router',
    'notifications_router',
    'audit_logs_router',
    'backup_router',
    'public_router',
]
