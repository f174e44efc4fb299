# Models package
from .schemas import (
    AdminLogin, AdminToken,
    TranslationEntry, TranslationUpdate,
    AuditLog, AuditLogPage,
    StyleTemplatePreviewRequest, BackupSnapshot
)
from .watermark import (
    StylePresetConfig, WatermarkItem, WatermarkPatch,
    WatermarkListRequest, AddWatermarkRequest, UpdateWatermarkRequest,
    WatermarkEditorState, WatermarkPreviewRequest, WatermarkPreview
)
from .album import AlbumCreate, AlbumUpdate, Album, PublicAlbum, PasswordVerify
from .notification import NotificationCreate, Notification, EmailConfig, EmailTest
