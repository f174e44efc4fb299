# Services module exports
from .auth import hash_password, verify_password, create_access_token, create_admin_token
from .style_presets import STYLE_PRESETS, StylePreset, resolve_filter, list_style_presets
from .watermarks import (
    add_watermark, remove_watermark, update_watermark, toggle_watermark,
    preview_watermarks, can_add_watermark, can_remove_watermark
)
from .templates import ALBUM_TEMPLATES, apply_template, revert_template, switch_template
from .access import AccessState, compute_access_state
from .audit import log_admin_action
from .notifications import create_notification, deliver_notification, build_album_notification
from .email import send_email, get_email_template, get_email_settings
from .images import render_preview, fetch_logos
