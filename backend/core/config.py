"""
Application configuration and constants
"""
import os
from pathlib import Path
from dotenv import load_dotenv
import logging
import resend

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).parent.parent
load_dotenv(ROOT_DIR / '.env')

# JWT configuration
SECRET_KEY = os.environ['JWT_SECRET_KEY']
ALGORITHM = 'HS256'
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24 * 7

# Admin credentials
ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin123')

# Email configuration
RESEND_API_KEY = os.environ.get('RESEND_API_KEY', '')
SENDER_EMAIL = os.environ.get('SENDER_EMAIL', 'onboarding@resend.dev')
if RESEND_API_KEY:
    resend.api_key = RESEND_API_KEY

FRONTEND_URL = os.environ.get('FRONTEND_URL', '')
CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')

# Studio name used for default watermark text
PHOTOGRAPHER_NAME = os.environ.get('PHOTOGRAPHER_NAME', 'PIS Photography')

# ============================================
# WATERMARK CONSTANTS
# ============================================

MAX_WATERMARKS = 6
MIN_WATERMARKS_FOR_REMOVAL = 2
WATERMARK_LIMIT_MESSAGE = os.environ.get(
    'WATERMARK_LIMIT_MESSAGE', f'Up to {MAX_WATERMARKS} watermarks are supported'
)

WATERMARK_TYPE_TEXT = "text"
WATERMARK_TYPE_LOGO = "logo"

WATERMARK_POSITIONS = [
    "top-left", "top-center", "top-right",
    "center-left", "center", "center-right",
    "bottom-left", "bottom-center", "bottom-right",
]

DEFAULT_WATERMARK_POSITION = "bottom-right"
DEFAULT_WATERMARK_OPACITY = 0.5
DEFAULT_WATERMARK_MARGIN = 5  # pixels from the anchor

NO_STYLE_PRESET = "none"

# ============================================
# LOCALE & ACCESS
# ============================================

LOCALES = ["zh-CN", "en"]
DEFAULT_LOCALE = os.environ.get('DEFAULT_LOCALE', 'zh-CN')
if DEFAULT_LOCALE not in LOCALES:
    logger.warning(f"DEFAULT_LOCALE {DEFAULT_LOCALE} is not supported, falling back to zh-CN")
    DEFAULT_LOCALE = 'zh-CN'

LOCALE_COOKIE = "NEXT_LOCALE"
LOCALE_COOKIE_MAX_AGE = 60 * 60 * 24 * 365  # 1 year
SHARE_LINK_ACCESS_COOKIE = "pis_share_link_access"

# ============================================
# NOTIFICATIONS
# ============================================

NOTIFICATION_DEFAULT_LIMIT = 20
NOTIFICATION_PAGE_LIMIT = 100
AUDIT_LOG_PAGE_LIMIT = 100

SECRET_PLACEHOLDER = "******"

BACKUP_FORMAT_VERSION = 1

# Image preview settings
PREVIEW_MAX_SIZE = (1600, 1600)
JPEG_QUALITY = 85
LOGO_FETCH_TIMEOUT = 10.0
