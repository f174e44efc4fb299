# Core module exports
from .config import *
from .database import db, client
from .dependencies import get_admin_user, security
