"""
Admin authentication routes
"""
from fastapi import APIRouter, HTTPException

from core.config import ADMIN_USERNAME, ADMIN_PASSWORD, logger
from models.schemas import AdminLogin, AdminToken
from services.auth import create_admin_token

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/login", response_model=AdminToken)
async def admin_login(credentials: AdminLogin):
    """Admin login with fixed credentials"""
    if credentials.username != ADMIN_USERNAME or credentials.password != ADMIN_PASSWORD:
        logger.warning(f"Failed admin login for {credentials.username}")
        raise HTTPException(status_code=401, detail="Invalid admin credentials")

    access_token = create_admin_token(credentials.username)
    return AdminToken(access_token=access_token, token_type="bearer", is_admin=True)
