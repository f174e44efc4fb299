"""
FastAPI dependencies for authentication
"""
from fastapi import HTTPException, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from .config import SECRET_KEY, ALGORITHM

security = HTTPBearer()


async def get_admin_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> dict:
    """Verify admin JWT token. Anything without the admin claim is rejected."""
    try:
        payload = jwt.decode(credentials.credentials, SECRET_KEY, algorithms=[ALGORITHM])
        if payload.get("is_admin") is not True:
            raise HTTPException(status_code=403, detail="Admin access required")
        return {"is_admin": True, "username": payload.get("sub", "admin")}
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid admin token")
