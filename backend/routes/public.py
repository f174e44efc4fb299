"""
Public gallery routes: album view, password check, home access gate
"""
from fastapi import APIRouter, HTTPException, Depends, Response

from core.config import SHARE_LINK_ACCESS_COOKIE, LOCALES
from core.database import db
from core.middleware import get_access_state
from models.album import PublicAlbum, PasswordVerify
from services.access import AccessState
from services.auth import verify_password
from services.style_presets import resolve_filter
from services.templates import apply_template
from services.watermarks import preview_watermarks
from .style_templates import get_base_style_state

router = APIRouter(prefix="/api/public", tags=["public"])


async def get_public_album_or_404(slug: str) -> dict:
    album = await db.albums.find_one({"slug": slug}, {"_id": 0})
    if not album or not album.get("is_public", True):
        raise HTTPException(status_code=404, detail="Album not found")
    return album


@router.get("/albums/{slug}", response_model=PublicAlbum)
async def get_public_album(slug: str, response: Response, access: AccessState = Depends(get_access_state)):
    album = await get_public_album_or_404(slug)
    theme, _ = apply_template(await get_base_style_state(), album.get("template_id"))

    # Visitors arriving through a share link are kept out of the home page
    response.set_cookie(SHARE_LINK_ACCESS_COOKIE, "true", path="/", samesite="lax")

    return PublicAlbum(
        id=album["id"],
        slug=album["slug"],
        title=album["title"],
        description=album.get("description"),
        has_password=album.get("password") is not None,
        template_id=album.get("template_id"),
        css_filter=resolve_filter(album.get("style_preset")),
        watermark=preview_watermarks(album.get("watermarks")),
        theme=theme,
        locale=access.locale
    )


@router.post("/albums/{slug}/verify-password")
async def verify_album_password(slug: str, password_data: PasswordVerify):
    album = await get_public_album_or_404(slug)

    if not album.get("password"):
        return {"valid": True}

    if verify_password(password_data.password, album["password"]):
        return {"valid": True}
    raise HTTPException(status_code=401, detail="Invalid password")


@router.get("/home")
async def get_home(access: AccessState = Depends(get_access_state)):
    if access.gallery_link_restricted:
        raise HTTPException(
            status_code=403,
            detail="Access restricted: albums opened through a share link cannot reach the home page"
        )
    return {"locale": access.locale, "locales": LOCALES}


@router.post("/home/leave-restricted")
async def leave_restricted(response: Response):
    """Drop the share-link marker so the visitor can reach the home page again"""
    response.delete_cookie(SHARE_LINK_ACCESS_COOKIE, path="/")
    return {"message": "Share link access cleared"}


@router.get("/translations/{locale}")
async def get_public_translations(locale: str):
    if locale not in LOCALES:
        raise HTTPException(status_code=400, detail=f"Unsupported locale: {locale}")
    entries = await db.translations.find({"locale": locale}, {"_id": 0}).to_list(10000)
    return {"locale": locale, "entries": {e["key"]: e["value"] for e in entries}}
