"""
Album management routes (admin)

Watermarks and the style preset are stored exactly as submitted and returned
unchanged; rendering parameters are derived on read, never written back.
"""
import uuid
from fastapi import APIRouter, HTTPException, Depends
from typing import List

from core.database import db
from core.dependencies import get_admin_user
from models.album import AlbumCreate, AlbumUpdate, Album
from models.watermark import WatermarkPreview
from services.audit import log_admin_action
from services.auth import hash_password
from services.style_presets import resolve_filter
from services.templates import ALBUM_TEMPLATES
from services.watermarks import preview_watermarks
from utils.helpers import generate_slug, utc_now_iso

router = APIRouter(prefix="/api/admin/albums", tags=["albums"])


def album_from_doc(album: dict) -> Album:
    return Album(
        id=album["id"],
        slug=album["slug"],
        title=album["title"],
        description=album.get("description"),
        has_password=album.get("password") is not None,
        template_id=album.get("template_id"),
        style_preset=album.get("style_preset"),
        watermarks=album.get("watermarks") or [],
        is_public=album.get("is_public", True),
        created_at=album["created_at"],
        updated_at=album.get("updated_at", album["created_at"])
    )


def check_template(template_id):
    if template_id and template_id not in ALBUM_TEMPLATES:
        raise HTTPException(status_code=400, detail=f"Unknown album template: {template_id}")


async def get_album_or_404(album_id: str) -> dict:
    album = await db.albums.find_one({"id": album_id}, {"_id": 0})
    if not album:
        raise HTTPException(status_code=404, detail="Album not found")
    return album


async def unique_slug() -> str:
    while True:
        slug = generate_slug()
        if not await db.albums.find_one({"slug": slug}, {"_id": 0}):
            return slug


@router.post("", response_model=Album)
async def create_album(album_data: AlbumCreate, admin: dict = Depends(get_admin_user)):
    check_template(album_data.template_id)

    now = utc_now_iso()
    album_doc = {
        "id": str(uuid.uuid4()),
        "slug": await unique_slug(),
        "title": album_data.title,
        "description": album_data.description,
        "password": hash_password(album_data.password) if album_data.password else None,
        "template_id": album_data.template_id,
        "style_preset": album_data.style_preset.model_dump(exclude_unset=True) if album_data.style_preset else None,
        "watermarks": [w.model_dump(exclude_unset=True) for w in album_data.watermarks],
        "is_public": album_data.is_public,
        "created_at": now,
        "updated_at": now
    }
    await db.albums.insert_one(dict(album_doc))
    await log_admin_action("album.create", "album", album_doc["id"], admin, {"title": album_data.title})

    return album_from_doc(album_doc)


@router.get("", response_model=List[Album])
async def get_albums(admin: dict = Depends(get_admin_user)):
    albums = await db.albums.find({}, {"_id": 0}).sort("created_at", -1).to_list(1000)
    return [album_from_doc(a) for a in albums]


@router.get("/{album_id}", response_model=Album)
async def get_album(album_id: str, admin: dict = Depends(get_admin_user)):
    return album_from_doc(await get_album_or_404(album_id))


@router.put("/{album_id}", response_model=Album)
async def update_album(album_id: str, updates: AlbumUpdate, admin: dict = Depends(get_admin_user)):
    await get_album_or_404(album_id)
    check_template(updates.template_id)

    update_data = {}
    if updates.title is not None:
        update_data["title"] = updates.title
    if updates.description is not None:
        update_data["description"] = updates.description
    if updates.password is not None:
        update_data["password"] = hash_password(updates.password)
    elif updates.remove_password:
        update_data["password"] = None
    if updates.template_id is not None:
        update_data["template_id"] = updates.template_id
    if updates.style_preset is not None:
        update_data["style_preset"] = updates.style_preset.model_dump(exclude_unset=True)
    if updates.watermarks is not None:
        update_data["watermarks"] = [w.model_dump(exclude_unset=True) for w in updates.watermarks]
    if updates.is_public is not None:
        update_data["is_public"] = updates.is_public

    if update_data:
        update_data["updated_at"] = utc_now_iso()
        await db.albums.update_one({"id": album_id}, {"$set": update_data})
        changed = sorted(k for k in update_data if k not in ("updated_at", "password"))
        if "password" in update_data:
            changed.append("password")
        await log_admin_action("album.update", "album", album_id, admin, {"fields": changed})

    return album_from_doc(await get_album_or_404(album_id))


@router.delete("/{album_id}")
async def delete_album(album_id: str, admin: dict = Depends(get_admin_user)):
    album = await get_album_or_404(album_id)
    await db.albums.delete_one({"id": album_id})
    await log_admin_action("album.delete", "album", album_id, admin, {"title": album["title"]})
    return {"message": "Album deleted"}


@router.get("/{album_id}/preview", response_model=WatermarkPreview)
async def get_album_preview(album_id: str, admin: dict = Depends(get_admin_user)):
    """Render parameters for the album's saved watermarks and style preset"""
    album = await get_album_or_404(album_id)
    return WatermarkPreview(
        render=preview_watermarks(album.get("watermarks")),
        css_filter=resolve_filter(album.get("style_preset"))
    )
