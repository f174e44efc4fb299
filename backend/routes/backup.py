"""
Backup export/import routes (admin)
"""
from fastapi import APIRouter, HTTPException, Depends
from pydantic import ValidationError

from core.config import BACKUP_FORMAT_VERSION, logger
from core.database import db
from core.dependencies import get_admin_user
from models.schemas import BackupSnapshot
from models.watermark import StylePresetConfig, WatermarkItem, check_watermark_list
from services.audit import log_admin_action
from utils.helpers import utc_now_iso

router = APIRouter(prefix="/api/admin/backup", tags=["backup"])


def validated_album(album: dict) -> dict:
    """Album document with watermarks and style preset checked like an album save"""
    album = dict(album)
    watermarks = album.get("watermarks") or []
    if not isinstance(watermarks, list) or not all(isinstance(w, dict) for w in watermarks):
        raise ValueError("watermarks must be a list of objects")
    items = check_watermark_list([WatermarkItem(**w) for w in watermarks])
    album["watermarks"] = [w.model_dump(exclude_unset=True) for w in items]

    style_preset = album.get("style_preset")
    if style_preset is not None:
        if not isinstance(style_preset, dict):
            raise ValueError("style_preset must be an object")
        album["style_preset"] = StylePresetConfig(**style_preset).model_dump(exclude_unset=True)
    return album


@router.get("/export", response_model=BackupSnapshot)
async def export_backup(admin: dict = Depends(get_admin_user)):
    """Snapshot of albums, translations and email settings (without secrets)"""
    albums = await db.albums.find({}, {"_id": 0}).to_list(None)
    translations = await db.translations.find({}, {"_id": 0}).to_list(None)
    email_config = await db.email_config.find_one({}, {"_id": 0})
    if email_config:
        email_config.pop("api_key", None)

    await log_admin_action("backup.export", "backup", None, admin,
                           {"albums": len(albums), "translations": len(translations)})
    return BackupSnapshot(
        version=BACKUP_FORMAT_VERSION,
        exported_at=utc_now_iso(),
        albums=albums,
        translations=translations,
        email_config=email_config
    )


@router.post("/import")
async def import_backup(snapshot: BackupSnapshot, admin: dict = Depends(get_admin_user)):
    """Restore albums and translations from a snapshot; email settings are not restored"""
    if snapshot.version != BACKUP_FORMAT_VERSION:
        raise HTTPException(status_code=400, detail=f"Unsupported backup version: {snapshot.version}")

    albums_imported = 0
    albums_skipped = 0
    for album in snapshot.albums:
        if not album.get("id") or not album.get("slug"):
            logger.warning("Skipping album without id or slug in backup")
            albums_skipped += 1
            continue
        try:
            album = validated_album(album)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Skipping album {album['id']} with invalid watermarks or style preset: {e}")
            albums_skipped += 1
            continue
        await db.albums.update_one({"id": album["id"]}, {"$set": album}, upsert=True)
        albums_imported += 1

    translations_imported = 0
    for entry in snapshot.translations:
        if not entry.get("locale") or not entry.get("key"):
            continue
        await db.translations.update_one(
            {"locale": entry["locale"], "key": entry["key"]}, {"$set": entry}, upsert=True
        )
        translations_imported += 1

    await log_admin_action("backup.import", "backup", None, admin,
                           {"albums": albums_imported, "skipped": albums_skipped,
                            "translations": translations_imported})
    return {"albums": albums_imported, "skipped": albums_skipped, "translations": translations_imported}
