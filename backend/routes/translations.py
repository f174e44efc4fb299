"""
Translation override routes (admin)
"""
from fastapi import APIRouter, HTTPException, Depends
from typing import List, Optional

from core.config import LOCALES
from core.database import db
from core.dependencies import get_admin_user
from models.schemas import TranslationEntry, TranslationUpdate
from services.audit import log_admin_action
from utils.helpers import utc_now_iso

router = APIRouter(prefix="/api/admin/translations", tags=["translations"])


def check_locale(locale: str):
    if locale not in LOCALES:
        raise HTTPException(status_code=400, detail=f"Unsupported locale: {locale}")


@router.get("", response_model=List[TranslationEntry])
async def get_translations(locale: Optional[str] = None, admin: dict = Depends(get_admin_user)):
    query = {}
    if locale:
        check_locale(locale)
        query["locale"] = locale
    entries = await db.translations.find(query, {"_id": 0}).sort("key", 1).to_list(10000)
    return [TranslationEntry(**e) for e in entries]


@router.put("/{locale}")
async def update_translations(locale: str, data: TranslationUpdate, admin: dict = Depends(get_admin_user)):
    check_locale(locale)
    now = utc_now_iso()
    for key, value in data.entries.items():
        await db.translations.update_one(
            {"locale": locale, "key": key},
            {"$set": {"locale": locale, "key": key, "value": value, "updated_at": now}},
            upsert=True
        )
    await log_admin_action("translation.update", "translation", locale, admin, {"keys": sorted(data.entries)})
    return {"message": "Translations saved", "updated": len(data.entries)}


@router.delete("/{locale}/{key}")
async def delete_translation(locale: str, key: str, admin: dict = Depends(get_admin_user)):
    check_locale(locale)
    result = await db.translations.delete_one({"locale": locale, "key": key})
    if result.deleted_count == 0:
        raise HTTPException(status_code=404, detail="Translation not found")
    await log_admin_action("translation.delete", "translation", locale, admin, {"key": key})
    return {"message": "Translation deleted"}
