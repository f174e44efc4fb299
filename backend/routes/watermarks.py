"""
Watermark editor and style preset routes (admin)

The editing session lives on the client. Each call sends the session's
current watermark list and gets the new list back with the add/remove
affordance flags; nothing is persisted until the album is saved.
"""
import json
from fastapi import APIRouter, HTTPException, Depends, UploadFile, File, Form, Response
from pydantic import ValidationError
from typing import List, Optional

from core.config import logger
from core.dependencies import get_admin_user
from models.watermark import (
    AddWatermarkRequest, UpdateWatermarkRequest, WatermarkListRequest,
    WatermarkEditorState, WatermarkPreviewRequest, WatermarkPreview, WatermarkItem
)
from services.images import fetch_logos, render_preview
from services.style_presets import resolve_filter, list_style_presets
from services.watermarks import (
    add_watermark, remove_watermark, update_watermark, toggle_watermark,
    preview_watermarks, can_add_watermark, can_remove_watermark
)

router = APIRouter(prefix="/api/admin", tags=["watermarks"])


def editor_state(watermarks: List[dict], advisory: Optional[str] = None) -> WatermarkEditorState:
    return WatermarkEditorState(
        watermarks=watermarks,
        advisory=advisory,
        can_add=can_add_watermark(watermarks),
        can_remove=can_remove_watermark(watermarks)
    )


def current_watermarks(request: WatermarkListRequest, watermark_id: str = None) -> List[dict]:
    watermarks = [w.model_dump() for w in request.watermarks]
    if watermark_id is not None and not any(w["id"] == watermark_id for w in watermarks):
        raise HTTPException(status_code=404, detail="Watermark not found")
    return watermarks


@router.post("/watermarks/add", response_model=WatermarkEditorState)
async def add_watermark_item(request: AddWatermarkRequest, admin: dict = Depends(get_admin_user)):
    watermarks, advisory = add_watermark(current_watermarks(request), text=request.text)
    if advisory:
        logger.info("Watermark add rejected: list is at capacity")
    return editor_state(watermarks, advisory)


@router.post("/watermarks/{watermark_id}/remove", response_model=WatermarkEditorState)
async def remove_watermark_item(watermark_id: str, request: WatermarkListRequest,
                                admin: dict = Depends(get_admin_user)):
    watermarks = current_watermarks(request, watermark_id)
    if not can_remove_watermark(watermarks):
        raise HTTPException(status_code=400, detail="The last watermark cannot be removed")
    return editor_state(remove_watermark(watermarks, watermark_id))


@router.patch("/watermarks/{watermark_id}", response_model=WatermarkEditorState)
async def update_watermark_item(watermark_id: str, request: UpdateWatermarkRequest,
                                admin: dict = Depends(get_admin_user)):
    watermarks = update_watermark(
        current_watermarks(request, watermark_id),
        watermark_id,
        request.patch.model_dump(exclude_unset=True)
    )
    updated = next(w for w in watermarks if w["id"] == watermark_id)
    try:
        WatermarkItem(**updated)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid watermark: {e.errors()[0]['msg']}")
    return editor_state(watermarks)


@router.post("/watermarks/{watermark_id}/toggle", response_model=WatermarkEditorState)
async def toggle_watermark_item(watermark_id: str, request: WatermarkListRequest,
                                admin: dict = Depends(get_admin_user)):
    return editor_state(toggle_watermark(current_watermarks(request, watermark_id), watermark_id))


@router.post("/watermarks/preview", response_model=WatermarkPreview)
async def preview_watermark_items(request: WatermarkPreviewRequest, admin: dict = Depends(get_admin_user)):
    return WatermarkPreview(
        render=preview_watermarks(current_watermarks(request)),
        css_filter=resolve_filter(request.style_preset)
    )


@router.post("/watermarks/render")
async def render_watermark_preview(
    file: UploadFile = File(...),
    watermarks: str = Form("[]"),
    preset: Optional[str] = Form(None),
    admin: dict = Depends(get_admin_user)
):
    """Composite the watermarks and style preset onto an uploaded image"""
    try:
        request = WatermarkListRequest(watermarks=json.loads(watermarks))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid watermarks: {e}")

    items = current_watermarks(request)
    source = await file.read()
    logos = await fetch_logos(items)
    try:
        content = render_preview(source, items, {"preset": preset}, logos)
    except OSError:
        raise HTTPException(status_code=400, detail="Invalid image file")
    return Response(content=content, media_type="image/jpeg")


@router.get("/style-presets")
async def get_style_presets(category: Optional[str] = None, admin: dict = Depends(get_admin_user)):
    return list_style_presets(category)
