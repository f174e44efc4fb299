"""
Album template style routes (admin)
"""
from fastapi import APIRouter, HTTPException, Depends

from core.database import db
from core.dependencies import get_admin_user
from models.schemas import StyleTemplatePreviewRequest
from services.templates import ALBUM_TEMPLATES, apply_template, switch_template, empty_style_state

router = APIRouter(prefix="/api/admin/style-templates", tags=["style-templates"])


async def get_base_style_state() -> dict:
    """Site-wide style state that album templates are applied on top of"""
    stored = await db.site_config.find_one({"type": "base_style"}, {"_id": 0})
    state = empty_style_state()
    if stored:
        state.update({k: stored[k] for k in state if k in stored})
    return state


@router.get("")
async def get_style_templates(admin: dict = Depends(get_admin_user)):
    return [template.to_dict() for template in ALBUM_TEMPLATES.values()]


@router.post("/preview")
async def preview_style_template(request: StyleTemplatePreviewRequest, admin: dict = Depends(get_admin_user)):
    """Style state for a template, switching away from the currently applied one"""
    for template_id in (request.template_id, request.previous_template_id):
        if template_id and template_id not in ALBUM_TEMPLATES:
            raise HTTPException(status_code=400, detail=f"Unknown album template: {template_id}")

    base = await get_base_style_state()
    current, patch = apply_template(base, request.previous_template_id)
    style_state, patch = switch_template(current, patch, request.template_id)
    return {"template_id": request.template_id, "style_state": style_state, "patch": patch}
