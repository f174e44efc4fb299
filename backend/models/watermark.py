"""
Watermark and style preset Pydantic models
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Literal, Optional

from core.config import MAX_WATERMARKS

WatermarkPosition = Literal[
    "top-left", "top-center", "top-right",
    "center-left", "center", "center-right",
    "bottom-left", "bottom-center", "bottom-right",
]


class StylePresetConfig(BaseModel):
    """Selected colour-grade look; None or "none" means no look"""
    model_config = ConfigDict(extra="allow")
    preset: Optional[str] = None


class WatermarkItem(BaseModel):
    """One text or logo watermark"""
    model_config = ConfigDict(extra="allow")
    id: str = Field(min_length=1)
    type: Literal["text", "logo"] = "text"
    text: Optional[str] = None
    logo_url: Optional[str] = None
    opacity: float = Field(default=0.5, ge=0, le=1)
    position: WatermarkPosition = "bottom-right"
    margin: Optional[float] = Field(default=None, ge=0)  # Pixels from the anchor
    enabled: bool = True

    @model_validator(mode="after")
    def check_content(self):
        if self.type == "text" and not (self.text or "").strip():
            raise ValueError("Text watermark requires non-empty text")
        if self.type == "logo" and not (self.logo_url or "").strip():
            raise ValueError("Logo watermark requires a logo URL")
        return self


def check_watermark_list(watermarks: Optional[List[WatermarkItem]]):
    """List-level shape: at most MAX_WATERMARKS entries with unique ids"""
    if watermarks is None:
        return watermarks
    if len(watermarks) > MAX_WATERMARKS:
        raise ValueError(f"At most {MAX_WATERMARKS} watermarks are allowed")
    ids = [w.id for w in watermarks]
    if len(ids) != len(set(ids)):
        raise ValueError("Watermark ids must be unique")
    return watermarks


class WatermarkPatch(BaseModel):
    """Partial watermark update; the id can't be changed"""
    model_config = ConfigDict(extra="ignore")
    type: Optional[Literal["text", "logo"]] = None
    text: Optional[str] = None
    logo_url: Optional[str] = None
    opacity: Optional[float] = Field(default=None, ge=0, le=1)
    position: Optional[WatermarkPosition] = None
    margin: Optional[float] = Field(default=None, ge=0)
    enabled: Optional[bool] = None


class WatermarkListRequest(BaseModel):
    """Current watermark list of an editing session"""
    watermarks: List[WatermarkItem] = []

    @field_validator("watermarks")
    @classmethod
    def validate_watermarks(cls, v):
        return check_watermark_list(v)


class AddWatermarkRequest(WatermarkListRequest):
    text: Optional[str] = None  # Defaults to the studio name


class UpdateWatermarkRequest(WatermarkListRequest):
    patch: WatermarkPatch


class WatermarkEditorState(BaseModel):
    """Watermark list after an editing operation"""
    watermarks: List[dict]
    advisory: Optional[str] = None  # Set when the operation was a no-op the user should know about
    can_add: bool
    can_remove: bool


class WatermarkPreviewRequest(WatermarkListRequest):
    style_preset: Optional[StylePresetConfig] = None


class WatermarkPreview(BaseModel):
    render: dict
    css_filter: str
