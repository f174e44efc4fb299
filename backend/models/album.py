"""
Album-related Pydantic models
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from .watermark import StylePresetConfig, WatermarkItem, check_watermark_list


class AlbumCreate(BaseModel):
    """Model for creating a new album"""
    title: str = Field(min_length=1)
    description: Optional[str] = None
    password: Optional[str] = None
    template_id: Optional[str] = None  # Album template style
    style_preset: Optional[StylePresetConfig] = None
    watermarks: List[WatermarkItem] = []
    is_public: bool = True

    @field_validator("watermarks")
    @classmethod
    def validate_watermarks(cls, v):
        return check_watermark_list(v)


class AlbumUpdate(BaseModel):
    """Model for updating album"""
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    password: Optional[str] = None
    remove_password: Optional[bool] = None  # Set to True to remove album password
    template_id: Optional[str] = None
    style_preset: Optional[StylePresetConfig] = None
    watermarks: Optional[List[WatermarkItem]] = None
    is_public: Optional[bool] = None

    @field_validator("watermarks")
    @classmethod
    def validate_watermarks(cls, v):
        return check_watermark_list(v)


class Album(BaseModel):
    """Model for album response"""
    model_config = ConfigDict(extra="ignore")
    id: str
    slug: str
    title: str
    description: Optional[str] = None
    has_password: bool = False
    template_id: Optional[str] = None
    style_preset: Optional[dict] = None  # Stored verbatim
    watermarks: List[dict] = []  # Stored verbatim
    is_public: bool = True
    created_at: str
    updated_at: str


class PublicAlbum(BaseModel):
    """Model for public album view"""
    id: str
    slug: str
    title: str
    description: Optional[str] = None
    has_password: bool
    template_id: Optional[str] = None
    css_filter: str = "none"
    watermark: dict  # Render state from the watermark composer
    theme: dict  # Style state with the album template applied
    locale: str


class PasswordVerify(BaseModel):
    """Model for password verification"""
    password: str
