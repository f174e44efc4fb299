"""
Style preset registry and CSS filter resolution

Each preset is a fixed colour-grade recipe. The filter chain is built from the
preset's coefficients in a fixed term order, so the same preset name always
yields the same string. Adding a look means adding a registry entry.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel

from core.config import NO_STYLE_PRESET

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StylePreset:
    """A named colour-grade look"""
    id: str
    name: str
    category: str  # "portrait", "landscape" or "general"
    brightness: float = 1.0
    contrast: float = 1.0
    saturate: float = 1.0
    grayscale: float = 0.0  # 0-1, emitted only when set
    sepia: float = 0.0  # 0-1, emitted only when set
    hue_rotate: float = 0.0  # degrees, emitted only when set

    def to_css_filter(self) -> str:
        terms = [
            f"brightness({_format_number(self.brightness)})",
            f"contrast({_format_number(self.contrast)})",
            f"saturate({_format_number(self.saturate)})",
        ]
        if self.grayscale:
            terms.append(f"grayscale({_format_number(self.grayscale)})")
        if self.sepia:
            terms.append(f"sepia({_format_number(self.sepia)})")
        if self.hue_rotate:
            terms.append(f"hue-rotate({_format_number(self.hue_rotate)}deg)")
        return " ".join(terms)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "css_filter": self.to_css_filter(),
        }


def _format_number(value: float) -> str:
    return f"{value:g}"


STYLE_PRESETS = {
    preset.id: preset for preset in [
        # Portrait looks
        StylePreset("japanese-fresh", "Japanese Fresh", "portrait",
                    brightness=1.1, contrast=0.95, saturate=0.85, hue_rotate=-5),
        StylePreset("film-portrait", "Film Portrait", "portrait",
                    brightness=1.0, contrast=1.1, saturate=0.9, sepia=0.1),
        StylePreset("cinematic-portrait", "Cinematic Portrait", "portrait",
                    brightness=0.95, contrast=1.15, saturate=1.1),
        StylePreset("realistic-portrait", "Realistic Portrait", "portrait",
                    brightness=1.0, contrast=1.05, saturate=1.0),
        StylePreset("warm-portrait", "Warm Portrait", "portrait",
                    brightness=1.05, contrast=1.0, saturate=1.1, sepia=0.15),
        # Landscape looks
        StylePreset("natural-landscape", "Natural Landscape", "landscape",
                    brightness=1.0, contrast=1.05, saturate=1.1),
        StylePreset("cinematic-landscape", "Cinematic Landscape", "landscape",
                    brightness=0.95, contrast=1.2, saturate=1.15),
        StylePreset("film-landscape", "Film Landscape", "landscape",
                    brightness=1.0, contrast=1.1, saturate=0.85, sepia=0.1),
        StylePreset("vibrant-landscape", "Vibrant Landscape", "landscape",
                    brightness=1.05, contrast=1.1, saturate=1.4),
        StylePreset("golden-hour", "Golden Hour", "landscape",
                    brightness=1.1, contrast=1.05, saturate=1.2, sepia=0.25),
        # General looks
        StylePreset("black-white", "Black & White", "general",
                    brightness=1.0, contrast=1.2, saturate=1.0, grayscale=1.0),
        StylePreset("vintage", "Vintage", "general",
                    brightness=1.05, contrast=0.9, saturate=0.8, sepia=0.3),
        StylePreset("cool", "Cool", "general",
                    brightness=1.0, contrast=1.05, saturate=0.95, hue_rotate=10),
    ]
}


def _preset_id(config: Union[dict, BaseModel, None]) -> Optional[str]:
    if config is None:
        return None
    if isinstance(config, BaseModel):
        config = config.model_dump()
    if not isinstance(config, dict):
        return None
    preset = config.get("preset")
    return preset if isinstance(preset, str) else None


def get_style_preset(config: Union[dict, BaseModel, None]) -> Optional[StylePreset]:
    """Look up the preset a config selects, or None for no look"""
    preset_id = _preset_id(config)
    if not preset_id or preset_id == NO_STYLE_PRESET:
        return None
    preset = STYLE_PRESETS.get(preset_id)
    if preset is None:
        logger.debug(f"Unknown style preset {preset_id!r}, using no filter")
    return preset


def resolve_filter(config: Union[dict, BaseModel, None]) -> str:
    """
    Resolve a style preset config to a CSS filter value.

    Missing config, a missing preset, "none" and unknown presets all resolve
    to "none"; this never raises.
    """
    preset = get_style_preset(config)
    if preset is None:
        return NO_STYLE_PRESET
    return preset.to_css_filter()


def list_style_presets(category: Optional[str] = None) -> list:
    """Registry entries for the admin preset selector"""
    return [
        preset.to_dict() for preset in STYLE_PRESETS.values()
        if category is None or preset.category == category
    ]
