"""
Multi-watermark composer

Operations over an album's watermark list. The list is plain dicts in the
shape stored on the album record. Every operation returns a new list and
leaves the caller's list untouched.

List invariants: at most MAX_WATERMARKS entries, unique ids, insertion order kept.
Field content (empty text, missing logo URL) is validated by the API models,
not here.
"""
import uuid
from typing import List, Optional, Tuple

from core.config import (
    MAX_WATERMARKS, MIN_WATERMARKS_FOR_REMOVAL, WATERMARK_LIMIT_MESSAGE,
    WATERMARK_TYPE_TEXT, WATERMARK_POSITIONS, PHOTOGRAPHER_NAME,
    DEFAULT_WATERMARK_POSITION, DEFAULT_WATERMARK_OPACITY, DEFAULT_WATERMARK_MARGIN
)

RENDER_STATE_NONE = "none"
RENDER_STATE_WATERMARKED = "watermarked"

# Anchor fractions per position component
_HORIZONTAL = {"left": 0.0, "center": 0.5, "right": 1.0}
_VERTICAL = {"top": 0.0, "center": 0.5, "bottom": 1.0}
# Margin pushes the mark away from the edge it is anchored to
_MARGIN_SIGN = {0.0: 1, 0.5: 0, 1.0: -1}


def _copy_list(watermarks: List[dict]) -> List[dict]:
    return [dict(w) for w in watermarks]


def generate_watermark_id(existing_ids) -> str:
    """Generate a watermark id not present in existing_ids"""
    while True:
        watermark_id = f"watermark-{uuid.uuid4().hex[:12]}"
        if watermark_id not in existing_ids:
            return watermark_id


def new_watermark(existing_ids, text: Optional[str] = None) -> dict:
    """A text watermark with default settings"""
    return {
        "id": generate_watermark_id(existing_ids),
        "type": WATERMARK_TYPE_TEXT,
        "text": text if text is not None else f"© {PHOTOGRAPHER_NAME}",
        "logo_url": None,
        "opacity": DEFAULT_WATERMARK_OPACITY,
        "position": DEFAULT_WATERMARK_POSITION,
        "margin": DEFAULT_WATERMARK_MARGIN,
        "enabled": True,
    }


def can_add_watermark(watermarks: List[dict]) -> bool:
    return len(watermarks) < MAX_WATERMARKS


def can_remove_watermark(watermarks: List[dict]) -> bool:
    return len(watermarks) >= MIN_WATERMARKS_FOR_REMOVAL


def add_watermark(watermarks: List[dict], text: Optional[str] = None,
                  limit_message: str = WATERMARK_LIMIT_MESSAGE) -> Tuple[List[dict], Optional[str]]:
    """
    Append a default watermark.

    Returns (new_list, advisory). advisory is None when the watermark was added;
    at capacity the list comes back unchanged with the limit message instead.
    """
    if not can_add_watermark(watermarks):
        return _copy_list(watermarks), limit_message

    existing_ids = {w.get("id") for w in watermarks}
    return _copy_list(watermarks) + [new_watermark(existing_ids, text)], None


def remove_watermark(watermarks: List[dict], watermark_id: str) -> List[dict]:
    """Remove a watermark. The last remaining watermark cannot be removed."""
    if not can_remove_watermark(watermarks):
        return _copy_list(watermarks)
    return [dict(w) for w in watermarks if w.get("id") != watermark_id]


def update_watermark(watermarks: List[dict], watermark_id: str, patch: dict) -> List[dict]:
    """Apply a partial update to one watermark; the id is never patched"""
    changes = {key: value for key, value in patch.items() if key != "id"}
    return [
        {**w, **changes} if w.get("id") == watermark_id else dict(w)
        for w in watermarks
    ]


def toggle_watermark(watermarks: List[dict], watermark_id: str) -> List[dict]:
    """Flip the enabled flag of one watermark"""
    return [
        {**w, "enabled": not w.get("enabled", True)} if w.get("id") == watermark_id else dict(w)
        for w in watermarks
    ]


def _clamp_opacity(value) -> float:
    try:
        opacity = float(value)
    except (TypeError, ValueError):
        return DEFAULT_WATERMARK_OPACITY
    return min(1.0, max(0.0, opacity))


def _anchor(position: str) -> Tuple[float, float]:
    if position == "center":
        return 0.5, 0.5
    vertical, horizontal = position.split("-", 1)
    return _HORIZONTAL[horizontal], _VERTICAL[vertical]


def to_overlay(watermark: dict) -> dict:
    """Normalize one watermark into a positioned overlay descriptor"""
    position = watermark.get("position")
    if position not in WATERMARK_POSITIONS:
        position = DEFAULT_WATERMARK_POSITION

    margin = watermark.get("margin")
    if margin is None:
        margin = DEFAULT_WATERMARK_MARGIN

    anchor_x, anchor_y = _anchor(position)
    return {
        "id": watermark.get("id"),
        "type": watermark.get("type", WATERMARK_TYPE_TEXT),
        "text": watermark.get("text"),
        "logo_url": watermark.get("logo_url"),
        "opacity": _clamp_opacity(watermark.get("opacity", DEFAULT_WATERMARK_OPACITY)),
        "position": position,
        "margin": margin,
        "anchor_x": anchor_x,
        "anchor_y": anchor_y,
        "offset_x": _MARGIN_SIGN[anchor_x] * margin,
        "offset_y": _MARGIN_SIGN[anchor_y] * margin,
    }


def preview_watermarks(watermarks: Optional[List[dict]]) -> dict:
    """
    Build the render state for a watermark list.

    Disabled and malformed entries are skipped. When nothing is left to draw the state is
    explicitly "none" so renderers never have to guess from an empty list.
    """
    overlays = [
        to_overlay(w) for w in (watermarks or [])
        if isinstance(w, dict) and w.get("enabled", True)
    ]
    if not overlays:
        return {"state": RENDER_STATE_NONE, "overlays": []}
    return {"state": RENDER_STATE_WATERMARKED, "overlays": overlays}


def overlay_origin(overlay: dict, canvas_size: Tuple[int, int], mark_size: Tuple[int, int]) -> Tuple[int, int]:
    """Top-left pixel at which to paste a mark of mark_size for this overlay"""
    canvas_w, canvas_h = canvas_size
    mark_w, mark_h = mark_size
    x = (canvas_w - mark_w) * overlay["anchor_x"] + overlay["offset_x"]
    y = (canvas_h - mark_h) * overlay["anchor_y"] + overlay["offset_y"]
    return int(round(x)), int(round(y))
