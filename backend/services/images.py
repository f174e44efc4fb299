"""
Image processing services: style preset grading and watermark previews
"""
from io import BytesIO
from typing import Dict, List, Optional

import httpx
from PIL import Image, ImageDraw, ImageEnhance, ImageFont, ImageOps

from core.config import PREVIEW_MAX_SIZE, JPEG_QUALITY, LOGO_FETCH_TIMEOUT, WATERMARK_TYPE_LOGO, logger
from .style_presets import get_style_preset
from .watermarks import RENDER_STATE_NONE, overlay_origin, preview_watermarks

SEPIA_DARK = "#3b2a1a"
SEPIA_LIGHT = "#f5e6c8"
LOGO_MAX_WIDTH_RATIO = 0.2


def to_rgb(img: Image.Image) -> Image.Image:
    """Flatten any mode to RGB on a white background"""
    if img.mode in ('RGBA', 'LA', 'P'):
        background = Image.new('RGB', img.size, (255, 255, 255))
        if img.mode == 'P':
            img = img.convert('RGBA')
        background.paste(img, mask=img.split()[-1] if img.mode in ('RGBA', 'LA') else None)
        return background
    if img.mode != 'RGB':
        return img.convert('RGB')
    return img


def apply_style_preset(img: Image.Image, config) -> Image.Image:
    """Grade an RGB image with the preset's coefficients, in CSS filter order"""
    preset = get_style_preset(config)
    if preset is None:
        return img

    img = ImageEnhance.Brightness(img).enhance(preset.brightness)
    img = ImageEnhance.Contrast(img).enhance(preset.contrast)
    img = ImageEnhance.Color(img).enhance(preset.saturate)
    if preset.grayscale:
        gray = ImageOps.grayscale(img).convert('RGB')
        img = Image.blend(img, gray, min(1.0, preset.grayscale))
    if preset.sepia:
        sepia = ImageOps.colorize(ImageOps.grayscale(img), SEPIA_DARK, SEPIA_LIGHT)
        img = Image.blend(img, sepia, min(1.0, preset.sepia))
    if preset.hue_rotate:
        shift = int(round(preset.hue_rotate / 360 * 256)) % 256
        h, s, v = img.convert('HSV').split()
        h = h.point(lambda p: (p + shift) % 256)
        img = Image.merge('HSV', (h, s, v)).convert('RGB')
    return img


def _text_mark(text: str, opacity: float, canvas_width: int) -> Image.Image:
    font = ImageFont.load_default(size=max(12, canvas_width // 30))
    left, top, right, bottom = ImageDraw.Draw(Image.new('RGBA', (1, 1))).textbbox((0, 0), text, font=font)
    mark = Image.new('RGBA', (max(1, right - left), max(1, bottom - top)), (0, 0, 0, 0))
    ImageDraw.Draw(mark).text((-left, -top), text, font=font, fill=(255, 255, 255, int(255 * opacity)))
    return mark


def _logo_mark(logo: Image.Image, opacity: float, canvas_width: int) -> Image.Image:
    mark = logo.convert('RGBA')
    max_width = max(1, int(canvas_width * LOGO_MAX_WIDTH_RATIO))
    if mark.width > max_width:
        mark = mark.resize((max_width, max(1, mark.height * max_width // mark.width)), Image.Resampling.LANCZOS)
    alpha = mark.getchannel('A').point(lambda a: int(a * opacity))
    mark.putalpha(alpha)
    return mark


def composite_watermarks(img: Image.Image, watermarks: List[dict],
                         logos: Optional[Dict[str, Image.Image]] = None) -> Image.Image:
    """Draw every enabled watermark onto a copy of the image"""
    render = preview_watermarks(watermarks)
    if render["state"] == RENDER_STATE_NONE:
        return img

    logos = logos or {}
    result = img.copy()
    for overlay in render["overlays"]:
        if overlay["type"] == WATERMARK_TYPE_LOGO:
            logo = logos.get(overlay["logo_url"] or "")
            if logo is None:
                continue
            mark = _logo_mark(logo, overlay["opacity"], result.width)
        else:
            if not overlay["text"]:
                continue
            mark = _text_mark(overlay["text"], overlay["opacity"], result.width)
        result.paste(mark, overlay_origin(overlay, result.size, mark.size), mark)
    return result


async def fetch_logos(watermarks: List[dict]) -> Dict[str, Image.Image]:
    """Download logo images for enabled logo watermarks; failures are skipped"""
    urls = {
        overlay["logo_url"] for overlay in preview_watermarks(watermarks)["overlays"]
        if overlay["type"] == WATERMARK_TYPE_LOGO and overlay["logo_url"]
    }
    logos = {}
    if not urls:
        return logos

    async with httpx.AsyncClient(timeout=LOGO_FETCH_TIMEOUT, follow_redirects=True) as client:
        for url in urls:
            try:
                response = await client.get(url)
                response.raise_for_status()
                logos[url] = Image.open(BytesIO(response.content))
                logos[url].load()
            except Exception as e:
                logger.error(f"Failed to fetch watermark logo {url}: {e}")
    return logos


def render_preview(source: bytes, watermarks: List[dict], style_preset=None,
                   logos: Optional[Dict[str, Image.Image]] = None) -> bytes:
    """Render a graded, watermarked JPEG preview from uploaded image bytes"""
    with Image.open(BytesIO(source)) as img:
        img = to_rgb(img)
        img.thumbnail(PREVIEW_MAX_SIZE, Image.Resampling.LANCZOS)
        img = apply_style_preset(img, style_preset)
        img = composite_watermarks(img, watermarks, logos)

        output = BytesIO()
        img.save(output, 'JPEG', quality=JPEG_QUALITY, optimize=True)
    return output.getvalue()
