"""
Test style preset resolution
Covers CSS filter strings for presets, the "none" fallbacks and the registry listing
"""
import pytest

from models.watermark import StylePresetConfig
from services.style_presets import (
    STYLE_PRESETS, get_style_preset, list_style_presets, resolve_filter
)


class TestResolveFilter:
    """resolve_filter never raises and always returns a filter value"""

    @pytest.mark.parametrize("config", [
        None,
        {},
        {"preset": None},
        {"preset": "none"},
        {"preset": "does-not-exist"},
        {"preset": 42},
        "japanese-fresh",
    ])
    def test_no_look_resolves_to_none(self, config):
        assert resolve_filter(config) == "none"

    def test_japanese_fresh(self):
        assert resolve_filter({"preset": "japanese-fresh"}) == \
            "brightness(1.1) contrast(0.95) saturate(0.85) hue-rotate(-5deg)"

    def test_black_white_includes_grayscale(self):
        css_filter = resolve_filter({"preset": "black-white"})
        assert css_filter == "brightness(1) contrast(1.2) saturate(1) grayscale(1)"

    def test_vintage_includes_sepia(self):
        assert resolve_filter({"preset": "vintage"}) == \
            "brightness(1.05) contrast(0.9) saturate(0.8) sepia(0.3)"

    def test_term_order_is_fixed(self):
        """brightness, contrast, saturate come first in every preset"""
        for preset_id in STYLE_PRESETS:
            terms = resolve_filter({"preset": preset_id}).split(" ")
            assert terms[0].startswith("brightness(")
            assert terms[1].startswith("contrast(")
            assert terms[2].startswith("saturate(")

    def test_resolution_is_deterministic(self):
        for preset_id in STYLE_PRESETS:
            config = {"preset": preset_id}
            assert resolve_filter(config) == resolve_filter(dict(config))

    def test_accepts_pydantic_config(self):
        config = StylePresetConfig(preset="cool")
        assert resolve_filter(config) == "brightness(1) contrast(1.05) saturate(0.95) hue-rotate(10deg)"

    def test_extra_config_keys_are_ignored(self):
        assert resolve_filter({"preset": "cool", "intensity": 0.5}) == resolve_filter({"preset": "cool"})


class TestPresetRegistry:
    """Registry lookups used by the admin preset selector"""

    def test_registry_has_all_looks(self):
        assert len(STYLE_PRESETS) == 13

    def test_get_style_preset(self):
        preset = get_style_preset({"preset": "golden-hour"})
        assert preset is not None
        assert preset.category == "landscape"
        assert get_style_preset({"preset": "none"}) is None

    def test_list_all(self):
        presets = list_style_presets()
        assert len(presets) == len(STYLE_PRESETS)
        assert set(presets[0].keys()) == {"id", "name", "category", "css_filter"}

    def test_list_by_category(self):
        portrait = list_style_presets("portrait")
        assert portrait
        assert all(p["category"] == "portrait" for p in portrait)
        assert list_style_presets("unknown") == []
