"""
Test album template apply/revert
Applying then reverting a template restores the previous style state exactly
"""
import copy

import pytest

from services.templates import (
    ALBUM_TEMPLATES, apply_template, empty_style_state, get_template_css_variables,
    revert_template, switch_template
)


@pytest.fixture
def base_state():
    return {
        "classes": ["dark"],
        "css_vars": {"--template-primary": "#ff0000", "--site-accent": "#00ff00"},
        "dataset": {"page": "album"},
        "body_background": "#222222",
    }


class TestApplyTemplate:
    """Template application over an explicit style state"""

    def test_unknown_template_returns_no_patch(self, base_state):
        state, patch = apply_template(base_state, "no-such-template")
        assert patch is None
        assert state == base_state

    def test_dark_template(self):
        state, patch = apply_template(empty_style_state(), "classic")
        assert "light" not in state["classes"]
        assert state["css_vars"]["--template-bg"] == "#0a0a0a"
        assert state["dataset"] == {"template": "classic", "template_theme": "dark"}
        assert state["body_background"] == "#0a0a0a"
        assert patch["template_id"] == "classic"

    def test_light_template_adds_class(self):
        state, patch = apply_template(empty_style_state(), "minimal-light")
        assert state["classes"] == ["light"]
        assert patch["added_classes"] == ["light"]

    def test_extra_variables(self):
        state, _ = apply_template(empty_style_state(), "wedding-gold")
        assert state["css_vars"]["--template-divider"] == "#e8d9b5"

    def test_input_state_is_not_mutated(self, base_state):
        snapshot = copy.deepcopy(base_state)
        apply_template(base_state, "wedding-gold")
        assert base_state == snapshot

    def test_css_variables_cover_theme(self):
        variables = get_template_css_variables(ALBUM_TEMPLATES["film-dark"])
        assert variables["--template-font-family"] == "Georgia, serif"
        assert variables["--template-grid-gap"] == "4px"


class TestRevertTemplate:
    """Reverting restores overwritten values and removes added ones"""

    @pytest.mark.parametrize("template_id", list(ALBUM_TEMPLATES))
    def test_apply_then_revert_round_trip(self, base_state, template_id):
        state, patch = apply_template(base_state, template_id)
        assert revert_template(state, patch) == base_state

    def test_revert_without_patch(self, base_state):
        assert revert_template(base_state, None) == base_state

    def test_existing_light_class_is_kept(self):
        start = {**empty_style_state(), "classes": ["light"]}
        state, patch = apply_template(start, "minimal-light")
        assert patch["added_classes"] == []
        assert revert_template(state, patch)["classes"] == ["light"]

    def test_switch_template(self, base_state):
        state, patch = apply_template(base_state, "minimal-light")
        state, patch = switch_template(state, patch, "classic")

        assert "light" not in state["classes"]
        assert state["dataset"]["template"] == "classic"
        assert revert_template(state, patch) == base_state
