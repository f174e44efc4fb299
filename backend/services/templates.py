"""
Album template styles

A template is applied to an explicit style state (theme classes, CSS custom
properties, data attributes, body background) and produces a patch recording
the values it replaced. Reverting the patch restores the earlier state exactly.

Style state shape:
    {"classes": [...], "css_vars": {...}, "dataset": {...}, "body_background": str | None}
"""
import copy
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class TemplateTheme:
    mode: str  # "light" or "dark"
    primary_color: str
    background_color: str
    text_color: str
    accent_color: str


@dataclass(frozen=True)
class AlbumTemplate:
    id: str
    name: str
    theme: TemplateTheme
    font_family: str = "system-ui, sans-serif"
    grid_gap: str = "8px"
    border_radius: str = "4px"
    extra_vars: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "theme": {
                "mode": self.theme.mode,
                "primary_color": self.theme.primary_color,
                "background_color": self.theme.background_color,
                "text_color": self.theme.text_color,
                "accent_color": self.theme.accent_color,
            },
            "css_variables": get_template_css_variables(self),
        }


ALBUM_TEMPLATES = {
    template.id: template for template in [
        AlbumTemplate(
            "classic", "Classic",
            TemplateTheme("dark", "#d4a574", "#0a0a0a", "#f5f5f5", "#d4a574"),
        ),
        AlbumTemplate(
            "minimal-light", "Minimal Light",
            TemplateTheme("light", "#111111", "#ffffff", "#1f1f1f", "#6b7280"),
            grid_gap="16px", border_radius="0px",
        ),
        AlbumTemplate(
            "film-dark", "Film Dark",
            TemplateTheme("dark", "#e0c097", "#1a1612", "#ede0d4", "#b08968"),
            font_family="Georgia, serif", grid_gap="4px",
        ),
        AlbumTemplate(
            "wedding-gold", "Wedding Gold",
            TemplateTheme("light", "#b8860b", "#fdf8f0", "#3d2b1f", "#c9a227"),
            font_family="'Playfair Display', serif", border_radius="8px",
            extra_vars={"--template-divider": "#e8d9b5"},
        ),
    ]
}


def empty_style_state() -> dict:
    return {"classes": [], "css_vars": {}, "dataset": {}, "body_background": None}


def get_template(template_id: Optional[str]) -> Optional[AlbumTemplate]:
    if not template_id:
        return None
    return ALBUM_TEMPLATES.get(template_id)


def get_template_css_variables(template: AlbumTemplate) -> Dict[str, str]:
    """CSS custom properties for a template"""
    variables = {
        "--template-primary": template.theme.primary_color,
        "--template-bg": template.theme.background_color,
        "--template-text": template.theme.text_color,
        "--template-accent": template.theme.accent_color,
        "--template-font-family": template.font_family,
        "--template-grid-gap": template.grid_gap,
        "--template-border-radius": template.border_radius,
    }
    variables.update(template.extra_vars)
    return variables


def apply_template(style_state: dict, template_id: Optional[str]) -> Tuple[dict, Optional[dict]]:
    """
    Apply a template to a style state.

    Returns (new_state, patch). Unknown or empty template ids leave the state
    as it is and return no patch.
    """
    state = copy.deepcopy(style_state)
    template = get_template(template_id)
    if template is None:
        return state, None

    patch = {
        "template_id": template.id,
        "added_classes": [],
        "css_vars": {},
        "dataset": {},
        "body_background": state.get("body_background"),
    }

    classes = state.setdefault("classes", [])
    if template.theme.mode == "light" and "light" not in classes:
        classes.append("light")
        patch["added_classes"].append("light")

    css_vars = state.setdefault("css_vars", {})
    for key, value in get_template_css_variables(template).items():
        patch["css_vars"][key] = css_vars.get(key)
        css_vars[key] = value

    dataset = state.setdefault("dataset", {})
    for key, value in (("template", template.id), ("template_theme", template.theme.mode)):
        patch["dataset"][key] = dataset.get(key)
        dataset[key] = value

    state["body_background"] = template.theme.background_color
    return state, patch


def _restore(mapping: dict, previous: dict):
    for key, value in previous.items():
        if value is None:
            mapping.pop(key, None)
        else:
            mapping[key] = value


def revert_template(style_state: dict, patch: Optional[dict]) -> dict:
    """Undo a patch returned by apply_template"""
    state = copy.deepcopy(style_state)
    if not patch:
        return state

    state["classes"] = [c for c in state.get("classes", []) if c not in patch["added_classes"]]
    _restore(state.setdefault("css_vars", {}), patch["css_vars"])
    _restore(state.setdefault("dataset", {}), patch["dataset"])
    state["body_background"] = patch["body_background"]
    return state


def switch_template(style_state: dict, patch: Optional[dict],
                    template_id: Optional[str]) -> Tuple[dict, Optional[dict]]:
    """Revert the current template patch, then apply another template"""
    return apply_template(revert_template(style_state, patch), template_id)
