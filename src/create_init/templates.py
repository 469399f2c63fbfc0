"""Static template registry.

The registry is plain data. How a template is colored on screen is decided by
the rendering layer (:mod:`create_init.cli.render`), keyed by template name.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class Template(BaseModel):
    """A named starting point a project can be scaffolded from."""

    name: str
    display: str

    model_config = {"frozen": True}


TEMPLATES: tuple[Template, ...] = (
    Template(name="vanilla", display="Vanilla"),
    Template(name="vue", display="Vue"),
    Template(name="demo", display="Demo"),
)


def template_names() -> list[str]:
    return [template.name for template in TEMPLATES]


def get_template(name: str | None) -> Template | None:
    """Look up a template by exact, case-sensitive name."""
    for template in TEMPLATES:
        if template.name == name:
            return template
    return None


def bundled_templates_root() -> Path:
    """Directory holding the template trees shipped with the package."""
    return Path(__file__).resolve().parent / "template"
