"""Jinja2 template rendering for plugin scaffolding.

Provides the TemplateRenderer class which loads the five plugin templates
from the ``scaffolder/templates/`` directory and renders them with the
collected answers.  Rendering is strict: a template that references an
undefined value raises instead of silently emitting an empty string.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..config import DEFAULT_TEMPLATE_DIR
from ..models import AnswerSet


class TemplateId(str, Enum):
    """The template assets, one per generated artifact."""
    PLUGIN_XML = "plugin.xml.j2"
    API = "api.js.j2"
    ANDROID = "android.service.kt.j2"
    IOS = "ios.service.swift.j2"
    ELECTRON = "electron.service.js.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for plugin scaffolding.

    Templates are rendered with a context dictionary, usually the one built
    by :func:`build_render_context`.  XML templates are autoescaped; source
    code templates are rendered verbatim.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(
                enabled_extensions=("xml.j2",), default_for_string=False, default=False
            ),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, template_id: TemplateId | str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_id: A :class:`TemplateId` or a template file name
                relative to the template directory.
            context: Variables available inside the template.

        Returns:
            The rendered text.

        Raises:
            jinja2.TemplateNotFound: If the template asset is missing.
            jinja2.UndefinedError: If the template references an undefined value.
        """
        name = template_id.value if isinstance(template_id, TemplateId) else template_id
        template = self.env.get_template(name)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- Utility -----------------------------------------------------------

    def list_templates(self) -> list[str]:
        """Return a sorted list of the ``.j2`` templates in the template directory."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir))
            for p in self.template_dir.rglob("*.j2")
        )


def build_render_context(answers: AnswerSet) -> dict[str, Any]:
    """Build the template context: the answers plus derived values."""
    return {
        "answers": answers,
        "additional_data": {
            "android_package_path": answers.android_package_path,
        },
    }
