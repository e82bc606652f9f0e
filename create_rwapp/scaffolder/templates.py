"""Jinja2 rendering for the tooling files added on top of a template.

The framework starter trees are copied verbatim (see ``store.py``); the files
each tooling patch writes (Tailwind/PostCSS configs, Playwright config, unit
test stubs, ignore files) live here as ``.j2`` templates and are rendered
with a small context describing the project.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..config import ProjectOptions
from ..utils import write_text


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the tooling templates shipped with the scaffolder.

    Templates are addressed by their path relative to the template directory,
    e.g. ``"playwright/playwright.config.ts.j2"``.  Undefined variables raise
    instead of rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context."""
        template = self.env.get_template(template_path)
        return template.render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render(template_path, context)
        return await write_text(output_path, content)


def build_context(options: ProjectOptions) -> dict[str, Any]:
    """Build the rendering context shared by every tooling template."""
    framework = options.framework
    return {
        "project_name": options.name,
        "framework": framework.value,
        "family": framework.family,
        "is_typescript": framework.is_typescript,
        "script_ext": framework.script_ext,
        "component_ext": framework.component_ext,
    }
