"""Tailwind CSS integration.

Generates:
- ``tailwind.config.js`` and ``postcss.config.js`` at the project root
- the three ``@tailwind`` directives at the top of the global stylesheet
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from ..config import ProjectOptions
from ..utils import write_text
from .manifest import PackageManifest
from .templates import TemplateRenderer

TAILWIND_DEPENDENCIES: dict[str, str] = {
    "tailwindcss": "^3.4.1",
    "postcss": "^8.4.33",
    "autoprefixer": "^10.4.17",
    "@tailwindcss/typography": "^0.5.10",
}

TAILWIND_DIRECTIVES = "@tailwind base;\n@tailwind components;\n@tailwind utilities;\n\n"


class TailwindGenerator:
    """Adds Tailwind CSS and PostCSS to a copied template."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(
        self,
        project_root: Path,
        manifest: PackageManifest,
        options: ProjectOptions,
        context: dict[str, Any],
    ) -> list[Path]:
        manifest.add_dev_dependencies(TAILWIND_DEPENDENCIES)

        written = [
            await self.renderer.render_to_file(
                "tailwind/tailwind.config.js.j2",
                project_root / "tailwind.config.js",
                context,
            ),
            await self.renderer.render_to_file(
                "tailwind/postcss.config.js.j2",
                project_root / "postcss.config.js",
                context,
            ),
        ]

        stylesheet = project_root / "src" / options.framework.stylesheet
        if await asyncio.to_thread(stylesheet.is_file):
            original = await asyncio.to_thread(stylesheet.read_text, "utf-8")
            written.append(await write_text(stylesheet, TAILWIND_DIRECTIVES + original))

        return written
