"""Prettier integration: ``.prettierrc.json`` and ``.prettierignore``."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..config import ProjectOptions
from ..utils import save_json
from .manifest import PackageManifest
from .templates import TemplateRenderer

PRETTIER_VERSION = "^3.2.4"

PRETTIER_CONFIG: dict[str, Any] = {
    "semi": True,
    "tabWidth": 2,
    "printWidth": 100,
    "singleQuote": True,
    "trailingComma": "es5",
    "jsxSingleQuote": True,
}


class PrettierGenerator:
    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(
        self,
        project_root: Path,
        manifest: PackageManifest,
        options: ProjectOptions,
        context: dict[str, Any],
    ) -> list[Path]:
        manifest.add_dev_dependencies({"prettier": PRETTIER_VERSION})
        manifest.set_script("format", "prettier --write .")

        return [
            await save_json(PRETTIER_CONFIG, project_root / ".prettierrc.json"),
            await self.renderer.render_to_file(
                "prettier/prettierignore.j2", project_root / ".prettierignore", context
            ),
        ]
