"""Playwright end-to-end test integration.

Generates:
- ``playwright.config.ts`` at the project root
- ``tests-e2e/example.spec.ts`` checking the page title and main heading
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..config import ProjectOptions
from .manifest import PackageManifest
from .templates import TemplateRenderer

PLAYWRIGHT_VERSION = "^1.41.1"
E2E_DIR = "tests-e2e"
DEV_SERVER_URL = "http://localhost:5173"


class PlaywrightGenerator:
    """Generates Playwright configuration and an example test."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(
        self,
        project_root: Path,
        manifest: PackageManifest,
        options: ProjectOptions,
        context: dict[str, Any],
    ) -> list[Path]:
        manifest.add_dev_dependencies({"@playwright/test": PLAYWRIGHT_VERSION})
        manifest.set_script("test:e2e", "playwright test")

        e2e_context = {**context, "e2e_dir": E2E_DIR, "base_url": DEV_SERVER_URL}
        written: list[Path] = []

        written.append(
            await self.renderer.render_to_file(
                "playwright/playwright.config.ts.j2",
                project_root / "playwright.config.ts",
                e2e_context,
            )
        )
        written.append(
            await self.renderer.render_to_file(
                "playwright/example.spec.ts.j2",
                project_root / E2E_DIR / "example.spec.ts",
                e2e_context,
            )
        )
        return written
