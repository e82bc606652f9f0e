"""Vitest unit-test integration.

Generates:
- a smoke test for the template's default component (per framework)
- ``src/test-setup.<ext>`` where the framework needs one
- a ``test`` block and a ``vitest`` type reference in ``vite.config.<ext>``
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..config import Framework, ProjectOptions
from ..utils import write_text
from .manifest import PackageManifest
from .templates import TemplateRenderer

VITEST_DEPENDENCIES: dict[str, str] = {
    "vitest": "^1.2.1",
    "jsdom": "^24.0.0",
}

_REACT_DEPENDENCIES: dict[str, str] = {
    "@testing-library/react": "^14.2.1",
    "@testing-library/jest-dom": "^6.4.2",
}
_VUE_DEPENDENCIES: dict[str, str] = {"@vue/test-utils": "^2.4.4"}
_LIT_DEPENDENCIES: dict[str, str] = {"@open-wc/testing": "^4.0.0"}

VITEST_REFERENCE = '/// <reference types="vitest" />\n'
DEFINE_CONFIG_IMPORT = "import { defineConfig } from 'vite'"
PLUGINS_KEY = "plugins:"


# ---------------------------------------------------------------------------
# Per-framework test profiles
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UnitTestProfile:
    """What the unit-test patch writes for one framework.

    Paths are relative to the project root.
    """

    template: str
    test_file: str
    dependencies: dict[str, str] = field(default_factory=dict)
    setup_file: str | None = None


UNIT_TEST_PROFILES: dict[Framework, UnitTestProfile] = {
    Framework.REACT_TS: UnitTestProfile(
        "vitest/react.test.j2", "src/App.test.tsx", _REACT_DEPENDENCIES, "src/test-setup.ts"
    ),
    Framework.REACT_JS: UnitTestProfile(
        "vitest/react.test.j2", "src/App.test.jsx", _REACT_DEPENDENCIES, "src/test-setup.js"
    ),
    Framework.VUE_TS: UnitTestProfile("vitest/vue.test.j2", "src/App.test.ts", _VUE_DEPENDENCIES),
    Framework.VUE_JS: UnitTestProfile("vitest/vue.test.j2", "src/App.test.js", _VUE_DEPENDENCIES),
    Framework.LIT_TS: UnitTestProfile(
        "vitest/lit.test.j2", "src/my-element.test.ts", _LIT_DEPENDENCIES
    ),
    Framework.LIT_JS: UnitTestProfile(
        "vitest/lit.test.j2", "src/my-element.test.js", _LIT_DEPENDENCIES
    ),
    Framework.VANILLA_TS: UnitTestProfile("vitest/vanilla.test.j2", "src/main.test.ts"),
    Framework.VANILLA_JS: UnitTestProfile("vitest/vanilla.test.j2", "src/main.test.js"),
}


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class VitestGenerator:
    """Adds Vitest, a smoke test and the matching Vite configuration."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(
        self,
        project_root: Path,
        manifest: PackageManifest,
        options: ProjectOptions,
        context: dict[str, Any],
    ) -> list[Path]:
        framework = options.framework
        profile = UNIT_TEST_PROFILES[framework]

        manifest.add_dev_dependencies(VITEST_DEPENDENCIES)
        manifest.add_dev_dependencies(profile.dependencies)
        manifest.set_script("test", "vitest")

        written = [
            await self.renderer.render_to_file(
                profile.template, project_root / profile.test_file, context
            )
        ]
        if profile.setup_file:
            written.append(
                await self.renderer.render_to_file(
                    "vitest/test-setup.j2", project_root / profile.setup_file, context
                )
            )

        vite_config = project_root / f"vite.config.{framework.script_ext}"
        if await asyncio.to_thread(vite_config.is_file):
            source = await asyncio.to_thread(vite_config.read_text, "utf-8")
            patched = splice_vite_config(source, profile.setup_file)
            if patched != source:
                written.append(await write_text(vite_config, patched))

        return written


# ---------------------------------------------------------------------------
# Vite config splicing
# ---------------------------------------------------------------------------


def splice_vite_config(source: str, setup_file: str | None = None) -> str:
    """Insert the Vitest type reference and ``test`` block into a Vite config.

    The reference goes before the ``defineConfig`` import, the block before
    the first ``plugins:`` key.  Each insertion is skipped when its anchor is
    missing, so a config without either anchor comes back unchanged.
    """
    result = source
    if DEFINE_CONFIG_IMPORT in result:
        result = result.replace(
            DEFINE_CONFIG_IMPORT, VITEST_REFERENCE + DEFINE_CONFIG_IMPORT, 1
        )

    index = result.find(PLUGINS_KEY)
    if index == -1:
        return result

    line_start = result.rfind("\n", 0, index) + 1
    indent = result[line_start:index]
    if indent.strip():
        # ``plugins:`` shares its line with other code; insert inline.
        return result[:index] + _inline_test_block(setup_file) + result[index:]
    return result[:line_start] + _test_block(indent, setup_file) + result[line_start:]


def _test_block(indent: str, setup_file: str | None) -> str:
    inner = indent + "  "
    lines = [
        f"{indent}test: {{",
        f"{inner}globals: true,",
        f"{inner}environment: 'jsdom',",
    ]
    if setup_file:
        lines.append(f"{inner}setupFiles: './{setup_file}',")
    lines.append(f"{indent}}},")
    return "\n".join(lines) + "\n"


def _inline_test_block(setup_file: str | None) -> str:
    parts = ["globals: true", "environment: 'jsdom'"]
    if setup_file:
        parts.append(f"setupFiles: './{setup_file}'")
    return "test: { " + ", ".join(parts) + " }, "
