"""Main scaffolding orchestrator.

Copies the selected framework template into a new directory, applies the
tooling patches enabled in ``ProjectOptions`` and writes ``package.json``
once at the end.  Git setup runs last, after the manifest is on disk.
"""

from __future__ import annotations

import asyncio
import time
from pathlib import Path

from pydantic import BaseModel, Field

from ..config import ExecutionContext, ProjectOptions
from ..utils import console, print_step
from .eslint_gen import EslintGenerator
from .git_gen import GitGenerator
from .manifest import PackageManifest
from .playwright_gen import PlaywrightGenerator
from .prettier_gen import PrettierGenerator
from .store import ProjectExistsError, TemplateStore
from .tailwind_gen import TailwindGenerator
from .templates import TemplateRenderer, build_context
from .vitest_gen import VitestGenerator

MANIFEST_FILE = "package.json"


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class ScaffoldResult(BaseModel):
    """Outcome of one scaffolding run."""

    project_dir: Path
    files_written: list[Path] = Field(default_factory=list)
    git_initialized: bool = False
    elapsed: float = 0.0


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Scaffolds one project described by a ``ProjectOptions``.

    Patches run in a fixed order (Tailwind, ESLint, Vitest, Playwright,
    Prettier).  They touch disjoint files and only share the in-memory
    manifest, whose additions are merged and flushed once afterwards.
    """

    def __init__(
        self,
        options: ProjectOptions,
        context: ExecutionContext | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.options = options
        self.context = context or ExecutionContext()
        self.renderer = renderer or TemplateRenderer()
        self.store = TemplateStore(self.context.template_root)
        self.tailwind_gen = TailwindGenerator(self.renderer)
        self.eslint_gen = EslintGenerator()
        self.vitest_gen = VitestGenerator(self.renderer)
        self.playwright_gen = PlaywrightGenerator(self.renderer)
        self.prettier_gen = PrettierGenerator(self.renderer)
        self.git_gen = GitGenerator(self.renderer)

    @property
    def project_dir(self) -> Path:
        return self.context.project_dir(self.options.name)

    async def generate(self) -> ScaffoldResult:
        """Create and configure the project directory.

        Raises:
            ProjectExistsError: If the destination already exists.
            TemplateNotFoundError: If the framework has no template tree.
            OSError: On any file-system failure (partial output is kept).
        """
        started = time.monotonic()
        options = self.options
        project_root = self.project_dir

        if await asyncio.to_thread(project_root.exists):
            raise ProjectExistsError(project_root)

        console.print(f"\nScaffolding project in {project_root}...")
        files = await self.store.materialize(options.framework, project_root)
        console.print("[green]✔[/green] Copied template files.")

        manifest = await asyncio.to_thread(
            PackageManifest.load, project_root / MANIFEST_FILE
        )
        manifest.name = options.name
        ctx = build_context(options)

        if options.tailwind:
            print_step("Adding Tailwind CSS...")
            files += await self.tailwind_gen.generate(project_root, manifest, options, ctx)

        if options.eslint:
            print_step("Adding ESLint...")
            if options.eslint_google_config:
                console.print("  [dim]-[/dim] Using Google's ESLint config.")
            files += await self.eslint_gen.generate(project_root, manifest, options, ctx)

        if options.vitest:
            print_step("Adding Vitest...")
            files += await self.vitest_gen.generate(project_root, manifest, options, ctx)

        if options.playwright:
            print_step("Adding Playwright for E2E testing...")
            files += await self.playwright_gen.generate(project_root, manifest, options, ctx)

        if options.prettier:
            print_step("Adding Prettier...")
            files += await self.prettier_gen.generate(project_root, manifest, options, ctx)

        print_step("Updating package.json...")
        files.append(await manifest.save())

        git_initialized = False
        if options.git:
            print_step("Initializing Git repository...")
            files.append(await self.git_gen.write_gitignore(project_root, ctx))
            git_initialized = await self.git_gen.init_repository(project_root)

        return ScaffoldResult(
            project_dir=project_root,
            files_written=_dedupe(files),
            git_initialized=git_initialized,
            elapsed=time.monotonic() - started,
        )


def _dedupe(paths: list[Path]) -> list[Path]:
    """Drop repeated paths (e.g. a copied stylesheet that was then patched)."""
    return list(dict.fromkeys(paths))
