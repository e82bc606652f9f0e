"""Version-control setup: ``.gitignore`` plus ``git init``.

Runs after ``package.json`` has been written.  A failing ``git init`` is
reported as a warning and does not fail the scaffolding run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..utils import print_warning, run_command
from .templates import TemplateRenderer

GIT_INIT_COMMAND = ["git", "init"]


class GitGenerator:
    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def write_gitignore(self, project_root: Path, context: dict[str, Any]) -> Path:
        return await self.renderer.render_to_file(
            "git/gitignore.j2", project_root / ".gitignore", context
        )

    async def init_repository(self, project_root: Path) -> bool:
        """Run ``git init`` inside *project_root* with its output captured.

        Returns:
            ``True`` if the repository was created.
        """
        try:
            returncode, _stdout, stderr = await run_command(
                GIT_INIT_COMMAND, cwd=project_root
            )
        except OSError as exc:
            print_warning(f"Could not initialize git repository: {exc}")
            return False

        if returncode != 0:
            detail = f": {stderr}" if stderr else ""
            print_warning(f"Could not initialize git repository{detail}")
            return False
        return True
