"""Framework template trees and the recursive copier.

Each supported framework has a read-only starter project under the template
root (``frameworks/<framework-id>/`` by default).  A scaffolding run copies
one of these trees, byte for byte, into a destination that must not exist
yet.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from ..config import Framework


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for scaffolding failures reported to the user."""


class ProjectExistsError(ScaffoldError):
    """Raised when the destination directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory '{path.name}' already exists.")


class TemplateNotFoundError(ScaffoldError):
    """Raised when a framework has no template tree under the template root."""

    def __init__(self, framework: Framework, path: Path) -> None:
        self.framework = framework
        self.path = path
        super().__init__(f"No template for '{framework.value}' at {path}")


# ---------------------------------------------------------------------------
# Template store
# ---------------------------------------------------------------------------


class TemplateStore:
    """Locates framework template trees under a root directory."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def path_for(self, framework: Framework) -> Path:
        """Return the template directory for *framework*.

        Raises:
            TemplateNotFoundError: If the directory does not exist.
        """
        path = self.root / framework.value
        if not path.is_dir():
            raise TemplateNotFoundError(framework, path)
        return path

    def available(self) -> list[Framework]:
        """Frameworks that have a template tree, in declaration order."""
        return [f for f in Framework if (self.root / f.value).is_dir()]

    async def materialize(self, framework: Framework, dest: str | Path) -> list[Path]:
        """Copy the template for *framework* to *dest*.

        Returns:
            Every regular file written, in copy order.
        """
        src = self.path_for(framework)
        return await asyncio.to_thread(copy_tree, src, Path(dest))


# ---------------------------------------------------------------------------
# Recursive copier
# ---------------------------------------------------------------------------


def copy_tree(src: Path, dest: Path) -> list[Path]:
    """Copy the directory tree *src* to *dest*, preserving its structure.

    File contents are copied unchanged.  I/O errors propagate to the caller;
    nothing already written is removed.

    Raises:
        ProjectExistsError: If *dest* already exists (nothing is touched).
    """
    if dest.exists():
        raise ProjectExistsError(dest)
    written: list[Path] = []
    _copy_recursive(src, dest, written)
    return written


def _copy_recursive(src: Path, dest: Path, written: list[Path]) -> None:
    if src.is_dir():
        dest.mkdir(parents=True, exist_ok=True)
        for child in sorted(src.iterdir()):
            _copy_recursive(child, dest / child.name, written)
    elif src.is_file():
        shutil.copyfile(src, dest)
        written.append(dest)
