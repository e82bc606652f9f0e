"""In-memory ``package.json`` document shared by all tooling patches.

Patches record scripts and dev-dependencies here; the document is written
back to disk once, after every patch has run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..utils import load_json, save_json


class PackageManifest:
    """A ``package.json`` loaded from a freshly copied template.

    Dev-dependency additions are kept apart from the template's own entries
    until :meth:`to_dict`, where they are merged on top: new keys are added,
    keys the template already declares are overwritten, nothing is removed.
    """

    def __init__(self, path: Path, data: dict[str, Any]) -> None:
        self.path = path
        self.data = data
        self.pending_dev_dependencies: dict[str, str] = {}

    @classmethod
    def load(cls, path: str | Path) -> "PackageManifest":
        path = Path(path)
        return cls(path, load_json(path))

    # -- Mutation ----------------------------------------------------------

    @property
    def name(self) -> str | None:
        return self.data.get("name")

    @name.setter
    def name(self, value: str) -> None:
        self.data["name"] = value

    @property
    def scripts(self) -> dict[str, str]:
        return self.data.setdefault("scripts", {})

    def set_script(self, name: str, command: str) -> None:
        self.scripts[name] = command

    def add_dev_dependencies(self, dependencies: dict[str, str]) -> None:
        self.pending_dev_dependencies.update(dependencies)

    # -- Serialisation -----------------------------------------------------

    @property
    def dev_dependencies(self) -> dict[str, str]:
        """Template dev-dependencies with pending additions merged in."""
        return {
            **self.data.get("devDependencies", {}),
            **self.pending_dev_dependencies,
        }

    def to_dict(self) -> dict[str, Any]:
        merged = dict(self.data)
        if self.pending_dev_dependencies or "devDependencies" in merged:
            merged["devDependencies"] = self.dev_dependencies
        return merged

    async def save(self) -> Path:
        """Write the merged document back to :attr:`path`."""
        return await save_json(self.to_dict(), self.path)
