"""create-rwapp configuration.

Typed models for everything a single scaffolding run needs: the framework
catalogue, the resolved per-project options and the execution context
(where templates live, where the project is created). All models use
Pydantic v2 so invalid input is rejected at construction time.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_PROJECT_NAME = "my-rwapp-project"

_DEFAULT_TEMPLATE_ROOT = Path(__file__).parent / "scaffolder" / "frameworks"


# ---------------------------------------------------------------------------
# Framework catalogue
# ---------------------------------------------------------------------------


class Framework(str, Enum):
    """Supported starter templates."""

    REACT_TS = "react-ts"
    REACT_JS = "react-js"
    VUE_TS = "vue-ts"
    VUE_JS = "vue-js"
    LIT_TS = "lit-ts"
    LIT_JS = "lit-js"
    VANILLA_TS = "vanilla-ts"
    VANILLA_JS = "vanilla-js"

    @property
    def family(self) -> str:
        """UI family, e.g. ``"react"`` for both React variants."""
        return self.value.split("-", 1)[0]

    @property
    def is_typescript(self) -> bool:
        return self.value.endswith("-ts")

    @property
    def script_ext(self) -> str:
        return "ts" if self.is_typescript else "js"

    @property
    def component_ext(self) -> str:
        return "tsx" if self.is_typescript else "jsx"

    @property
    def stylesheet(self) -> str:
        """File name of the global stylesheet under ``src/``."""
        if self.family in ("vue", "vanilla"):
            return "style.css"
        return "index.css"

    @property
    def title(self) -> str:
        """Human-readable label used in prompts and summaries."""
        language = "TypeScript" if self.is_typescript else "JavaScript"
        if self.family == "vanilla":
            return f"Plain {language}"
        return f"{_FAMILY_TITLES[self.family]} ({language})"


_FAMILY_TITLES: dict[str, str] = {
    "react": "React",
    "vue": "Vue",
    "lit": "Lit",
}


# ---------------------------------------------------------------------------
# Project options
# ---------------------------------------------------------------------------


class ProjectOptions(BaseModel):
    """Fully resolved configuration for one scaffolding run.

    Created once by the option resolver and never mutated afterwards.
    ``eslint_google_config`` is only honoured when ``eslint`` is set.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project directory and package name")
    framework: Framework
    tailwind: bool = Field(default=False, description="Add Tailwind CSS")
    eslint: bool = Field(default=False, description="Add ESLint")
    eslint_google_config: bool = Field(
        default=False, description="Extend Google's ESLint preset"
    )
    vitest: bool = Field(default=False, description="Add Vitest unit tests")
    playwright: bool = Field(default=False, description="Add Playwright E2E tests")
    prettier: bool = Field(default=False, description="Add Prettier")
    git: bool = Field(default=False, description="Initialise a git repository")

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not value or value != value.strip():
            raise ValueError("project name must be non-empty without surrounding whitespace")
        if value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(f"project name is not a valid directory name: {value!r}")
        return value

    def enabled_tools(self) -> list[str]:
        """Return the names of every enabled toggle, in patch order."""
        tools = [
            ("Tailwind CSS", self.tailwind),
            ("ESLint", self.eslint),
            ("Google ESLint config", self.eslint and self.eslint_google_config),
            ("Vitest", self.vitest),
            ("Playwright", self.playwright),
            ("Prettier", self.prettier),
            ("Git", self.git),
        ]
        return [label for label, enabled in tools if enabled]


# ---------------------------------------------------------------------------
# Execution context
# ---------------------------------------------------------------------------


class ExecutionContext(BaseModel):
    """Where a run reads templates from and writes the project to."""

    cwd: Path = Field(default_factory=Path.cwd)
    template_root: Path = Field(default=_DEFAULT_TEMPLATE_ROOT)

    def project_dir(self, name: str) -> Path:
        """Destination directory for a project called *name*."""
        return (self.cwd / name).resolve()

    def template_dir(self, framework: Framework) -> Path:
        """Template tree for *framework*."""
        return self.template_root / framework.value

    @classmethod
    def from_env(cls) -> "ExecutionContext":
        """Build a context from environment variables.

        Recognised variables (all optional):
            RWAPP_TEMPLATE_DIR, RWAPP_CWD.
        """
        kwargs: dict[str, Path] = {}
        if os.environ.get("RWAPP_TEMPLATE_DIR"):
            kwargs["template_root"] = Path(os.environ["RWAPP_TEMPLATE_DIR"])
        if os.environ.get("RWAPP_CWD"):
            kwargs["cwd"] = Path(os.environ["RWAPP_CWD"])
        return cls(**kwargs)
