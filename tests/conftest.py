"""Shared pytest fixtures for the create-rwapp test suite.

Provides reusable fixtures for:
- An isolated working directory wrapped in an ``ExecutionContext``
- A ``ProjectOptions`` factory
- Freshly copied framework templates with a loaded manifest
- A scripted prompter standing in for questionary
- A mocked ``git init`` (no test ever spawns a real git process)
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from create_rwapp.config import ExecutionContext, Framework, ProjectOptions
from create_rwapp.scaffolder.manifest import PackageManifest
from create_rwapp.scaffolder.store import copy_tree
from create_rwapp.scaffolder.templates import TemplateRenderer, build_context


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty directory projects are created in (auto-cleanup)."""
    directory = tmp_path / "workspace"
    directory.mkdir()
    yield directory


@pytest.fixture
def exec_context(workspace: Path) -> ExecutionContext:
    """Execution context using the bundled templates and ``workspace``."""
    return ExecutionContext(cwd=workspace)


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@pytest.fixture
def make_options() -> Callable[..., ProjectOptions]:
    """Factory for ``ProjectOptions`` with every toggle off by default.

    Usage::

        def test_something(make_options):
            options = make_options(framework="vue-js", eslint=True)
    """

    def factory(
        name: str = "demo",
        framework: str | Framework = Framework.REACT_TS,
        **toggles: bool,
    ) -> ProjectOptions:
        return ProjectOptions(name=name, framework=Framework(framework), **toggles)

    return factory


# ---------------------------------------------------------------------------
# Copied templates
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    """The real tooling template renderer."""
    return TemplateRenderer()


@pytest.fixture
def copy_template(
    exec_context: ExecutionContext,
) -> Callable[[str | Framework], tuple[Path, PackageManifest]]:
    """Copy a framework template into the workspace.

    Returns a factory yielding ``(project_root, manifest)`` so patch
    generators can be exercised in isolation.
    """

    def factory(framework: str | Framework) -> tuple[Path, PackageManifest]:
        framework = Framework(framework)
        root = exec_context.project_dir("demo")
        copy_tree(exec_context.template_dir(framework), root)
        return root, PackageManifest.load(root / "package.json")

    return factory


@pytest.fixture
def render_context() -> Callable[[ProjectOptions], dict[str, Any]]:
    """Shortcut for ``build_context``."""
    return build_context


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

class ScriptedPrompter:
    """Prompter returning canned answers and recording every question.

    ``answers`` maps a question (or its prefix) to the value to return; a
    question without an answer is treated like a cancelled prompt.
    """

    def __init__(self, answers: dict[str, Any] | None = None) -> None:
        self.answers = dict(answers or {})
        self.asked: list[str] = []

    def _answer(self, message: str) -> Any:
        self.asked.append(message)
        for question, value in self.answers.items():
            if message.startswith(question):
                return value
        return None

    def text(self, message: str, default: str = "") -> str | None:
        return self._answer(message)

    def select(self, message: str, choices: list[tuple[str, str]]) -> str | None:
        return self._answer(message)

    def confirm(self, message: str, default: bool = False) -> bool | None:
        return self._answer(message)


@pytest.fixture
def scripted_prompter() -> Callable[..., ScriptedPrompter]:
    """Factory for a ``ScriptedPrompter``."""
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Mock git
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def mock_git_init():
    """Replace the subprocess runner used for ``git init``.

    Autouse so no test spawns git.  Request it explicitly to inspect calls or
    change the return value::

        def test_git(mock_git_init):
            mock_git_init.return_value = (128, "", "fatal: boom")
    """
    with patch(
        "create_rwapp.scaffolder.git_gen.run_command",
        new_callable=AsyncMock,
        return_value=(0, "Initialized empty Git repository", ""),
    ) as mocked:
        yield mocked
