"""Option resolution: command-line flags first, interactive prompts for the rest.

Every value the user did not pass on the command line is asked for with
questionary.  Toggles default to "no".  A cancelled prompt (Ctrl-C, Esc or
an empty project name) raises ``PromptCancelled`` before anything is
written to disk.
"""

from __future__ import annotations

from typing import Protocol

import questionary

from .config import DEFAULT_PROJECT_NAME, Framework, ProjectOptions

# (field, question) in the order they are asked.
TOGGLE_PROMPTS: list[tuple[str, str]] = [
    ("tailwind", "Add Tailwind CSS?"),
    ("eslint", "Add ESLint for code linting?"),
    ("eslint_google_config", "Use Google's ESLint config?"),
    ("vitest", "Add Vitest for Unit Testing?"),
    ("playwright", "Add Playwright for E2E Testing?"),
    ("prettier", "Add Prettier for code formatting?"),
    ("git", "Initialize a new git repository?"),
]


class PromptCancelled(Exception):
    """The user aborted an interactive prompt."""


class Prompter(Protocol):
    def text(self, message: str, default: str = "") -> str | None: ...

    def select(self, message: str, choices: list[tuple[str, str]]) -> str | None: ...

    def confirm(self, message: str, default: bool = False) -> bool | None: ...


class QuestionaryPrompter:
    """Terminal prompts backed by questionary.

    Each method returns ``None`` when the user cancels.
    """

    def text(self, message: str, default: str = "") -> str | None:
        return questionary.text(message, default=default).ask()

    def select(self, message: str, choices: list[tuple[str, str]]) -> str | None:
        return questionary.select(
            message,
            choices=[questionary.Choice(title, value=value) for title, value in choices],
        ).ask()

    def confirm(self, message: str, default: bool = False) -> bool | None:
        return questionary.confirm(message, default=default).ask()


def framework_choices(frameworks: list[Framework] | None = None) -> list[tuple[str, str]]:
    """``(title, value)`` pairs for the framework selection prompt.

    Defaults to every ``Framework``; pass the frameworks that actually have a
    template tree to hide the rest.
    """
    return [(f.title, f.value) for f in (frameworks or list(Framework))]


def resolve_options(
    project_name: str | None = None,
    framework: str | Framework | None = None,
    toggles: dict[str, bool | None] | None = None,
    *,
    prompter: Prompter | None = None,
    use_defaults: bool = False,
    frameworks: list[Framework] | None = None,
) -> ProjectOptions:
    """Merge explicit values with interactive answers into ``ProjectOptions``.

    Args:
        project_name: Positional project name, or ``None`` to ask.
        framework: Framework identifier, or ``None`` to ask.
        toggles: Toggle values keyed by ``ProjectOptions`` field name;
            ``None`` (or a missing key) means "ask".
        prompter: Prompt backend, ``QuestionaryPrompter`` by default.
        use_defaults: Never prompt; fill every missing value with its default.
        frameworks: Frameworks offered by the selection prompt (and the
            first one used by ``use_defaults``); every ``Framework`` if omitted.

    Raises:
        PromptCancelled: If any prompt is cancelled or the name is left empty.
    """
    prompter = prompter or QuestionaryPrompter()
    frameworks = frameworks or list(Framework)
    toggles = dict(toggles or {})

    if not project_name:
        if use_defaults:
            project_name = DEFAULT_PROJECT_NAME
        else:
            project_name = prompter.text(
                "What is your project named?", default=DEFAULT_PROJECT_NAME
            )
            if not project_name:
                raise PromptCancelled("project name")

    if framework is None:
        if use_defaults:
            framework = frameworks[0]
        else:
            framework = prompter.select("Select a framework:", framework_choices(frameworks))
            if not framework:
                raise PromptCancelled("framework")

    answers: dict[str, bool] = {}
    for field, question in TOGGLE_PROMPTS:
        value = toggles.get(field)
        if value is not None:
            answers[field] = value
            continue
        if field == "eslint_google_config" and not answers["eslint"]:
            answers[field] = False
            continue
        if use_defaults:
            answers[field] = False
            continue
        answer = prompter.confirm(question, default=False)
        if answer is None:
            raise PromptCancelled(field)
        answers[field] = answer

    return ProjectOptions(name=project_name, framework=Framework(framework), **answers)
