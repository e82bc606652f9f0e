"""Command-line interface for create-rwapp."""

from __future__ import annotations

import argparse
import asyncio
import sys
from importlib.metadata import PackageNotFoundError, version

from pydantic import ValidationError

from .config import ExecutionContext, Framework, ProjectOptions
from .prompts import Prompter, PromptCancelled, resolve_options
from .scaffolder import (
    ProjectExistsError,
    ProjectGenerator,
    ScaffoldError,
    ScaffoldResult,
    TemplateStore,
)
from .utils import (
    console,
    format_duration,
    print_error,
    print_success,
    print_summary_table,
)

# (flag, ProjectOptions field, help)
TOGGLE_FLAGS: list[tuple[str, str, str]] = [
    ("--tailwind", "tailwind", "Install Tailwind CSS"),
    ("--eslint", "eslint", "Install ESLint"),
    ("--google", "eslint_google_config", "Use Google's ESLint config (requires --eslint)"),
    ("--vitest", "vitest", "Install Vitest for unit testing"),
    ("--playwright", "playwright", "Install Playwright for E2E testing"),
    ("--prettier", "prettier", "Install Prettier"),
    ("--git", "git", "Initialize a git repository"),
]


def _package_version() -> str:
    try:
        return version("create-rwapp")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-rwapp",
        description="A CLI to create a new web project with a specified framework.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-rwapp my-app -f react-ts --tailwind --eslint\n"
            "  create-rwapp my-app -f vue-js --vitest --no-git\n"
            "  create-rwapp --defaults\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("project_name", nargs="?", default=None, help="The name of the project")
    parser.add_argument(
        "--framework",
        "-f",
        choices=[f.value for f in Framework],
        default=None,
        help="Framework template to start from",
    )
    for flag, dest, help_text in TOGGLE_FLAGS:
        parser.add_argument(
            flag,
            dest=dest,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=help_text,
        )
    parser.add_argument(
        "--defaults",
        action="store_true",
        help="Do not prompt; use defaults for everything not given on the command line",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show tracebacks on errors")
    return parser


def _print_next_steps(options: ProjectOptions, result: ScaffoldResult) -> None:
    print_success(f"\n✔ Project setup complete! ({format_duration(result.elapsed)})")
    print_summary_table(
        {
            "Project": options.name,
            "Framework": options.framework.title,
            "Tooling": ", ".join(options.enabled_tools()) or "none",
            "Location": str(result.project_dir),
        },
        title="create-rwapp",
    )
    console.print("\nDone. Now run:\n")
    console.print(f"  cd {options.name}")
    console.print("  npm install")
    if result.git_initialized:
        console.print("  [dim]# a git repository has been initialized[/dim]")
    console.print("  npm run dev\n")


def main(
    argv: list[str] | None = None,
    *,
    context: ExecutionContext | None = None,
    prompter: Prompter | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    toggles = {dest: getattr(args, dest) for _flag, dest, _help in TOGGLE_FLAGS}
    context = context or ExecutionContext.from_env()

    frameworks = TemplateStore(context.template_root).available()
    if not frameworks:
        print_error(f"Error: no framework templates found in {context.template_root}")
        return 1

    try:
        options = resolve_options(
            args.project_name,
            args.framework,
            toggles,
            prompter=prompter,
            use_defaults=args.defaults,
            frameworks=frameworks,
        )
    except PromptCancelled:
        return 0
    except ValidationError as exc:
        print_error(f"Error: invalid options: {exc}")
        return 1

    try:
        result = asyncio.run(ProjectGenerator(options, context).generate())
    except ProjectExistsError as exc:
        print_error(f"\nError: {exc}")
        return 1
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        return 1
    except Exception as exc:
        print_error(f"Error: {exc}")
        if args.verbose:
            console.print_exception()
        return 1

    _print_next_steps(options, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
