"""create-rwapp -- scaffold a Vite web project with optional tooling.

Copies a starter template (React, Vue, Lit or plain, in TypeScript or
JavaScript) and wires in Tailwind CSS, ESLint, Vitest, Playwright, Prettier
and git on request.
"""

from .config import ExecutionContext, Framework, ProjectOptions
from .scaffolder import ProjectGenerator, ScaffoldResult

__all__ = [
    "ExecutionContext",
    "Framework",
    "ProjectGenerator",
    "ProjectOptions",
    "ScaffoldResult",
]
