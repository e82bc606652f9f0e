"""create-rwapp scaffolder -- materialises a starter project from a template.

Quick usage::

    from create_rwapp.config import Framework, ProjectOptions
    from create_rwapp.scaffolder import ProjectGenerator

    options = ProjectOptions(name="my-app", framework=Framework.REACT_TS, eslint=True)
    result = await ProjectGenerator(options).generate()
"""

from .generator import ProjectGenerator, ScaffoldResult
from .manifest import PackageManifest
from .store import (
    ProjectExistsError,
    ScaffoldError,
    TemplateNotFoundError,
    TemplateStore,
    copy_tree,
)
from .templates import TemplateRenderer

__all__ = [
    "PackageManifest",
    "ProjectExistsError",
    "ProjectGenerator",
    "ScaffoldError",
    "ScaffoldResult",
    "TemplateNotFoundError",
    "TemplateRenderer",
    "TemplateStore",
    "copy_tree",
]
