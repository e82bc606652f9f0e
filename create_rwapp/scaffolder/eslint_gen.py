"""ESLint integration.

Builds ``.eslintrc.json`` from a base document and extends it for
TypeScript variants, the React and Vue families and the optional Google
preset.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..config import Framework, ProjectOptions
from ..utils import save_json
from .manifest import PackageManifest

ESLINT_VERSION = "^8.56.0"
TYPESCRIPT_ESLINT_VERSION = "^6.19.0"
ESLINT_PLUGIN_REACT_VERSION = "^7.33.2"
ESLINT_PLUGIN_VUE_VERSION = "^9.20.1"
ESLINT_CONFIG_GOOGLE_VERSION = "^0.14.0"

LINT_SCRIPT = "eslint . --ext .js,.jsx,.ts,.tsx,.vue"


class EslintGenerator:
    """Adds ESLint and a framework-aware ``.eslintrc.json``."""

    async def generate(
        self,
        project_root: Path,
        manifest: PackageManifest,
        options: ProjectOptions,
        context: dict[str, Any],
    ) -> list[Path]:
        config, dependencies = build_eslint_config(
            options.framework, google=options.eslint_google_config
        )
        manifest.add_dev_dependencies(dependencies)
        manifest.set_script("lint", LINT_SCRIPT)
        path = await save_json(config, project_root / ".eslintrc.json")
        return [path]


def build_eslint_config(
    framework: Framework, *, google: bool = False
) -> tuple[dict[str, Any], dict[str, str]]:
    """Return the ESLint config document and the dev-dependencies it needs."""
    dependencies: dict[str, str] = {"eslint": ESLINT_VERSION}
    config: dict[str, Any] = {
        "env": {"browser": True, "es2021": True, "node": True},
        "extends": ["eslint:recommended"],
        "parserOptions": {"ecmaVersion": "latest", "sourceType": "module"},
        "rules": {},
    }

    if framework.is_typescript:
        dependencies["@typescript-eslint/parser"] = TYPESCRIPT_ESLINT_VERSION
        dependencies["@typescript-eslint/eslint-plugin"] = TYPESCRIPT_ESLINT_VERSION
        config["parser"] = "@typescript-eslint/parser"
        config["plugins"] = ["@typescript-eslint"]
        config["extends"].append("plugin:@typescript-eslint/recommended")

    if framework.family == "react":
        dependencies["eslint-plugin-react"] = ESLINT_PLUGIN_REACT_VERSION
        config["extends"].extend(["plugin:react/recommended", "plugin:react/jsx-runtime"])
    elif framework.family == "vue":
        dependencies["eslint-plugin-vue"] = ESLINT_PLUGIN_VUE_VERSION
        config["extends"].append("plugin:vue/vue3-essential")

    if google:
        dependencies["eslint-config-google"] = ESLINT_CONFIG_GOOGLE_VERSION
        config["extends"].append("google")

    return config, dependencies
