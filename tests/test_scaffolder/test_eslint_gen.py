"""Tests for the ESLint patch.

Covers:
- base config document
- TypeScript, React, Vue and Google preset extensions
- manifest script and dependencies
- .eslintrc.json written as JSON
"""

from __future__ import annotations

import json

import pytest

from create_rwapp.config import Framework
from create_rwapp.scaffolder.eslint_gen import (
    LINT_SCRIPT,
    EslintGenerator,
    build_eslint_config,
)


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# build_eslint_config
# ---------------------------------------------------------------------------


class TestBuildEslintConfig:
    def test_base_config_for_plain_javascript(self):
        config, deps = build_eslint_config(Framework.VANILLA_JS)
        assert config == {
            "env": {"browser": True, "es2021": True, "node": True},
            "extends": ["eslint:recommended"],
            "parserOptions": {"ecmaVersion": "latest", "sourceType": "module"},
            "rules": {},
        }
        assert deps == {"eslint": "^8.56.0"}

    @pytest.mark.parametrize(
        "framework", [f for f in Framework if f.is_typescript]
    )
    def test_typescript_variants(self, framework):
        config, deps = build_eslint_config(framework)
        assert config["parser"] == "@typescript-eslint/parser"
        assert config["plugins"] == ["@typescript-eslint"]
        assert "plugin:@typescript-eslint/recommended" in config["extends"]
        assert deps["@typescript-eslint/parser"] == "^6.19.0"
        assert deps["@typescript-eslint/eslint-plugin"] == "^6.19.0"

    @pytest.mark.parametrize(
        "framework", [f for f in Framework if not f.is_typescript]
    )
    def test_javascript_variants_have_no_ts_parser(self, framework):
        config, deps = build_eslint_config(framework)
        assert "parser" not in config
        assert "plugins" not in config
        assert not any(name.startswith("@typescript-eslint") for name in deps)

    def test_react(self):
        config, deps = build_eslint_config(Framework.REACT_TS)
        assert config["extends"] == [
            "eslint:recommended",
            "plugin:@typescript-eslint/recommended",
            "plugin:react/recommended",
            "plugin:react/jsx-runtime",
        ]
        assert deps["eslint-plugin-react"] == "^7.33.2"

    def test_vue(self):
        config, deps = build_eslint_config(Framework.VUE_JS)
        assert config["extends"] == ["eslint:recommended", "plugin:vue/vue3-essential"]
        assert deps["eslint-plugin-vue"] == "^9.20.1"

    def test_lit_has_no_family_plugin(self):
        _config, deps = build_eslint_config(Framework.LIT_JS)
        assert deps == {"eslint": "^8.56.0"}

    def test_google_preset_last(self):
        config, deps = build_eslint_config(Framework.REACT_JS, google=True)
        assert config["extends"][-1] == "google"
        assert deps["eslint-config-google"] == "^0.14.0"


# ---------------------------------------------------------------------------
# EslintGenerator
# ---------------------------------------------------------------------------


class TestGenerate:
    async def test_writes_config_and_updates_manifest(
        self, copy_template, make_options, render_context
    ):
        root, manifest = copy_template("vue-js")
        options = make_options(framework="vue-js", eslint=True)

        written = await EslintGenerator().generate(root, manifest, options, render_context(options))
        assert written == [root / ".eslintrc.json"]
        config = json.loads((root / ".eslintrc.json").read_text(encoding="utf-8"))
        assert "plugin:vue/vue3-essential" in config["extends"]
        assert manifest.scripts["lint"] == LINT_SCRIPT
        assert manifest.dev_dependencies["eslint-plugin-vue"] == "^9.20.1"
        assert manifest.dev_dependencies["@vitejs/plugin-vue"]

    async def test_google_preset(self, copy_template, make_options, render_context):
        root, manifest = copy_template("lit-ts")
        options = make_options(framework="lit-ts", eslint=True, eslint_google_config=True)

        await EslintGenerator().generate(root, manifest, options, render_context(options))
        config = json.loads((root / ".eslintrc.json").read_text(encoding="utf-8"))
        assert "google" in config["extends"]
        assert "eslint-config-google" in manifest.dev_dependencies
