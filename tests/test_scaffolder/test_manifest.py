"""Tests for the in-memory package.json document.

Covers:
- load / name / scripts
- dev-dependency accumulation and merge semantics
- single save with the expected JSON layout
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_rwapp.scaffolder.manifest import PackageManifest


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    path = tmp_path / "package.json"
    path.write_text(
        json.dumps(
            {
                "name": "template",
                "version": "0.0.0",
                "scripts": {"dev": "vite"},
                "dependencies": {"react": "^18.2.0"},
                "devDependencies": {"vite": "^5.0.12", "typescript": "^5.3.3"},
            }
        ),
        encoding="utf-8",
    )
    return path


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestLoad:
    def test_load(self, manifest_path):
        manifest = PackageManifest.load(manifest_path)
        assert manifest.path == manifest_path
        assert manifest.name == "template"
        assert manifest.scripts == {"dev": "vite"}

    def test_name_setter(self, manifest_path):
        manifest = PackageManifest.load(manifest_path)
        manifest.name = "demo"
        assert manifest.to_dict()["name"] == "demo"


class TestScripts:
    def test_set_script_keeps_existing(self, manifest_path):
        manifest = PackageManifest.load(manifest_path)
        manifest.set_script("lint", "eslint .")
        assert manifest.scripts == {"dev": "vite", "lint": "eslint ."}

    def test_scripts_created_when_absent(self, tmp_path):
        manifest = PackageManifest(tmp_path / "package.json", {"name": "x"})
        manifest.set_script("test", "vitest")
        assert manifest.to_dict()["scripts"] == {"test": "vitest"}


class TestDevDependencies:
    def test_merge_is_superset(self, manifest_path):
        manifest = PackageManifest.load(manifest_path)
        manifest.add_dev_dependencies({"eslint": "^8.56.0"})
        manifest.add_dev_dependencies({"prettier": "^3.2.4"})
        assert manifest.dev_dependencies == {
            "vite": "^5.0.12",
            "typescript": "^5.3.3",
            "eslint": "^8.56.0",
            "prettier": "^3.2.4",
        }

    def test_same_key_overwrites(self, manifest_path):
        manifest = PackageManifest.load(manifest_path)
        manifest.add_dev_dependencies({"vite": "^5.1.0"})
        assert manifest.dev_dependencies["vite"] == "^5.1.0"
        assert manifest.dev_dependencies["typescript"] == "^5.3.3"

    def test_template_data_untouched_until_merge(self, manifest_path):
        manifest = PackageManifest.load(manifest_path)
        manifest.add_dev_dependencies({"eslint": "^8.56.0"})
        assert "eslint" not in manifest.data["devDependencies"]
        assert "eslint" in manifest.to_dict()["devDependencies"]

    def test_no_dev_dependencies_anywhere(self, tmp_path):
        manifest = PackageManifest(tmp_path / "package.json", {"name": "x"})
        assert "devDependencies" not in manifest.to_dict()
        manifest.add_dev_dependencies({"vitest": "^1.2.1"})
        assert manifest.to_dict()["devDependencies"] == {"vitest": "^1.2.1"}

    def test_other_fields_preserved(self, manifest_path):
        manifest = PackageManifest.load(manifest_path)
        manifest.add_dev_dependencies({"eslint": "^8.56.0"})
        data = manifest.to_dict()
        assert data["version"] == "0.0.0"
        assert data["dependencies"] == {"react": "^18.2.0"}


class TestSave:
    async def test_save_writes_merged_document(self, manifest_path):
        manifest = PackageManifest.load(manifest_path)
        manifest.name = "demo"
        manifest.set_script("format", "prettier --write .")
        manifest.add_dev_dependencies({"prettier": "^3.2.4"})

        path = await manifest.save()
        assert path == manifest_path
        text = manifest_path.read_text(encoding="utf-8")
        assert text.startswith('{\n  "name": "demo",')
        assert text.endswith("}\n")
        data = json.loads(text)
        assert data["scripts"]["format"] == "prettier --write ."
        assert data["devDependencies"]["prettier"] == "^3.2.4"
