from __future__ import annotations

import json

import pytest

from nodescout import search as search_module
from nodescout.configuration import SearchConfig
from nodescout.errors import ManifestError
from nodescout.search import (
    ManifestDirectory,
    iter_manifest_directories,
    read_manifest,
    search_for_module,
    search_for_node_modules,
)


class TestSearchForModule:
    def test_returns_existing_copies_between_start_and_root(self, tmp_path, make_package):
        repo = make_package(tmp_path / "repo")
        app = make_package(repo / "packages" / "app", lockfile=None)
        (app / "node_modules" / "lodash").mkdir(parents=True)
        (repo / "node_modules" / "lodash").mkdir(parents=True)
        (tmp_path / "node_modules" / "lodash").mkdir(parents=True)

        result = search_for_module(app / "src", "lodash", root_path=repo)

        assert result == [
            app / "node_modules" / "lodash",
            repo / "node_modules" / "lodash",
        ]

    def test_scoped_module_names(self, tmp_path, make_package):
        package = make_package(tmp_path / "package")
        scoped = package / "node_modules" / "@scope" / "pkg"
        scoped.mkdir(parents=True)

        assert search_for_module(package, "@scope/pkg") == [scoped]

    def test_skips_ancestors_without_the_module(self, tmp_path, make_package):
        outer = make_package(tmp_path / "outer")
        inner = make_package(outer / "inner", lockfile=None)
        (inner / "node_modules" / "other").mkdir(parents=True)
        (outer / "node_modules" / "lodash").mkdir(parents=True)

        assert search_for_module(inner, "lodash") == [outer / "node_modules" / "lodash"]

    def test_stops_at_first_ancestor_without_manifest(self, tmp_path, make_package):
        package = make_package(tmp_path / "workspace" / "package")
        (package / "node_modules" / "lodash").mkdir(parents=True)
        (tmp_path / "workspace" / "node_modules" / "lodash").mkdir(parents=True)

        assert search_for_module(package, "lodash") == [package / "node_modules" / "lodash"]

    def test_max_items(self, tmp_path, make_package):
        outer = make_package(tmp_path / "outer")
        inner = make_package(outer / "inner")
        (inner / "node_modules" / "lodash").mkdir(parents=True)
        (outer / "node_modules" / "lodash").mkdir(parents=True)

        assert search_for_module(inner, "lodash", max_items=1) == [
            inner / "node_modules" / "lodash"
        ]


class TestSearchForNodeModules:
    def test_without_manifest_returns_only_start_match(self, tmp_path):
        start = tmp_path / "a" / "b"
        (start / "node_modules").mkdir(parents=True)
        (tmp_path / "a" / "node_modules").mkdir()

        assert search_for_node_modules(start) == [start / "node_modules"]

    def test_without_manifest_or_match_is_empty(self, tmp_path):
        start = tmp_path / "a" / "b"
        start.mkdir(parents=True)
        (tmp_path / "a" / "node_modules").mkdir()

        assert search_for_node_modules(start) == []

    def test_root_path_bounds_the_walk(self, tmp_path):
        project = tmp_path / "project"
        start = project / "lib" / "deep"
        start.mkdir(parents=True)
        (project / "node_modules").mkdir()
        (tmp_path / "node_modules").mkdir()

        assert search_for_node_modules(start, root_path=project) == [project / "node_modules"]

    def test_relative_start(self, tmp_path, monkeypatch):
        (tmp_path / "app" / "node_modules").mkdir(parents=True)
        monkeypatch.chdir(tmp_path)

        assert search_for_node_modules("app") == [tmp_path / "app" / "node_modules"]

    def test_custom_modules_dir(self, tmp_path):
        (tmp_path / "app" / "vendor").mkdir(parents=True)
        config = SearchConfig(modules_dir="vendor")

        assert search_for_node_modules(tmp_path / "app", config=config) == [
            tmp_path / "app" / "vendor"
        ]


class TestIterManifestDirectories:
    def test_deepest_first_with_lockfile_flags(self, tmp_path, make_package):
        outer = make_package(tmp_path / "outer", lockfile="yarn.lock")
        middle = outer / "middle"
        middle.mkdir()
        inner = make_package(middle / "inner", lockfile=None)

        entries = list(iter_manifest_directories(inner / "src"))

        assert entries == [
            ManifestDirectory(path=inner, manifest=inner / "package.json", has_lockfile=False),
            ManifestDirectory(path=outer, manifest=outer / "package.json", has_lockfile=True),
        ]

    def test_lockfiles_follow_config(self, tmp_path, make_package):
        package = make_package(tmp_path / "package", lockfile="pnpm-lock.yaml")

        (default_entry,) = list(iter_manifest_directories(package))
        (custom_entry,) = list(
            iter_manifest_directories(
                package, SearchConfig(lockfiles=("pnpm-lock.yaml",))
            )
        )

        assert default_entry.has_lockfile is False
        assert custom_entry.has_lockfile is True

    def test_is_lazy(self, tmp_path, make_package, monkeypatch):
        outer = make_package(tmp_path / "outer")
        inner = make_package(outer / "inner")
        seen = []
        original = search_module.path_exists

        def _tracking_exists(path):
            seen.append(path)
            return original(path)

        monkeypatch.setattr(search_module, "path_exists", _tracking_exists)

        first = next(iter_manifest_directories(inner))

        assert first.path == inner
        assert outer / "package.json" not in seen


class TestReadManifest:
    def test_parses_object(self, tmp_path):
        manifest = tmp_path / "package.json"
        manifest.write_text(json.dumps({"name": "demo", "workspaces": []}), encoding="utf-8")

        assert read_manifest(manifest) == {"name": "demo", "workspaces": []}

    def test_malformed_json_raises_manifest_error(self, tmp_path):
        manifest = tmp_path / "package.json"
        manifest.write_text("{not json", encoding="utf-8")

        with pytest.raises(ManifestError) as excinfo:
            read_manifest(manifest)

        assert isinstance(excinfo.value, ValueError)
        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)
        assert excinfo.value.path == manifest

    def test_non_utf8_content_raises_manifest_error(self, tmp_path):
        manifest = tmp_path / "package.json"
        manifest.write_bytes(b'{"name": "\xff"}')

        with pytest.raises(ManifestError) as excinfo:
            read_manifest(manifest)

        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_non_object_raises_manifest_error(self, tmp_path):
        manifest = tmp_path / "package.json"
        manifest.write_text('"workspaces"', encoding="utf-8")

        with pytest.raises(ManifestError, match="expected a JSON object"):
            read_manifest(manifest)

    def test_missing_file_propagates_os_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_manifest(tmp_path / "package.json")
