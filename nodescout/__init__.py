"""nodescout project metadata and public API."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.10 fallback
    import tomli as tomllib  # type: ignore

from nodescout.configuration.schema import SearchConfig
from nodescout.errors import ManifestError
from nodescout.paths import traverse_ancestor_directories
from nodescout.search import (
    ManifestDirectory,
    get_project_root_path,
    iter_manifest_directories,
    search_for_module,
    search_for_node_modules,
)

PROJECT_NAME = "nodescout"
PYPROJECT_PATH = Path(__file__).resolve().parent.parent / "pyproject.toml"


def _load_pyproject_metadata() -> Dict[str, Any]:
    if not PYPROJECT_PATH.exists():
        return {}
    with PYPROJECT_PATH.open("rb") as fh:
        data = tomllib.load(fh)
    project_data = data.get("project", {})
    if isinstance(project_data, dict):
        return project_data
    return {}


@lru_cache(maxsize=1)
def _project_metadata() -> Dict[str, Any]:
    try:
        metadata = importlib_metadata.metadata(PROJECT_NAME)
        return {
            "name": metadata.get("Name"),
            "version": metadata.get("Version"),
            "description": metadata.get("Summary"),
        }
    except importlib_metadata.PackageNotFoundError:  # pragma: no cover - dev checkout
        return _load_pyproject_metadata()


_META = _project_metadata()
__version__ = _META.get("version", "0.0.0")
__description__ = _META.get(
    "description",
    "Locate node_modules directories and project roots by walking up the tree.",
)


__all__ = [
    "ManifestDirectory",
    "ManifestError",
    "SearchConfig",
    "__description__",
    "__version__",
    "get_project_root_path",
    "iter_manifest_directories",
    "search_for_module",
    "search_for_node_modules",
    "traverse_ancestor_directories",
]
