"""Locate installed modules and project roots above a working directory."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from nodescout.configuration.schema import SearchConfig
from nodescout.errors import ManifestError
from nodescout.paths import (
    PathGenerator,
    PathLike,
    iter_ancestors,
    normalize_path,
    path_exists,
    traverse_ancestor_directories,
)

DEFAULT_SEARCH_CONFIG = SearchConfig()


@dataclass(frozen=True)
class ManifestDirectory:
    """An ancestor directory that holds a package manifest."""

    path: Path
    manifest: Path
    has_lockfile: bool


def search_for_module(
    cwd: PathLike,
    module_name: str,
    root_path: Optional[PathLike] = None,
    config: Optional[SearchConfig] = None,
    max_items: Optional[int] = None,
) -> List[Path]:
    """Find every installed copy of ``module_name`` while walking up from ``cwd``.

    Scoped names such as ``@scope/pkg`` are supported. With ``root_path`` the
    walk stops after probing that directory; otherwise it keeps going only
    while each ancestor still has a manifest.
    """
    settings = config or DEFAULT_SEARCH_CONFIG

    def _module_path(traversed: Path) -> Path:
        return traversed / settings.modules_dir / module_name

    return _search(_module_path, cwd, root_path, settings, max_items)


def search_for_node_modules(
    cwd: PathLike,
    root_path: Optional[PathLike] = None,
    config: Optional[SearchConfig] = None,
    max_items: Optional[int] = None,
) -> List[Path]:
    """Find every modules directory while walking up from ``cwd``."""
    settings = config or DEFAULT_SEARCH_CONFIG

    def _modules_dir(traversed: Path) -> Path:
        return traversed / settings.modules_dir

    return _search(_modules_dir, cwd, root_path, settings, max_items)


def _search(
    path_generator: PathGenerator,
    cwd: PathLike,
    root_path: Optional[PathLike],
    settings: SearchConfig,
    max_items: Optional[int],
) -> List[Path]:
    return traverse_ancestor_directories(
        cwd,
        path_generator,
        root_path=root_path,
        max_items=max_items,
        stop_at_manifest=True,
        manifest_name=settings.manifest_name,
    )


def iter_manifest_directories(
    cwd: PathLike, config: Optional[SearchConfig] = None
) -> Iterator[ManifestDirectory]:
    """Yield manifest-bearing ancestors of ``cwd``, deepest first."""
    settings = config or DEFAULT_SEARCH_CONFIG
    for directory in iter_ancestors(cwd):
        manifest = directory / settings.manifest_name
        if not path_exists(manifest):
            continue
        has_lockfile = any(
            path_exists(directory / lockfile) for lockfile in settings.lockfiles
        )
        yield ManifestDirectory(
            path=directory, manifest=manifest, has_lockfile=has_lockfile
        )


def read_manifest(path: Path) -> Dict[str, Any]:
    """Parse a JSON manifest, raising ``ManifestError`` on malformed content."""
    raw = path.read_bytes()
    try:
        data = json.loads(raw.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ManifestError(path, str(exc)) from exc
    if not isinstance(data, dict):
        raise ManifestError(path, f"expected a JSON object, got {type(data).__name__}")
    return data


def get_project_root_path(cwd: PathLike, config: Optional[SearchConfig] = None) -> Path:
    """Determine the root directory of the project containing ``cwd``.

    Every manifest directory that also has a lock file replaces the current
    candidate, so the shallowest one wins, unless its manifest declares
    workspaces, in which case it is returned right away. Falls back to
    ``cwd`` when no such directory exists.
    """
    settings = config or DEFAULT_SEARCH_CONFIG
    candidate = normalize_path(cwd)

    for root in iter_manifest_directories(cwd, settings):
        if not root.has_lockfile:
            continue
        candidate = root.path
        if settings.workspaces_key in read_manifest(root.manifest):
            break

    return candidate


__all__ = [
    "ManifestDirectory",
    "get_project_root_path",
    "iter_manifest_directories",
    "read_manifest",
    "search_for_module",
    "search_for_node_modules",
]
