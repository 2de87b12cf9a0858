"""Helpers for normalizing paths and walking up ancestor directories."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Union

PathLike = Union[str, os.PathLike]
PathGenerator = Callable[[Path], Path]

REPO_SENTINELS: Iterable[str] = (".git", "pyproject.toml")
DEFAULT_MANIFEST_NAME = "package.json"


def normalize_path(path: PathLike) -> Path:
    """Return ``path`` as an absolute, normalized path without resolving symlinks."""
    return Path(os.path.abspath(os.fspath(path)))


def path_exists(path: Path) -> bool:
    """Return whether ``path`` exists, following symlinks.

    Only "missing" errors are treated as a negative answer; anything else
    (permission problems, I/O failures) is raised to the caller.
    """
    try:
        path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


def iter_ancestors(start: PathLike) -> Iterator[Path]:
    """Yield ``start`` and its parents, deepest first, stopping below the filesystem root."""
    current = normalize_path(start)
    for candidate in (current, *current.parents):
        if not candidate.name:
            break
        yield candidate


def detect_repo_root(start: Optional[Path] = None) -> Optional[Path]:
    """Walk upward from ``start`` (default: cwd) to find the repo root."""
    current = normalize_path(start or Path.cwd())
    for candidate in [current, *current.parents]:
        if any(path_exists(candidate / marker) for marker in REPO_SENTINELS):
            return candidate
    return None


def _should_continue(
    cursor: Path,
    *,
    root_path: Optional[Path],
    stop_at_manifest: bool,
    manifest_name: str,
    first_step: bool,
) -> bool:
    if root_path is not None:
        return cursor != root_path.parent
    if stop_at_manifest:
        # The starting directory is always probed, manifest or not.
        return first_step or path_exists(cursor / manifest_name)
    return True


def traverse_ancestor_directories(
    cwd: PathLike,
    path_generator: PathGenerator,
    root_path: Optional[PathLike] = None,
    max_items: Optional[int] = None,
    stop_at_manifest: bool = False,
    manifest_name: str = DEFAULT_MANIFEST_NAME,
) -> List[Path]:
    """Collect existing ``path_generator`` targets while walking up from ``cwd``.

    The walk visits ``cwd`` and then each parent directory in turn. At every
    step ``path_generator`` maps the directory to a candidate path, which is
    kept when it exists. Results are ordered deepest first.

    The walk ends at the filesystem root, once ``max_items`` matches have been
    collected, or earlier depending on the bounds:

    * ``root_path``: ``root_path`` itself is the last directory probed.
    * ``stop_at_manifest`` (ignored when ``root_path`` is given): after the
      starting directory, only directories containing ``manifest_name`` are
      probed and the first one without it ends the walk.
    """
    boundary = normalize_path(root_path) if root_path is not None else None
    paths: List[Path] = []
    traversed = normalize_path(cwd)
    first_step = True

    while _should_continue(
        traversed,
        root_path=boundary,
        stop_at_manifest=stop_at_manifest,
        manifest_name=manifest_name,
        first_step=first_step,
    ):
        first_step = False
        generated = path_generator(traversed)
        if path_exists(generated):
            paths.append(generated)

        parent = traversed.parent
        if parent == traversed or (max_items and len(paths) >= max_items):
            break
        traversed = parent

    return paths


__all__ = [
    "PathGenerator",
    "PathLike",
    "detect_repo_root",
    "iter_ancestors",
    "normalize_path",
    "path_exists",
    "traverse_ancestor_directories",
]
