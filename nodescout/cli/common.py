"""Shared option builders and error reporting for CLI commands."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.markup import escape

from nodescout import __version__
from nodescout.configuration import (
    ConfigurationError,
    NodescoutConfig,
    clear_config_cache,
    get_config,
)
from nodescout.errors import ManifestError
from nodescout.logging import console, debug_log
from nodescout.paths import normalize_path
from nodescout.search import get_project_root_path

HELP_OPTION_NAMES = ["-h", "--help"]
COMMAND_CONTEXT = {"help_option_names": HELP_OPTION_NAMES}

HELP_EXAMPLES = [
    ("nodescout module react", "List every installed copy of react above the cwd."),
    ("nodescout modules --detect-root", "List node_modules up to the project root."),
    ("nodescout root -C packages/app", "Show the project root for a nested package."),
    ("nodescout config", "Print the effective settings."),
]


def cwd_option():
    return typer.Option(
        Path("."),
        "--cwd",
        "-C",
        help="Directory to start from (default: current directory).",
        file_okay=False,
    )


def root_option():
    return typer.Option(
        None,
        "--root",
        "-r",
        help="Last directory to inspect while walking up.",
        file_okay=False,
    )


def detect_root_option():
    return typer.Option(
        False,
        "--detect-root",
        "-d",
        help="Bound the walk by the detected project root.",
    )


def limit_option():
    return typer.Option(
        None, "--limit", "-n", min=1, help="Stop after this many matches."
    )


def plain_option():
    return typer.Option(
        False, "--plain", "-p", help="Print one path per line without styling."
    )


def debug_option():
    return typer.Option(False, "--debug", help="Show traversal details.")


def load_cli_config() -> NodescoutConfig:
    """Return the effective configuration, exiting on invalid config files."""
    try:
        return get_config()
    except ConfigurationError as exc:
        console.print(f"[error]{escape(str(exc))}[/]")
        raise typer.Exit(code=1)


def refresh_cli_context() -> None:
    """Drop cached configuration so the next command re-reads it."""
    clear_config_cache()


@contextmanager
def report_failures() -> Iterator[None]:
    """Turn lookup failures into an error message and exit code 1."""
    try:
        yield
    except (ManifestError, OSError) as exc:
        console.print(f"[error]{escape(str(exc))}[/]")
        raise typer.Exit(code=1)


def resolve_boundary(
    cwd: Path,
    root: Optional[Path],
    detect_root: bool,
    config: NodescoutConfig,
    *,
    debug: bool = False,
) -> Optional[Path]:
    """Pick the walk boundary from ``--root`` or ``--detect-root``."""
    if root is not None and detect_root:
        raise typer.BadParameter("--root and --detect-root cannot be combined.")
    if detect_root:
        boundary = get_project_root_path(cwd, config.search)
        debug_log(debug, f"detected project root {boundary}")
        return boundary
    if root is not None:
        return normalize_path(root)
    return None


def print_version() -> None:
    console.print(f"[bold]nodescout[/bold] [accent]v{__version__}[/]")
