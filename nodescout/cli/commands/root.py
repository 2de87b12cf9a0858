"""Project root detection command."""

from __future__ import annotations

from pathlib import Path

import typer

from nodescout import ui
from nodescout.logging import debug_log
from nodescout.paths import normalize_path
from nodescout.search import get_project_root_path, iter_manifest_directories

from ..common import (
    COMMAND_CONTEXT,
    cwd_option,
    debug_option,
    load_cli_config,
    plain_option,
    report_failures,
)
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(context_settings=COMMAND_CONTEXT)
    def root(
        cwd: Path = cwd_option(),
        plain: bool = plain_option(),
        debug: bool = debug_option(),
    ) -> None:
        """Show the project root for a directory."""
        config = load_cli_config()
        debug = debug or config.cli.debug
        with report_failures():
            if debug:
                for entry in iter_manifest_directories(cwd, config.search):
                    lock_state = "lockfile" if entry.has_lockfile else "no lockfile"
                    debug_log(True, f"manifest at {entry.path} ({lock_state})")
            project_root = get_project_root_path(cwd, config.search)
        ui.show_project_root(
            project_root, normalize_path(cwd), plain=plain or config.cli.plain
        )

    return {"root": root}
