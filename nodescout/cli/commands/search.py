"""Commands that list installed modules above a directory."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from nodescout import ui
from nodescout.logging import debug_log
from nodescout.search import search_for_module, search_for_node_modules

from ..common import (
    COMMAND_CONTEXT,
    cwd_option,
    debug_option,
    detect_root_option,
    limit_option,
    load_cli_config,
    plain_option,
    report_failures,
    resolve_boundary,
    root_option,
)
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(context_settings=COMMAND_CONTEXT)
    def module(
        name: str = typer.Argument(
            ..., help="Module name, e.g. lodash or @scope/pkg.", metavar="name"
        ),
        cwd: Path = cwd_option(),
        root: Optional[Path] = root_option(),
        detect_root: bool = detect_root_option(),
        limit: Optional[int] = limit_option(),
        plain: bool = plain_option(),
        debug: bool = debug_option(),
    ) -> None:
        """Find installed copies of a module in ancestor directories."""
        config = load_cli_config()
        debug = debug or config.cli.debug
        with report_failures():
            boundary = resolve_boundary(cwd, root, detect_root, config, debug=debug)
            debug_log(debug, f"searching for {name} from {cwd} (boundary: {boundary})")
            paths = search_for_module(
                cwd,
                name,
                root_path=boundary,
                config=config.search,
                max_items=limit or config.cli.max_items,
            )
        ui.show_paths(
            f"{config.search.modules_dir}/{name}",
            paths,
            plain=plain or config.cli.plain,
        )

    @app.command(context_settings=COMMAND_CONTEXT)
    def modules(
        cwd: Path = cwd_option(),
        root: Optional[Path] = root_option(),
        detect_root: bool = detect_root_option(),
        limit: Optional[int] = limit_option(),
        plain: bool = plain_option(),
        debug: bool = debug_option(),
    ) -> None:
        """Find modules directories in ancestor directories."""
        config = load_cli_config()
        debug = debug or config.cli.debug
        with report_failures():
            boundary = resolve_boundary(cwd, root, detect_root, config, debug=debug)
            debug_log(debug, f"searching from {cwd} (boundary: {boundary})")
            paths = search_for_node_modules(
                cwd,
                root_path=boundary,
                config=config.search,
                max_items=limit or config.cli.max_items,
            )
        ui.show_paths(config.search.modules_dir, paths, plain=plain or config.cli.plain)

    return {"module": module, "modules": modules}
