"""Command for inspecting the effective configuration."""

from __future__ import annotations

import typer
from rich.markup import escape

from nodescout.configuration import ConfigurationError, locate_config_file
from nodescout.logging import console

from ..common import COMMAND_CONTEXT, load_cli_config
from ..type_defs import CommandMap


def register(app: typer.Typer) -> CommandMap:
    @app.command(context_settings=COMMAND_CONTEXT)
    def config() -> None:
        """Print the config file in use and the effective settings."""
        try:
            config_path = locate_config_file()
        except ConfigurationError as exc:
            console.print(f"[error]{escape(str(exc))}[/]")
            raise typer.Exit(code=1)
        settings = load_cli_config()
        source = str(config_path) if config_path else "built-in defaults"
        console.print(f"[section]Source[/section] {escape(source)}", soft_wrap=True)
        console.print_json(data=settings.to_dict())

    return {"config": config}
