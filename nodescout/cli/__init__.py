"""Typer application for the nodescout command line."""

from __future__ import annotations

import typer

from .commands import COMMAND_MODULES
from .common import print_version
from .help import show_root_help
from .type_defs import CommandMap

app = typer.Typer(
    help="Locate node_modules directories and project roots.",
    context_settings={"help_option_names": []},
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Show CLI version and exit.",
        is_eager=True,
    ),
    help_: bool = typer.Option(
        False,
        "--help",
        "-h",
        help="Show this message and exit.",
        is_eager=True,
    ),
) -> None:
    if version:
        print_version()
        raise typer.Exit()
    if help_:
        show_root_help(ctx)
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        show_root_help(ctx)


def _register_commands() -> CommandMap:
    commands: CommandMap = {}
    for module in COMMAND_MODULES:
        commands.update(module.register(app))
    return commands


_register_commands()


def main() -> None:
    app()


__all__ = ["app", "main"]
