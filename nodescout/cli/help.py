"""Root help rendering for the CLI.

Prints the description, a command table and usage examples with Rich
instead of Click's plain formatter.
"""

from __future__ import annotations

from typing import Iterable

import click
import typer
from rich.table import Table

from nodescout import __description__
from nodescout.logging import PALETTE, console

from .common import HELP_EXAMPLES


def show_root_help(ctx: typer.Context) -> None:
    console.print(__description__)
    console.print()
    console.print("[section]Usage[/section]")
    console.print("  nodescout [OPTIONS] COMMAND [ARGS]...\n")
    console.print("[section]Commands[/section]")
    console.print(build_help_table(command_help_rows(ctx)))
    console.print()
    console.print("[section]Options[/section]")
    console.print(build_help_table(option_help_rows(ctx)))
    console.print()
    console.print("[section]Examples[/section]")
    console.print(build_examples_table())


def build_help_table(rows: Iterable[tuple[str, ...]]) -> Table:
    table = Table.grid(padding=(0, 3))
    table.add_column(style=f"bold {PALETTE['green']}", no_wrap=True)
    table.add_column(style=f"bold {PALETTE['purple']}", no_wrap=True)
    table.add_column(style=PALETTE["fg"])
    for row in rows:
        table.add_row(*row)
    return table


def build_examples_table() -> Table:
    table = Table.grid(padding=(0, 3))
    table.add_column(style="cyan", no_wrap=True)
    table.add_column()
    for command, description in HELP_EXAMPLES:
        table.add_row(f"[bold]{command}[/]", description)
    return table


def command_help_rows(ctx: typer.Context) -> list[tuple[str, str, str]]:
    command_group = ctx.command
    if not isinstance(command_group, click.Group):
        return []
    rows = []
    for name in command_group.list_commands(ctx):
        command = command_group.get_command(ctx, name)
        if not command or command.hidden:
            continue
        rows.append((name, command_param_hint(command), _command_description(command)))
    return rows


def option_help_rows(ctx: typer.Context) -> list[tuple[str, str, str]]:
    rows = []
    if ctx.command is None:
        return rows
    for param in ctx.command.params:
        if not isinstance(param, click.Option):
            continue
        name = primary_long_option(param)
        short_text = format_short_options(param)
        description = (param.help or "").strip()
        rows.append((name, short_text, description))
    return rows


def _command_description(command: click.Command) -> str:
    text = (command.help or command.short_help or "").strip()
    if not text:
        callback = getattr(command, "callback", None)
        text = (getattr(callback, "__doc__", None) or "").strip()
    return text.splitlines()[0].strip() if text else ""


def command_param_hint(command: click.Command) -> str:
    arguments = [param for param in command.params if isinstance(param, click.Argument)]
    if arguments:
        return format_argument_hint(arguments[0])
    return ""


def format_argument_hint(param: click.Argument) -> str:
    name = param.metavar or param.human_readable_name or param.name or ""
    if not name:
        return ""
    normalized = name.replace("_", " ").strip()
    normalized = normalized.replace(" ", "-").upper()
    return f"<{normalized}>"


def primary_long_option(param: click.Option) -> str:
    for opt in param.opts:
        if opt.startswith("--"):
            return opt
    return param.opts[0] if param.opts else ""


def format_short_options(param: click.Option) -> str:
    seen: list[str] = []
    for opt in list(param.opts) + list(param.secondary_opts):
        if not opt.startswith("-") or opt.startswith("--"):
            continue
        if opt not in seen:
            seen.append(opt)
    return ", ".join(seen)
