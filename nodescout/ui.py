"""UI utilities for rich console output."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from nodescout.logging import console


def show_paths(title: str, paths: Sequence[Path], *, plain: bool = False) -> None:
    """Display traversal results, deepest first."""
    if plain:
        for path in paths:
            typer.echo(str(path))
        return
    if not paths:
        console.print(f"[muted]No matches for {title}.[/]")
        return
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="muted")
    table.add_column("Path", style="path", overflow="fold")
    for index, path in enumerate(paths, start=1):
        table.add_row(str(index), str(path))
    console.print(table)


def show_project_root(root: Path, start: Path, *, plain: bool = False) -> None:
    """Display the detected project root for ``start``."""
    if plain:
        typer.echo(str(root))
        return
    if root == start:
        info_panel(f"Project root: {escape(str(root))} (the starting directory)")
    else:
        success_panel(f"Project root: {escape(str(root))}")


def success_panel(message: str) -> None:
    """Display a success message in a green panel."""
    console.print(Panel.fit(f"[ok]{message}[/]", border_style="green"))


def info_panel(message: str) -> None:
    """Display an info message in a cyan panel."""
    console.print(Panel.fit(f"[info]{message}[/]", border_style="cyan"))
