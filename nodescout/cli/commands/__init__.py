"""Command modules registered on the nodescout Typer app."""

from __future__ import annotations

from . import config, root, search, version

COMMAND_MODULES = (search, root, config, version)

__all__ = ["COMMAND_MODULES"]
