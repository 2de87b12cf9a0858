"""Type definitions for the CLI module."""

from __future__ import annotations

from typing import Dict

from typer.models import CommandFunctionType

# Maps command names to their handler functions for registration
CommandMap = Dict[str, CommandFunctionType]
