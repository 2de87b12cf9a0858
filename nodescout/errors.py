"""Exceptions raised while inspecting project directories."""

from __future__ import annotations

from pathlib import Path


class ManifestError(ValueError):
    """Raised when a package manifest cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid manifest {path}: {reason}")
        self.path = path
        self.reason = reason
