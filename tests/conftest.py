from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import pytest
from typer.testing import CliRunner

from nodescout.cli.common import refresh_cli_context


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Force configuration lookup into a temporary directory per test."""

    home = tmp_path / "nodescout-home"
    home.mkdir()
    monkeypatch.setenv("NODESCOUT_HOME", str(home))
    monkeypatch.delenv("NODESCOUT_CONFIG", raising=False)

    refresh_cli_context()
    yield home
    refresh_cli_context()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def make_package():
    """Create a package directory with an optional manifest body and lockfile."""

    def _make(
        directory: Path,
        manifest: Optional[Dict[str, Any]] = None,
        *,
        lockfile: Optional[str] = "package-lock.json",
        raw_manifest: Optional[str] = None,
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        if raw_manifest is not None:
            body = raw_manifest
        else:
            body = json.dumps(manifest if manifest is not None else {"name": directory.name})
        (directory / "package.json").write_text(body, encoding="utf-8")
        if lockfile:
            (directory / lockfile).write_text("{}", encoding="utf-8")
        return directory

    return _make
