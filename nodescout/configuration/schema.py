"""Pydantic models describing the nodescout configuration file."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _check_file_name(value: str) -> str:
    name = value.strip()
    if not name:
        raise ValueError("file names must not be empty")
    if "/" in name or "\\" in name or name in {".", ".."}:
        raise ValueError(f"{value!r} must be a bare file name")
    return name


class SearchConfig(BaseModel):
    """File names that drive module and project-root lookups."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    manifest_name: str = Field(
        default="package.json",
        description="Manifest file marking a package directory.",
    )
    lockfiles: Tuple[str, ...] = Field(
        default=("package-lock.json", "yarn.lock"),
        min_length=1,
        description="Lock files marking a project root candidate.",
    )
    modules_dir: str = Field(
        default="node_modules",
        description="Directory holding installed modules.",
    )
    workspaces_key: str = Field(
        default="workspaces",
        description="Manifest key declaring a multi-package workspace.",
    )

    @field_validator("manifest_name", "modules_dir")
    @classmethod
    def _validate_file_name(cls, value: str) -> str:
        return _check_file_name(value)

    @field_validator("lockfiles")
    @classmethod
    def _validate_lockfiles(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(_check_file_name(item) for item in value)

    @field_validator("workspaces_key")
    @classmethod
    def _validate_key(cls, value: str) -> str:
        if not value:
            raise ValueError("workspaces_key must not be empty")
        return value


class CLIConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    plain: bool = False
    max_items: Optional[int] = Field(default=None, ge=1)
    debug: bool = False


class NodescoutConfig(BaseModel):
    """Top-level configuration document."""

    model_config = ConfigDict(extra="forbid")

    search: SearchConfig = Field(default_factory=SearchConfig)
    cli: CLIConfig = Field(default_factory=CLIConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NodescoutConfig":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
