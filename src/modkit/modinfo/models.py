"""Data and error models for module metadata."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from modkit.utils.types import NonEmptyString


class VarInfo(BaseModel):
    """Input variable declared by a module."""

    model_config = ConfigDict(extra="forbid")

    name: NonEmptyString
    type: str | None = None
    description: str | None = None
    default: Any = None
    required: bool = True


class OutputInfo(BaseModel):
    """Output value declared by a module."""

    model_config = ConfigDict(extra="forbid")

    name: NonEmptyString
    description: str | None = None
    sensitive: bool = False


class ModuleInfo(BaseModel):
    """Inputs and outputs of a module, sorted by name."""

    model_config = ConfigDict(extra="forbid")

    inputs: list[VarInfo] = Field(default_factory=list)
    outputs: list[OutputInfo] = Field(default_factory=list)


class BaseModuleInfoError(BaseModel):
    """Base module metadata error model."""

    model_config = ConfigDict(extra="forbid")

    message: str


class UnknownModuleKindError(BaseModuleInfoError):
    """No metadata reader is registered for the requested kind."""

    kind: str
    known_kinds: list[str]


class ModuleDirectoryError(BaseModuleInfoError):
    """Path is not a directory holding module files of the requested kind."""

    path: Path


class ModuleParseError(BaseModuleInfoError):
    """A module file could not be read or parsed."""

    path: Path


ModuleInfoError = UnknownModuleKindError | ModuleDirectoryError | ModuleParseError


__all__ = [
    "BaseModuleInfoError",
    "ModuleDirectoryError",
    "ModuleInfo",
    "ModuleInfoError",
    "ModuleParseError",
    "OutputInfo",
    "UnknownModuleKindError",
    "VarInfo",
]
