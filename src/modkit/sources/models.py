"""Data and error models for module sources."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SourceType(str, Enum):
    """Module source types."""

    LOCAL = "local"
    EMBEDDED = "embedded"
    GIT = "git"
    UNKNOWN = "unknown"


class BaseSourceError(BaseModel):
    """Base source error model."""

    model_config = ConfigDict(extra="forbid")

    message: str
    source: str


class InvalidSourceError(BaseSourceError):
    """Source is not a path this reader can handle."""


class SourceNotFoundError(BaseSourceError):
    """Local source does not exist on disk."""


class UnsupportedSourceError(BaseSourceError):
    """No source reader is available for this type of source."""

    source_type: SourceType


SourceError = InvalidSourceError | SourceNotFoundError | UnsupportedSourceError


__all__ = [
    "BaseSourceError",
    "InvalidSourceError",
    "SourceError",
    "SourceNotFoundError",
    "SourceType",
    "UnsupportedSourceError",
]
