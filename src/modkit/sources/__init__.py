"""Module source readers."""

from .factory import create_source_reader
from .local import LocalSourceReader
from .models import (
    InvalidSourceError,
    SourceError,
    SourceNotFoundError,
    SourceType,
    UnsupportedSourceError,
)
from .paths import classify_source, is_embedded_path, is_git_path, is_local_path
from .protocol import SourceReader

__all__ = [
    "InvalidSourceError",
    "LocalSourceReader",
    "SourceError",
    "SourceNotFoundError",
    "SourceReader",
    "SourceType",
    "UnsupportedSourceError",
    "classify_source",
    "create_source_reader",
    "is_embedded_path",
    "is_git_path",
    "is_local_path",
]
