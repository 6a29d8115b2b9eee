"""Source reader selection."""

from __future__ import annotations

from result import Err, Ok, Result

from .local import LocalSourceReader
from .models import SourceType, UnsupportedSourceError
from .paths import classify_source
from .protocol import SourceReader


def create_source_reader(source: str) -> Result[SourceReader, UnsupportedSourceError]:
    """Create the source reader able to handle ``source``."""
    match source_type := classify_source(source):
        case SourceType.LOCAL:
            return Ok(LocalSourceReader())
        case _:
            return Err(
                UnsupportedSourceError(
                    source=source,
                    source_type=source_type,
                    message=f"No reader available for {source_type.value} source: {source}",
                )
            )
