"""Registry of module metadata readers keyed by module kind."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from result import Err, Ok, Result

from .models import UnknownModuleKindError
from .packer import PackerReader
from .protocol import ModuleInfoReader, ModuleInfoReaderFactory
from .terraform import TerraformReader

_READERS: Mapping[str, ModuleInfoReaderFactory] = MappingProxyType(
    {
        TerraformReader.kind: TerraformReader,
        PackerReader.kind: PackerReader,
    }
)


def known_kinds() -> list[str]:
    return sorted(_READERS)


def create_reader(kind: str) -> Result[ModuleInfoReader, UnknownModuleKindError]:
    """Create the metadata reader registered for ``kind``."""
    if (factory := _READERS.get(kind)) is None:
        return Err(
            UnknownModuleKindError(
                kind=kind,
                known_kinds=known_kinds(),
                message=f"Invalid request for module info reader of kind '{kind}'",
            )
        )
    return Ok(factory())
