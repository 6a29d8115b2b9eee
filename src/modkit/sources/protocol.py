"""Source reader protocol."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from result import Result

from modkit.modinfo import ModuleInfo, ModuleInfoError
from modkit.utils.copy import CopyError

from .models import SourceError


class SourceReader(Protocol):
    """Protocol for reading and staging modules from a source."""

    def get_module_info(self, module_path: str, kind: str) -> Result[ModuleInfo, SourceError | ModuleInfoError]:
        """Read metadata of the module at ``module_path`` using the reader for ``kind``."""
        ...

    def get_module(self, module_path: str, destination: Path) -> Result[None, SourceError | CopyError]:
        """Copy the module at ``module_path`` into ``destination``."""
        ...
