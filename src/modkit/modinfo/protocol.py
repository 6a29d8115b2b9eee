"""Module metadata reader protocol."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol, TypeAlias

from result import Result

from .models import ModuleInfo, ModuleInfoError


class ModuleInfoReader(Protocol):
    """Protocol for extracting metadata from a module directory."""

    def get_info(self, path: Path) -> Result[ModuleInfo, ModuleInfoError]:
        """Read inputs and outputs declared by the module at ``path``."""
        ...


ModuleInfoReaderFactory: TypeAlias = Callable[[], ModuleInfoReader]
