"""Module metadata readers."""

from .factory import create_reader, known_kinds
from .models import (
    ModuleDirectoryError,
    ModuleInfo,
    ModuleInfoError,
    ModuleParseError,
    OutputInfo,
    UnknownModuleKindError,
    VarInfo,
)
from .packer import PackerReader
from .protocol import ModuleInfoReader
from .terraform import TerraformReader

__all__ = [
    "ModuleDirectoryError",
    "ModuleInfo",
    "ModuleInfoError",
    "ModuleInfoReader",
    "ModuleParseError",
    "OutputInfo",
    "PackerReader",
    "TerraformReader",
    "UnknownModuleKindError",
    "VarInfo",
    "create_reader",
    "known_kinds",
]
