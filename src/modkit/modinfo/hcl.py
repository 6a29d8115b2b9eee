"""HCL parsing helpers shared by the Terraform and Packer readers."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any, TypeAlias

import hcl2
from result import Err, Ok, Result

from modkit.common import create_logger

from .models import ModuleDirectoryError, ModuleInfoError, ModuleParseError, OutputInfo, VarInfo

logger = create_logger("modinfo.hcl")

HclBody: TypeAlias = dict[str, Any]


def find_module_files(path: Path, pattern: str, *, kind: str) -> Result[list[Path], ModuleInfoError]:
    """List files matching ``pattern`` directly inside ``path``, sorted by name."""
    if not path.is_dir():
        return Err(ModuleDirectoryError(path=path, message=f"Module directory not found: {path}"))

    files = sorted(candidate for candidate in path.glob(pattern) if candidate.is_file())
    if not files:
        return Err(ModuleDirectoryError(path=path, message=f"Source is not a {kind} module: {path}"))

    return Ok(files)


def load_files(files: list[Path]) -> Result[list[HclBody], ModuleInfoError]:
    bodies: list[HclBody] = []
    for file in files:
        match load_file(file):
            case Ok(body):
                bodies.append(body)
            case Err(error):
                return Err(error)
    return Ok(bodies)


def load_file(file: Path) -> Result[HclBody, ModuleInfoError]:
    try:
        with file.open(encoding="utf-8") as fp:
            body = hcl2.load(fp)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read module file", path=str(file), error=str(e))
        return Err(ModuleParseError(path=file, message=f"Failed to read {file.name}: {e}"))
    except Exception as e:
        logger.error("Failed to parse module file", path=str(file), error=str(e))
        return Err(ModuleParseError(path=file, message=f"Invalid HCL in {file.name}: {e}"))

    logger.trace("Parsed module file", path=str(file))
    return Ok(body)


def parse_variables(bodies: list[HclBody]) -> list[VarInfo]:
    variables = [
        VarInfo(
            name=name,
            type=_as_type(attrs.get("type")),
            description=_as_optional_str(attrs.get("description")),
            default=attrs.get("default"),
            required="default" not in attrs,
        )
        for name, attrs in _iter_blocks(bodies, "variable")
    ]
    return sorted(variables, key=lambda var: var.name)


def parse_outputs(bodies: list[HclBody]) -> list[OutputInfo]:
    outputs = [
        OutputInfo(
            name=name,
            description=_as_optional_str(attrs.get("description")),
            sensitive=_as_bool(attrs.get("sensitive")),
        )
        for name, attrs in _iter_blocks(bodies, "output")
    ]
    return sorted(outputs, key=lambda output: output.name)


def _iter_blocks(bodies: list[HclBody], block_type: str) -> Iterator[tuple[str, dict[str, Any]]]:
    for body in bodies:
        for block in body.get(block_type, []):
            for label, attrs in block.items():
                yield _unwrap(label), attrs if isinstance(attrs, dict) else {}


def _unwrap(value: str) -> str:
    """Strip the ``${...}`` wrapper and surrounding quotes the parser keeps on type expressions and labels."""
    if value.startswith("${") and value.endswith("}"):
        value = value[2:-1]
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    return value


def _as_type(value: Any) -> str | None:
    return None if value is None else _unwrap(str(value))


def _as_optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _unwrap(value).lower() == "true"
    return False
