"""Local filesystem source reader."""

from __future__ import annotations

from pathlib import Path

from result import Err, Result

from modkit.common import create_logger
from modkit.modinfo import ModuleInfo, ModuleInfoError, create_reader
from modkit.utils.copy import CopyError, copy_from_path

from .models import InvalidSourceError, SourceError, SourceNotFoundError
from .paths import is_local_path

logger = create_logger("sources.local")


class LocalSourceReader:
    """Reads modules from a local directory."""

    def get_module_info(self, module_path: str, kind: str) -> Result[ModuleInfo, SourceError | ModuleInfoError]:
        if not is_local_path(module_path):
            return Err(_invalid_source(module_path))

        logger.debug("Reading local module info", path=module_path, kind=kind)
        return create_reader(kind).and_then(lambda reader: reader.get_info(Path(module_path)))

    def get_module(self, module_path: str, destination: Path) -> Result[None, SourceError | CopyError]:
        """Copy the local module into the deployment directory.

        A failed copy leaves ``destination`` as the copy utility left it.
        """
        if not is_local_path(module_path):
            return Err(_invalid_source(module_path))

        source = Path(module_path)
        if not source.exists():
            logger.warning("Local module not found", path=module_path)
            return Err(SourceNotFoundError(source=module_path, message=f"Local module doesn't exist at {module_path}"))

        logger.debug("Staging local module", path=module_path, destination=str(destination))
        return copy_from_path(source, destination).map(lambda _: None)


def _invalid_source(module_path: str) -> InvalidSourceError:
    logger.debug("Rejected non-local source", source=module_path)
    return InvalidSourceError(source=module_path, message=f"Source is not valid: {module_path}")
