"""Packer template metadata reader."""

from __future__ import annotations

from pathlib import Path

from result import Result

from modkit.common import create_logger

from .hcl import find_module_files, load_files, parse_variables
from .models import ModuleInfo, ModuleInfoError

logger = create_logger("modinfo.packer")


class PackerReader:
    """Reads variables from the ``*.pkr.hcl`` files of a Packer template.

    Packer templates expose no outputs, so ``ModuleInfo.outputs`` is always empty.
    """

    kind = "packer"
    pattern = "*.pkr.hcl"

    def get_info(self, path: Path) -> Result[ModuleInfo, ModuleInfoError]:
        logger.debug("Reading Packer module", path=str(path))

        return (
            find_module_files(path, self.pattern, kind=self.kind)
            .and_then(load_files)
            .map(lambda bodies: ModuleInfo(inputs=parse_variables(bodies)))
        )
