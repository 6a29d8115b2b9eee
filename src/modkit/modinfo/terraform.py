"""Terraform module metadata reader."""

from __future__ import annotations

from pathlib import Path

from result import Result

from modkit.common import create_logger

from .hcl import find_module_files, load_files, parse_outputs, parse_variables
from .models import ModuleInfo, ModuleInfoError

logger = create_logger("modinfo.terraform")


class TerraformReader:
    """Reads variables and outputs from the ``*.tf`` files of a Terraform module."""

    kind = "terraform"
    pattern = "*.tf"

    def get_info(self, path: Path) -> Result[ModuleInfo, ModuleInfoError]:
        logger.debug("Reading Terraform module", path=str(path))

        return (
            find_module_files(path, self.pattern, kind=self.kind)
            .and_then(load_files)
            .map(lambda bodies: ModuleInfo(inputs=parse_variables(bodies), outputs=parse_outputs(bodies)))
            .inspect(
                lambda info: logger.debug(
                    "Terraform module read", path=str(path), inputs=len(info.inputs), outputs=len(info.outputs)
                )
            )
        )
