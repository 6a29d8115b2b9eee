"""Directory copy utility used to stage modules."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from pydantic import BaseModel, ConfigDict
from result import Err, Ok, Result

from modkit.common import create_logger

logger = create_logger("utils.copy")


class CopyError(BaseModel):
    """Failed to copy a directory tree."""

    model_config = ConfigDict(extra="forbid")

    message: str
    source: str
    destination: str


def copy_from_path(src: Path, dst: Path) -> Result[Path, CopyError]:
    """Recursively copy the contents of ``src`` into ``dst``.

    ``dst`` is created when missing. Files and symlinks already present in
    ``dst`` are replaced; anything else in ``dst`` is left alone. Symlinks are
    copied as symlinks.
    """
    logger.debug("Copying directory", source=str(src), destination=str(dst))

    try:
        dst.mkdir(parents=True, exist_ok=True)
        _remove_replaced_links(src, dst)
        shutil.copytree(src, dst, symlinks=True, dirs_exist_ok=True)
    except OSError as e:
        logger.error("Directory copy failed", source=str(src), destination=str(dst), error=str(e))
        return Err(
            CopyError(
                source=str(src),
                destination=str(dst),
                message=f"Failed to copy {src} to {dst}: {e}",
            )
        )

    return Ok(dst)


def _remove_replaced_links(src: Path, dst: Path) -> None:
    """Unlink ``dst`` entries that copytree would otherwise fail on or write through.

    copytree creates source symlinks with ``os.symlink``, which refuses an existing
    name, and copies regular files through any symlink already at the target.
    """
    for root, dirs, files in os.walk(src):
        relative = Path(root).relative_to(src)
        for name in [*dirs, *files]:
            src_entry = Path(root) / name
            dst_entry = dst / relative / name
            if dst_entry.is_symlink() or (src_entry.is_symlink() and dst_entry.is_file()):
                dst_entry.unlink()
