"""Loguru setup for modkit.

The CLI writes a rotating log file under the data directory. When modkit is
imported as a library its records are disabled until ``modkit.enable_logging``
is called, which sends them to stderr.

Every record carries a ``scope`` (the component that logged it, e.g.
``sources.local``). Module operations add the fields listed in
``MODULE_FIELDS``; they are rendered first and in that order so staging lines
read the same across components.
"""

import sys
from pathlib import Path
from typing import Any, Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from modkit.constants import APP_NAME
from modkit.utils.paths import get_data_directory

from .models import AppInfo, AppPaths

MODULE_FIELDS = ("kind", "path", "source", "destination")

_HIDDEN_FIELDS = {"scope", "env"}


class LoggingConfig(BaseModel):
    """CLI log file settings, read from ``MODKIT_LOGGING__*``."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: str | None = Field(default=None, description="Defaults to <data dir>/logs/modkit.log")
    rotation: str = "1 MB"
    retention: str = "7 days"
    format: Literal["json", "text"] = "text"


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, paths: AppPaths) -> int:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    log_file = Path(config.log_file).expanduser() if config.log_file else get_default_log_file_path(paths)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    sink_format: dict[str, Any] = {"serialize": True} if config.format == "json" else {"format": format_record}
    handler_id = logger.add(
        log_file,
        level=config.log_level,
        rotation=config.rotation,
        retention=config.retention,
        diagnose=(app_info.environment == "dev"),
        **sink_format,
    )

    logger.debug("CLI logging initialized", path=str(log_file), level=config.log_level, format=config.format)
    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()
    return logger.add(sys.stderr, level=level, format=format_record, colorize=False)


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def format_record(record: "loguru.Record") -> str:
    """Render ``[scope] time | level | location - message | key=value ...``.

    Extra values are referenced through ``{extra[...]}`` placeholders so braces in
    paths or messages are never interpreted by loguru.
    """
    extra = record["extra"]
    scope = extra.get("scope", APP_NAME)
    keys = [key for key in MODULE_FIELDS if key in extra]
    keys += [key for key in extra if key not in _HIDDEN_FIELDS and key not in MODULE_FIELDS]

    fields = ""
    if keys:
        fields = " | " + " ".join(f"{key}={{extra[{key}]}}" for key in keys)

    return (
        f"[{scope}] {{time:YYYY-MM-DD HH:mm:ss}} | {{level: <8}} | {{name}}:{{function}}:{{line}} - {{message}}"
        f"{fields}\n{{exception}}"
    )


def get_default_log_file_path(paths: AppPaths) -> Path:
    return get_data_directory(paths.data_dir_name) / paths.logs_dir_name / paths.log_filename
