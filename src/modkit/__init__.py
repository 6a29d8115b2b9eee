"""modkit - stage local infrastructure modules and inspect their interfaces.

By default, modkit's internal logging is disabled when used as a library.
Library users can enable logging by calling modkit.enable_logging().
"""

from modkit.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
