"""Source string classification."""

from __future__ import annotations

from .models import SourceType

_LOCAL_PREFIXES = ("./", "../", "/")
_EMBEDDED_PREFIXES = ("modules/", "community/modules/")
_GIT_PREFIXES = ("github.com", "git::", "git@")


def is_local_path(source: str) -> bool:
    return source.startswith(_LOCAL_PREFIXES)


def is_embedded_path(source: str) -> bool:
    return source.startswith(_EMBEDDED_PREFIXES)


def is_git_path(source: str) -> bool:
    return source.startswith(_GIT_PREFIXES)


def classify_source(source: str) -> SourceType:
    """Classify a module source string.

    Local paths win over embedded ones, so ``./modules/x`` is local.
    """
    if is_local_path(source):
        return SourceType.LOCAL
    if is_embedded_path(source):
        return SourceType.EMBEDDED
    if is_git_path(source):
        return SourceType.GIT
    return SourceType.UNKNOWN
