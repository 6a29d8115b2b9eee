"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictStr

NonEmptyString = Annotated[StrictStr, Field(min_length=1, frozen=True)]

__all__ = [
    "NonEmptyString",
]
