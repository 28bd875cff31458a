"""Validated format styles.

Each style bundles the construction arguments of one formatter family.
Building a formatter validates its arguments here, so a malformed width
or filler is rejected before any value is rendered.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class FloatStyle(BaseModel):
    """Fixed-precision number layout."""

    model_config = {"frozen": True}

    min_left_digits: int = Field(default=0, ge=0)
    right_digits: int = Field(default=3, ge=0)


class PadStyle(BaseModel):
    """Minimum width plus a single filler character."""

    model_config = {"frozen": True}

    filler: str = Field(default=" ", min_length=1, max_length=1)
    width: int = Field(default=0, ge=0)
    side: Literal["left", "right"] = "left"


class FrameStyle(BaseModel):
    """Separator, frame and wrapping for container rendering."""

    model_config = {"frozen": True}

    separator: str = ", "
    prefix: str = "["
    suffix: str = "]"
    every_n: int = Field(default=0, ge=0)
