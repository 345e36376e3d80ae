"""Shared typing aliases used across Alloy.

The state files are shared with builds of the viewer written in other
languages, so integer fields keep the fixed widths those builds use. Scalars
are strict: a TOML value of the wrong type is rejected, never converted.
"""

from typing import Annotated

from pydantic import Field, Strict

U32 = Annotated[int, Strict(), Field(ge=0, le=2**32 - 1)]
I32 = Annotated[int, Strict(), Field(ge=-(2**31), le=2**31 - 1)]
U64 = Annotated[int, Strict(), Field(ge=0, le=2**64 - 1)]
