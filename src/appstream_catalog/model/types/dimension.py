from typing import Annotated, Any

from pydantic import BeforeValidator, Field
from pydantic_core import PydanticCustomError

MAX_DIMENSION = 2**32 - 1


def _dimension_before_validator(value: Any) -> Any:
    """Only accept integers, or strings made of ASCII digits."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isascii() and stripped.isdigit():
            return int(stripped)

    raise PydanticCustomError(
        "invalid_dimension",
        "Input should be a non-negative integer, got '{value}'",
        {"value": value},
    )


Dimension = Annotated[
    int,
    BeforeValidator(_dimension_before_validator),
    Field(ge=0, le=MAX_DIMENSION),
]
"""
A Pydantic type for image, video and icon sizes.

Values are unsigned 32 bit integers. ``"0"`` is accepted, ``"800.0"``,
``"1e3"`` and ``"-1"`` are not.
"""
