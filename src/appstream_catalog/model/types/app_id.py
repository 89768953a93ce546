from __future__ import annotations

import re
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from appstream_catalog.core.exceptions import ValidationError


class AppId(str):
    """
    A component identifier, in reverse-DNS form (`org.mozilla.Firefox`).

    The identifier must have at least two segments separated by dots. Each
    segment is made of ASCII letters, digits, underscores and hyphens.
    The value is checked, never normalized: surrounding whitespace and
    case are kept as given, and make the identifier invalid or distinct.
    """

    __slots__ = ()

    SEGMENT = r"[A-Za-z0-9_\-]+"
    PATTERN = re.compile(rf"{SEGMENT}(?:\.{SEGMENT})+")

    def __new__(cls, value: str | AppId) -> AppId:
        if isinstance(value, AppId):
            return value

        if not isinstance(value, str):
            raise ValidationError(
                f"Component identifier must be a string, got {type(value).__name__}"
            )

        if cls.PATTERN.fullmatch(value) is None:
            raise ValidationError(
                f"Invalid component identifier '{value}'. Expected dot-separated "
                "segments of letters, digits, '_' or '-', like 'org.example.App'."
            )

        return super().__new__(cls, value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _: type[Any], __: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.split("."))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {str(self)}>"
