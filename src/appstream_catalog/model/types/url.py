from __future__ import annotations

from typing import Any

from pydantic import AnyUrl, GetCoreSchemaHandler, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import core_schema

from appstream_catalog.core.exceptions import ValidationError

_any_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


class Url(str):
    """
    An absolute URL.

    Pydantic's `AnyUrl` is used to check the value, but the original string
    is what we keep. `AnyUrl` normalizes the URL (adding a trailing slash to
    bare hosts, for example), and we want to be able to write back exactly
    what we were given.
    """

    __slots__ = ()

    def __new__(cls, value: str | Url) -> Url:
        if isinstance(value, Url):
            return value

        if not isinstance(value, str):
            raise ValidationError(f"URL must be a string, got {type(value).__name__}")

        try:
            _any_url_adapter.validate_python(value)
        except PydanticValidationError as e:
            reason = e.errors()[0]["msg"]
            raise ValidationError(f"Invalid URL '{value}': {reason}") from e

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
    def parsed(self) -> AnyUrl:
        return _any_url_adapter.validate_python(str(self))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {str(self)}>"
