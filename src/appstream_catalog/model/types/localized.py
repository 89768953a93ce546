from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Generic, Self, TypeVar

from frozendict import frozendict
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

DEFAULT_LOCALE = "C"
"""
The locale key holding the untranslated value. This is the same name
AppStream tooling uses for the default locale.
"""


T = TypeVar("T")


class LocalizedValue(Mapping[str, T], ABC, Generic[T]):
    """
    A value with a mandatory default and optional per-locale overrides.

    This is an immutable mapping from locale tag to value. The default
    (untranslated) value is always present, under the DEFAULT_LOCALE key.
    Equality does not depend on the order in which locales were added.
    """

    __slots__ = ("_mapping", "_hash")

    def __init__(self, value: T | Mapping[str, T]) -> None:
        """
        Create a new instance.

        :param value: Either a default value, or a mapping from locale
            tag to value which must include the DEFAULT_LOCALE key.
        """
        self._hash: int | None = None

        if isinstance(value, Mapping):
            if DEFAULT_LOCALE not in value:
                raise ValueError(
                    f"A default value (locale '{DEFAULT_LOCALE}') must be provided"
                )
            mapping = {
                self._validate_locale(locale): self._coerce(translation)
                for locale, translation in value.items()
            }
        else:
            mapping = {DEFAULT_LOCALE: self._coerce(value)}

        self._mapping: frozendict[str, T] = frozendict(mapping)

    @staticmethod
    def _validate_locale(locale: str) -> str:
        if not isinstance(locale, str):
            raise ValueError(
                f"Locale tag must be a string, got {type(locale).__name__}"
            )
        if len(locale) == 0:
            raise ValueError("Locale tag cannot be empty")
        return locale

    @classmethod
    @abstractmethod
    def _coerce(cls, value: Any) -> T:
        """Validate and normalize a single translation."""
        ...

    @classmethod
    def with_default(cls, value: T) -> Self:
        """Create an instance with only a default value."""
        return cls(value)

    def and_locale(self, locale: str, value: T) -> Self:
        """
        Return a new instance with the translation for `locale` added,
        replacing any existing translation for that locale.
        """
        return self.__class__({**self._mapping, locale: value})

    @property
    def default(self) -> T:
        return self._mapping[DEFAULT_LOCALE]

    @property
    def locales(self) -> Mapping[str, T]:
        """The translations, without the default value."""
        return frozendict(
            (locale, translation)
            for locale, translation in self._mapping.items()
            if locale != DEFAULT_LOCALE
        )

    def for_locale(self, locale: str | None) -> T:
        """
        Return the translation for `locale`, falling back to the default
        when there is no translation for it.
        """
        if locale is None:
            return self.default
        return self._mapping.get(locale, self.default)

    @classmethod
    def _serialize(cls, instance: LocalizedValue[T]) -> dict[str, Any]:
        return dict(instance._mapping)

    @classmethod
    @abstractmethod
    def _input_schema(cls) -> core_schema.CoreSchema:
        """The schema of the plain python data this type can be built from."""
        ...

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: type[Any], handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Validate the plain data form of the type, then pass it into the
        class constructor, which does the remaining validation.
        """
        from_plain_schema = core_schema.chain_schema(
            [
                cls._input_schema(),
                core_schema.no_info_plain_validator_function(cls),
            ]
        )

        return core_schema.json_or_python_schema(
            json_schema=from_plain_schema,
            python_schema=core_schema.union_schema(
                [
                    # check if it's an instance first before doing any further work
                    core_schema.is_instance_schema(cls),
                    from_plain_schema,
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, when_used="json"
            ),
        )

    def __getitem__(self, locale: str) -> T:
        return self._mapping[locale]

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {json.dumps(dict(self._mapping))}>"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, LocalizedValue):
            return (
                self.__class__ is other.__class__ and self._mapping == other._mapping
            )
        if isinstance(other, Mapping):
            try:
                return self == self.__class__(other)
            except ValueError:
                return False
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(self._mapping)
        return self._hash


class LocalizedText(LocalizedValue[str]):
    """
    A translatable string.

    >>> name = LocalizedText.with_default("Firefox").and_locale("en_GB", "Firefoux")
    >>> name.for_locale("en_GB")
    'Firefoux'
    >>> name.for_locale("de")
    'Firefox'
    """

    __slots__ = ()

    @classmethod
    def _coerce(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError(f"Translation must be a string, got {type(value).__name__}")
        return value

    @classmethod
    def _input_schema(cls) -> core_schema.CoreSchema:
        return core_schema.union_schema(
            [
                core_schema.str_schema(),
                core_schema.dict_schema(
                    core_schema.str_schema(),
                    core_schema.str_schema(),
                ),
            ]
        )

    def __str__(self) -> str:
        return self.default


class LocalizedList(LocalizedValue[tuple[str, ...]]):
    """
    A translatable list of strings, for example the keywords of a component.
    Each translation is a complete list, it does not extend the default one.
    """

    __slots__ = ()

    def __init__(
        self, value: Sequence[str] | Mapping[str, Sequence[str]]
    ) -> None:
        super().__init__(value)  # type: ignore[arg-type]

    @classmethod
    def _coerce(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str) or not isinstance(value, Sequence):
            raise ValueError(
                f"Translation must be a list of strings, got {type(value).__name__}"
            )
        items = tuple(value)
        for item in items:
            if not isinstance(item, str):
                raise ValueError(
                    f"Translation must be a list of strings, got an item of type {type(item).__name__}"
                )
        return items

    @classmethod
    def with_default(cls, value: Sequence[str]) -> Self:  # type: ignore[override]
        return cls(value)

    def and_locale(self, locale: str, value: Sequence[str]) -> Self:  # type: ignore[override]
        return self.__class__({**self._mapping, locale: value})

    @classmethod
    def _input_schema(cls) -> core_schema.CoreSchema:
        str_list_schema = core_schema.list_schema(core_schema.str_schema())
        return core_schema.union_schema(
            [
                str_list_schema,
                core_schema.dict_schema(core_schema.str_schema(), str_list_schema),
            ]
        )
