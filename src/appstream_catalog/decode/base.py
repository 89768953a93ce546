from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from appstream_catalog.configuration import DecodeConfiguration
from appstream_catalog.core.exceptions import (
    DecodeError,
    MalformedDocument,
    MissingRequiredField,
    ValidationError,
)
from appstream_catalog.decode.localized import (
    merge_localized_list,
    merge_localized_text,
)
from appstream_catalog.model.types.localized import LocalizedList, LocalizedText
from appstream_catalog.util.log import LoggerMixin
from appstream_catalog.util.xmlparser import XMLParser

if TYPE_CHECKING:
    from lxml.etree import _Element, _ElementTree

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_location(location: Sequence[int | str]) -> str:
    """
    Turn a pydantic error location into a readable path, for example
    ('components', 0, 'name') becomes 'components[0].name'.
    """
    path = ""
    for part in location:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = part
    return path


def translate_validation_error(error: PydanticValidationError) -> DecodeError:
    """
    Translate a pydantic ValidationError into one of our DecodeErrors.

    Only the first error is reported, the decode is abandoned at that point
    anyway.
    """
    details = error.errors()[0]
    path = format_location(details["loc"])
    if details["type"] == "missing":
        return MissingRequiredField("Required field is missing", path=path)
    return ValidationError(details["msg"], path=path)


class CatalogParser(XMLParser, LoggerMixin):
    """
    Shared machinery for the parsers.

    The parsers turn elements into plain data (dicts and lists) while
    applying the rules needed for the quirks of real documents. The data
    for a whole document is then validated into models in a single step,
    so validation errors carry the location of the offending field.
    """

    def __init__(self, configuration: DecodeConfiguration | None = None) -> None:
        self.configuration = configuration or DecodeConfiguration()

    def _load(self, xml: str | bytes | _ElementTree, root_tag: str) -> _Element:
        tree = self._load_xml(
            xml,
            remove_null_bytes=self.configuration.remove_null_bytes,
            huge_tree=self.configuration.huge_tree,
        )
        root = tree.getroot()
        if root.tag != root_tag:
            raise MalformedDocument(
                f"Expected a <{root_tag}> document, got <{root.tag}>"
            )
        return root

    @staticmethod
    def _validate(
        model: type[ModelT], data: Mapping[str, Any]
    ) -> ModelT:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise translate_validation_error(e) from e

    @staticmethod
    def _set(data: dict[str, Any], key: str, value: Any) -> None:
        """
        Only set values that are present, so absent values get the
        model's default, or are reported as missing if they are required.
        """
        if value is not None:
            data[key] = value

    def _int_attributes(
        self, tag: _Element, data: dict[str, Any], *names: str
    ) -> None:
        # Values are left as strings, the models check they are integers.
        for name in names:
            self._set(data, name, self._attr(tag, name))

    def _localized_text(
        self, tag: _Element, name: str, *, markup: bool = False
    ) -> LocalizedText | None:
        """
        Merge the `name` subtags of `tag` into a LocalizedText.

        :param markup: The elements contain markup (like `<description>`),
            so keep their content as serialized XML rather than their text.
        """
        entries = []
        for subtag in self._xpath(tag, name):
            value = self._inner_xml(subtag) if markup else self._text(subtag)
            if value is not None:
                entries.append((self._locale(subtag), value))

        localized = merge_localized_text(entries)
        if localized is None and entries:
            self._warn_no_default(name, entries)
        return localized

    def _localized_list(
        self, tag: _Element, name: str, item_name: str
    ) -> LocalizedList | None:
        """
        Merge the `name` subtags of `tag`, each holding a list of
        `item_name` elements, into a LocalizedList. Both the list element
        and the items can carry a locale.
        """
        blocks = []
        for block in self._xpath(tag, name):
            block_locale = self._locale(block)
            items = []
            for item in self._xpath(block, item_name):
                text = self._text(item)
                if text is not None:
                    items.append((self._locale(item) or block_locale, text))
            blocks.append(items)

        localized = merge_localized_list(blocks)
        if localized is None and any(blocks):
            self._warn_no_default(name, [entry for block in blocks for entry in block])
        return localized

    def _warn_no_default(
        self, name: str, entries: Sequence[tuple[str | None, str]]
    ) -> None:
        locales = ", ".join(sorted({locale for locale, _ in entries if locale}))
        self.log.warning(
            f"Ignoring <{name}>: only translated values ({locales}) were given, "
            "but no untranslated default."
        )
