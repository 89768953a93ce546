from __future__ import annotations

from collections.abc import Iterator
from io import BytesIO
from typing import TYPE_CHECKING

from lxml import etree

from appstream_catalog.core.exceptions import MalformedDocument

if TYPE_CHECKING:
    from lxml.etree import _Element, _ElementTree

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"


class XMLParser:

    """Helper functions to process XML data."""

    NAMESPACES: dict[str, str] = {}

    @classmethod
    def _xpath(
        cls, tag: _Element, expression: str, namespaces: dict[str, str] | None = None
    ) -> list[_Element]:
        """Wrapper to do a namespaced XPath expression."""
        if not namespaces:
            namespaces = cls.NAMESPACES
        return tag.xpath(expression, namespaces=namespaces)  # type: ignore[no-any-return]

    @classmethod
    def _xpath1(
        cls, tag: _Element, expression: str, namespaces: dict[str, str] | None = None
    ) -> _Element | None:
        """Wrapper to do a namespaced XPath expression."""
        values = cls._xpath(tag, expression, namespaces=namespaces)
        if not values:
            return None
        return values[0]

    @staticmethod
    def _text(tag: _Element) -> str | None:
        """
        Return the trimmed text of an element. Whitespace-only
        or missing text is treated as absent.
        """
        if tag.text is None:
            return None
        text = tag.text.strip()
        return text or None

    @staticmethod
    def _attr(tag: _Element, name: str) -> str | None:
        value = tag.get(name)
        if value is None:
            return None
        value = value.strip()
        return value or None

    @classmethod
    def _locale(cls, tag: _Element) -> str | None:
        """
        The locale an element is written in. `xml:lang` is what the format
        specifies, but some producers write a bare `lang` attribute.
        """
        return cls._attr(tag, XML_LANG) or cls._attr(tag, "lang")

    def text_of_optional_subtag(
        self, tag: _Element, name: str, namespaces: dict[str, str] | None = None
    ) -> str | None:
        subtag = self._xpath1(tag, name, namespaces=namespaces)
        if subtag is None:
            return None
        return self._text(subtag)

    def texts_of_subtags(
        self, tag: _Element, name: str, namespaces: dict[str, str] | None = None
    ) -> list[str]:
        """The non-empty texts of all matching subtags, in document order."""
        texts = []
        for subtag in self._xpath(tag, name, namespaces=namespaces):
            text = self._text(subtag)
            if text is not None:
                texts.append(text)
        return texts

    @staticmethod
    def _children(tag: _Element) -> Iterator[_Element]:
        """Child elements, skipping comments and processing instructions."""
        for child in tag:
            if isinstance(child.tag, str):
                yield child

    @staticmethod
    def _inner_xml(tag: _Element) -> str | None:
        """
        Serialize the content of an element (text and children, but not the
        element itself). Used for fields that carry markup, like descriptions.
        """
        parts = [tag.text or ""]
        for child in tag:
            parts.append(etree.tostring(child, encoding="unicode", with_tail=True))
        content = "".join(parts).strip()
        return content or None

    @staticmethod
    def _load_xml(
        xml: str | bytes | _ElementTree,
        *,
        remove_null_bytes: bool = True,
        huge_tree: bool = False,
    ) -> _ElementTree:
        """
        Load an XML document from string or bytes and handle the case where
        the document has already been parsed.

        Syntax errors are not recovered from, they are raised as
        MalformedDocument.
        """
        if isinstance(xml, str):
            xml = xml.encode("utf8")

        if isinstance(xml, bytes):
            if remove_null_bytes:
                # XMLParser will stop processing a document if it encounters
                # the null character, so we remove it before parsing.
                xml = xml.replace(b"\x00", b"")
            parser = etree.XMLParser(
                recover=False,
                huge_tree=huge_tree,
                resolve_entities=False,
                no_network=True,
            )
            try:
                return etree.parse(BytesIO(xml), parser)
            except etree.XMLSyntaxError as e:
                raise MalformedDocument(f"Unable to parse XML: {e}") from e

        else:
            return xml
