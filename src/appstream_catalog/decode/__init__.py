from __future__ import annotations

from typing import TYPE_CHECKING

from appstream_catalog.configuration import DecodeConfiguration
from appstream_catalog.decode.collection import CollectionParser
from appstream_catalog.decode.component import ComponentParser
from appstream_catalog.decode.media import MediaParser
from appstream_catalog.model.collection import Collection
from appstream_catalog.model.component import Component
from appstream_catalog.model.screenshot import Screenshot

if TYPE_CHECKING:
    from lxml.etree import _ElementTree


def parse_collection(
    xml: str | bytes | _ElementTree,
    configuration: DecodeConfiguration | None = None,
) -> Collection:
    """Decode a `<components>` collection document."""
    return CollectionParser(configuration).parse(xml)


def parse_component(
    xml: str | bytes | _ElementTree,
    configuration: DecodeConfiguration | None = None,
) -> Component:
    """Decode a single `<component>` element."""
    return ComponentParser(configuration).parse(xml)


def parse_screenshot(
    xml: str | bytes | _ElementTree,
    configuration: DecodeConfiguration | None = None,
) -> Screenshot:
    """Decode a single `<screenshot>` element."""
    return MediaParser(configuration).parse(xml)


__all__ = [
    "CollectionParser",
    "ComponentParser",
    "MediaParser",
    "parse_collection",
    "parse_component",
    "parse_screenshot",
]
