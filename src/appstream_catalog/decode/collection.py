from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

from appstream_catalog.configuration import DecodeConfiguration
from appstream_catalog.decode.base import CatalogParser
from appstream_catalog.decode.component import ComponentParser
from appstream_catalog.model.collection import Collection
from appstream_catalog.util.log import elapsed_time_logging, pluralize

if TYPE_CHECKING:
    from lxml.etree import _Element, _ElementTree


class CollectionParser(CatalogParser):
    """
    Parser for collection metadata, a `<components>` document.

    https://www.freedesktop.org/software/appstream/docs/chap-CollectionData.html
    """

    def __init__(self, configuration: DecodeConfiguration | None = None) -> None:
        super().__init__(configuration)
        self.components = ComponentParser(self.configuration)

    def collection_data(self, tag: _Element) -> dict[str, Any]:
        data: dict[str, Any] = {}
        self._set(data, "version", self._attr(tag, "version"))
        self._set(data, "origin", self._attr(tag, "origin"))
        self._set(data, "architecture", self._attr(tag, "architecture"))
        data["components"] = [
            self.components.component_data(component)
            for component in self._xpath(tag, "component")
        ]
        return data

    def parse(self, xml: str | bytes | _ElementTree) -> Collection:
        """
        Decode a collection document.

        :raises DecodeError: If the document can't be decoded. No partial
            collection is ever returned.
        """
        log_method = functools.partial(
            self.log.log, self.configuration.timing_log_level.levelno
        )
        with elapsed_time_logging(
            log_method=log_method, message_prefix="Decoding collection"
        ):
            root = self._load(xml, "components")
            collection = self._validate(Collection, self.collection_data(root))

        self.log.info(
            f"Decoded collection {collection.origin or '(no origin)'} "
            f"version {collection.version} with "
            f"{pluralize(len(collection.components), 'component')}."
        )
        return collection
