from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from appstream_catalog.model.base import BaseCatalogModel
from appstream_catalog.model.component import Component
from appstream_catalog.model.types.app_id import AppId

if TYPE_CHECKING:
    from lxml.etree import _ElementTree

    from appstream_catalog.configuration import DecodeConfiguration


class Collection(BaseCatalogModel):
    """
    A catalog of components, the root `<components>` element of a
    collection metadata file.

    https://www.freedesktop.org/software/appstream/docs/chap-CollectionData.html

    Identifiers are not required to be unique within a collection, the same
    id can be used by several components (for example variants of a package).
    """

    version: str
    origin: str | None = None
    # Stored as written. The values it may take are not checked.
    architecture: str | None = None
    components: tuple[Component, ...] = ()

    def find_by_id(self, id: AppId | str) -> Sequence[Component]:
        """
        Return every component with the given identifier, in document order.
        """
        return tuple(
            component for component in self.components if component.id == id
        )

    @classmethod
    def from_xml(
        cls,
        xml: str | bytes | _ElementTree,
        configuration: DecodeConfiguration | None = None,
    ) -> Collection:
        """
        Decode a collection document.

        :raises DecodeError: If the document can't be decoded.
        """
        from appstream_catalog.decode.collection import CollectionParser

        return CollectionParser(configuration).parse(xml)
