from __future__ import annotations

from typing import TYPE_CHECKING, Any

from appstream_catalog.configuration import DecodeConfiguration
from appstream_catalog.decode.base import CatalogParser
from appstream_catalog.decode.media import MediaParser
from appstream_catalog.model.component import Component
from appstream_catalog.model.types.localized import LocalizedText

if TYPE_CHECKING:
    from lxml.etree import _Element, _ElementTree


class ComponentParser(CatalogParser):
    """
    Parser for `<component>` elements.

    https://www.freedesktop.org/software/appstream/docs/chap-CollectionData.html#sect-AppStream-XML
    """

    # Simple text fields, mapped from element name to field name.
    TEXT_FIELDS = {
        "pkgname": "pkgname",
        "source_pkgname": "source_pkgname",
        "project_license": "project_license",
        "metadata_license": "metadata_license",
        "project_group": "project_group",
        "update_contact": "update_contact",
    }

    def __init__(self, configuration: DecodeConfiguration | None = None) -> None:
        super().__init__(configuration)
        self.media = MediaParser(self.configuration)

    def component_data(self, tag: _Element) -> dict[str, Any]:
        data: dict[str, Any] = {}
        self._set(data, "id", self.text_of_optional_subtag(tag, "id"))
        self._set(data, "kind", self._attr(tag, "type"))
        self._set(data, "name", self._localized_text(tag, "name"))

        for element, field in self.TEXT_FIELDS.items():
            self._set(data, field, self.text_of_optional_subtag(tag, element))

        self._set(data, "summary", self._localized_text(tag, "summary"))
        self._set(
            data, "description", self._localized_text(tag, "description", markup=True)
        )
        self._set(data, "developer_name", self._developer_name(tag))
        self._set(data, "keywords", self._localized_list(tag, "keywords", "keyword"))

        data["urls"] = [self.url_data(url) for url in self._xpath(tag, "url")]
        data["screenshots"] = [
            self.media.screenshot_data(screenshot)
            for screenshot in self._xpath(tag, "screenshots/screenshot")
        ]
        # Releases are meant to be wrapped in <releases>, but some
        # documents list <release> directly under the component.
        data["releases"] = [
            self.release_data(release)
            for release in self._xpath(tag, "releases/release | release")
        ]
        data["provides"] = self._provides(tag)
        data["mimetypes"] = self.texts_of_subtags(tag, "mimetypes/mimetype")
        data["categories"] = self.texts_of_subtags(tag, "categories/category")
        data["icons"] = [self.media.icon_data(icon) for icon in self._xpath(tag, "icon")]
        data["launchables"] = [
            self.launchable_data(launchable)
            for launchable in self._xpath(tag, "launchable")
        ]
        data["extends"] = self.texts_of_subtags(tag, "extends")
        data["compulsory_for_desktops"] = self.texts_of_subtags(
            tag, "compulsory_for_desktop"
        )
        return data

    def _developer_name(self, tag: _Element) -> LocalizedText | None:
        # Older documents use <developer_name>, newer ones <developer><name>.
        developer_name = self._localized_text(tag, "developer_name")
        if developer_name is None:
            developer = self._xpath1(tag, "developer")
            if developer is not None:
                developer_name = self._localized_text(developer, "name")
        return developer_name

    def url_data(self, tag: _Element) -> dict[str, Any]:
        data: dict[str, Any] = {}
        self._set(data, "kind", self._attr(tag, "type"))
        self._set(data, "url", self._text(tag))
        return data

    def launchable_data(self, tag: _Element) -> dict[str, Any]:
        data: dict[str, Any] = {}
        self._set(data, "kind", self._attr(tag, "type"))
        self._set(data, "value", self._text(tag))
        return data

    def _provides(self, tag: _Element) -> list[dict[str, Any]]:
        provides = []
        for provides_tag in self._xpath(tag, "provides"):
            for child in self._children(provides_tag):
                value = self._text(child)
                if value is None:
                    self.log.debug(f"Skipping empty <{child.tag}> provide.")
                    continue
                data: dict[str, Any] = {"kind": child.tag, "value": value}
                self._set(data, "type", self._attr(child, "type"))
                provides.append(data)
        return provides

    def release_data(self, tag: _Element) -> dict[str, Any]:
        data: dict[str, Any] = {}
        self._set(data, "version", self._attr(tag, "version"))
        self._set(data, "kind", self._attr(tag, "type"))
        self._set(data, "date", self._attr(tag, "date") or self._attr(tag, "timestamp"))
        self._set(data, "date_eol", self._attr(tag, "date_eol"))
        self._set(data, "urgency", self._attr(tag, "urgency"))
        self._set(
            data, "description", self._localized_text(tag, "description", markup=True)
        )
        return data

    def parse(self, xml: str | bytes | _ElementTree) -> Component:
        """
        Decode a standalone `<component>` element.

        :raises DecodeError: If the element can't be decoded.
        """
        root = self._load(xml, "component")
        return self._validate(Component, self.component_data(root))
