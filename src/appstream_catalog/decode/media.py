from __future__ import annotations

from typing import TYPE_CHECKING, Any

from appstream_catalog.decode.base import CatalogParser
from appstream_catalog.model.screenshot import (
    DEFAULT_SCREENSHOT,
    EXTRA_SCREENSHOT,
    Screenshot,
)

if TYPE_CHECKING:
    from lxml.etree import _Element, _ElementTree


class MediaParser(CatalogParser):
    """Parser for screenshots (with their images and videos) and icons."""

    def screenshot_is_default(self, screenshot_type: str | None) -> bool:
        """
        The `type` attribute of a screenshot only says whether it is the
        default one. A screenshot without it is the default, which is the
        convention for single screenshot components.
        """
        if screenshot_type is None or screenshot_type == DEFAULT_SCREENSHOT:
            return True
        if screenshot_type != EXTRA_SCREENSHOT:
            self.log.warning(
                f"Unknown screenshot type '{screenshot_type}', "
                "treating it as a non-default screenshot."
            )
        return False

    def screenshot_data(self, tag: _Element) -> dict[str, Any]:
        data: dict[str, Any] = {
            "is_default": self.screenshot_is_default(self._attr(tag, "type")),
            "images": [self.image_data(image) for image in self._xpath(tag, "image")],
            "videos": [self.video_data(video) for video in self._xpath(tag, "video")],
        }
        self._set(data, "caption", self._localized_text(tag, "caption"))
        return data

    def image_data(self, tag: _Element) -> dict[str, Any]:
        data: dict[str, Any] = {}
        # Without a type, the image is the source image.
        self._set(data, "kind", self._attr(tag, "type"))
        self._int_attributes(tag, data, "width", "height")
        self._set(data, "url", self._text(tag))
        return data

    def video_data(self, tag: _Element) -> dict[str, Any]:
        data: dict[str, Any] = {}
        self._int_attributes(tag, data, "width", "height")
        self._set(data, "codec", self._attr(tag, "codec"))
        self._set(data, "container", self._attr(tag, "container"))
        self._set(data, "url", self._text(tag))
        return data

    def icon_data(self, tag: _Element) -> dict[str, Any]:
        # An icon without a type can't be interpreted, but its content is
        # kept as an unrecognized icon with an empty type.
        icon_type = self._attr(tag, "type") or ""
        value = self._text(tag)

        data: dict[str, Any] = {"type": icon_type}
        match icon_type:
            case "stock":
                self._set(data, "name", value)
            case "cached" | "local":
                self._set(data, "path", value)
            case "remote":
                self._set(data, "url", value)
            case _:
                self._set(data, "value", value)
        self._int_attributes(tag, data, "width", "height", "scale")
        return data

    def parse(self, xml: str | bytes | _ElementTree) -> Screenshot:
        """
        Decode a standalone `<screenshot>` element.

        :raises DecodeError: If the element can't be decoded.
        """
        root = self._load(xml, "screenshot")
        return self._validate(Screenshot, self.screenshot_data(root))
