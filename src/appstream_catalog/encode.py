from __future__ import annotations

from lxml import builder, etree
from lxml.etree import _Element

from appstream_catalog.model.screenshot import (
    DEFAULT_SCREENSHOT,
    EXTRA_SCREENSHOT,
    Image,
    Screenshot,
    Video,
)
from appstream_catalog.model.types.localized import LocalizedText
from appstream_catalog.util.xmlparser import XML_LANG


class MediaWriter:
    """
    Writes screenshots, with their images and videos, back to XML.

    The output uses the same attributes the parser reads, so writing a
    model and parsing the result gives back an equal model.
    """

    E = builder.ElementMaker()

    @classmethod
    def _sized(
        cls, tag: _Element, width: int | None, height: int | None
    ) -> _Element:
        if width is not None:
            tag.set("width", str(width))
        if height is not None:
            tag.set("height", str(height))
        return tag

    @classmethod
    def _localized(cls, name: str, value: LocalizedText) -> list[_Element]:
        elements = [cls.E(name, value.default)]
        for locale, translation in value.locales.items():
            elements.append(cls.E(name, translation, {XML_LANG: locale}))
        return elements

    @classmethod
    def image(cls, image: Image) -> _Element:
        tag = cls.E.image(image.url, type=image.kind.value)
        return cls._sized(tag, image.width, image.height)

    @classmethod
    def video(cls, video: Video) -> _Element:
        tag = cls.E.video(video.url)
        cls._sized(tag, video.width, video.height)
        if video.codec is not None:
            tag.set("codec", video.codec)
        if video.container is not None:
            tag.set("container", video.container)
        return tag

    @classmethod
    def screenshot(cls, screenshot: Screenshot) -> _Element:
        screenshot_type = (
            DEFAULT_SCREENSHOT if screenshot.is_default else EXTRA_SCREENSHOT
        )
        tag = cls.E.screenshot(type=screenshot_type)
        if screenshot.caption is not None:
            tag.extend(cls._localized("caption", screenshot.caption))
        tag.extend(cls.image(image) for image in screenshot.images)
        tag.extend(cls.video(video) for video in screenshot.videos)
        return tag


def to_string(tag: _Element, pretty_print: bool = True) -> str:
    return etree.tostring(tag, encoding="unicode", pretty_print=pretty_print)


def screenshot_to_xml(screenshot: Screenshot) -> str:
    return to_string(MediaWriter.screenshot(screenshot))


def image_to_xml(image: Image) -> str:
    return to_string(MediaWriter.image(image))


def video_to_xml(video: Video) -> str:
    return to_string(MediaWriter.video(video))
