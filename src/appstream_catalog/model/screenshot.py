from __future__ import annotations

from collections.abc import Sequence

from appstream_catalog.model.base import BaseCatalogModel
from appstream_catalog.model.enums import AnyImageKind, ImageKind
from appstream_catalog.model.types.dimension import Dimension
from appstream_catalog.model.types.localized import LocalizedText
from appstream_catalog.model.types.url import Url

# Tokens of the screenshot `type` attribute.
DEFAULT_SCREENSHOT = "default"
EXTRA_SCREENSHOT = "extra"


class Image(BaseCatalogModel):
    """
    A static image of a screenshot.

    https://www.freedesktop.org/software/appstream/docs/chap-Metadata.html#tag-screenshots
    """

    kind: AnyImageKind = ImageKind.source
    width: Dimension | None = None
    height: Dimension | None = None
    url: Url


class Video(BaseCatalogModel):
    """
    A screencast of a screenshot.
    """

    width: Dimension | None = None
    height: Dimension | None = None
    codec: str | None = None
    container: str | None = None
    url: Url


class Screenshot(BaseCatalogModel):
    """
    A screenshot of a component, which may be made of any number of images
    and videos.

    `is_default` marks the screenshot that should be shown first. The
    format expects a single default screenshot per component, but that is
    not enforced.
    """

    is_default: bool = True
    caption: LocalizedText | None = None
    images: tuple[Image, ...] = ()
    videos: tuple[Video, ...] = ()

    @property
    def source_image(self) -> Image | None:
        """The first image of the `source` kind, if there is one."""
        return next(
            (image for image in self.images if image.kind == ImageKind.source), None
        )

    @property
    def thumbnails(self) -> Sequence[Image]:
        return tuple(
            image for image in self.images if image.kind == ImageKind.thumbnail
        )
