from __future__ import annotations

from appstream_catalog.model.base import BaseCatalogModel
from appstream_catalog.model.enums import (
    AnyReleaseKind,
    AnyReleaseUrgency,
    ReleaseKind,
)
from appstream_catalog.model.types.date import ReleaseDatetime
from appstream_catalog.model.types.localized import LocalizedText


class Release(BaseCatalogModel):
    """
    A release of a component.

    https://www.freedesktop.org/software/appstream/docs/chap-Metadata.html#tag-releases
    """

    version: str
    kind: AnyReleaseKind = ReleaseKind.stable
    date: ReleaseDatetime = None
    date_eol: ReleaseDatetime = None
    urgency: AnyReleaseUrgency | None = None
    description: LocalizedText | None = None
