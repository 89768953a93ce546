from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property

from appstream_catalog.model.base import BaseCatalogModel
from appstream_catalog.model.enums import (
    AnyCategory,
    AnyComponentKind,
    AnyLaunchableKind,
    AnyProjectUrlKind,
    AnyProvideKind,
    ComponentKind,
    LaunchableKind,
    ProjectUrlKind,
    ProvideKind,
)
from appstream_catalog.model.icon import Icon
from appstream_catalog.model.release import Release
from appstream_catalog.model.screenshot import Screenshot
from appstream_catalog.model.types.app_id import AppId
from appstream_catalog.model.types.localized import LocalizedList, LocalizedText
from appstream_catalog.model.types.open_enum import Unrecognized
from appstream_catalog.model.types.url import Url


class ProjectUrl(BaseCatalogModel):
    """
    https://www.freedesktop.org/software/appstream/docs/chap-Metadata.html#tag-url
    """

    kind: AnyProjectUrlKind = ProjectUrlKind.homepage
    url: Url


class Provide(BaseCatalogModel):
    """
    Something a component provides: a binary, a library, a font, ...

    `type` holds the `type` attribute that some provides (`dbus`,
    `firmware`) carry.
    """

    kind: AnyProvideKind
    value: str
    type: str | None = None


class Launchable(BaseCatalogModel):
    """
    https://www.freedesktop.org/software/appstream/docs/chap-Metadata.html#tag-launchable
    """

    kind: AnyLaunchableKind = LaunchableKind.desktop_id
    value: str


class Component(BaseCatalogModel):
    """
    A piece of software described by the catalog.

    https://www.freedesktop.org/software/appstream/docs/chap-CollectionData.html
    """

    id: AppId
    name: LocalizedText
    kind: AnyComponentKind = ComponentKind.generic

    pkgname: str | None = None
    source_pkgname: str | None = None
    project_license: str | None = None
    metadata_license: str | None = None
    project_group: str | None = None
    update_contact: str | None = None

    summary: LocalizedText | None = None
    description: LocalizedText | None = None
    developer_name: LocalizedText | None = None
    keywords: LocalizedList | None = None

    urls: tuple[ProjectUrl, ...] = ()
    screenshots: tuple[Screenshot, ...] = ()
    releases: tuple[Release, ...] = ()
    provides: tuple[Provide, ...] = ()
    mimetypes: tuple[str, ...] = ()
    categories: tuple[AnyCategory, ...] = ()
    icons: tuple[Icon, ...] = ()
    launchables: tuple[Launchable, ...] = ()
    extends: tuple[AppId, ...] = ()
    compulsory_for_desktops: tuple[str, ...] = ()

    def localized_name(self, locale: str | None = None) -> str:
        return self.name.for_locale(locale)

    @cached_property
    def default_screenshot(self) -> Screenshot | None:
        """The screenshot marked as default, or the first one if none is."""
        for screenshot in self.screenshots:
            if screenshot.is_default:
                return screenshot
        return next(iter(self.screenshots), None)

    def urls_of_kind(self, kind: ProjectUrlKind | Unrecognized) -> Sequence[Url]:
        return tuple(url.url for url in self.urls if url.kind == kind)

    def provided(self, kind: ProvideKind | Unrecognized) -> Sequence[str]:
        """The values of all the provides of one kind, in document order."""
        return tuple(
            provide.value for provide in self.provides if provide.kind == kind
        )
