"""
Builders for constructing models by hand.

Each builder takes the values that have no sensible default as
constructor arguments, every other value is set with a chained setter, and
`build()` returns the immutable model:

    component = (
        ComponentBuilder(AppId("org.example.App"), LocalizedText.with_default("App"))
        .kind(ComponentKind.desktop_application)
        .category(Category.Utility)
        .build()
    )

Builders only accept values that are already validated (an AppId, a Url,
a LocalizedText, ...) and sizes that are plain `int`s from 0 to
`MAX_DIMENSION`, so building can't fail. A model built this way is
equal to the model decoded from a document with the same content.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Self, TypeAlias

from appstream_catalog.model.collection import Collection
from appstream_catalog.model.component import (
    Component,
    Launchable,
    ProjectUrl,
    Provide,
)
from appstream_catalog.model.enums import (
    Category,
    ComponentKind,
    ImageKind,
    LaunchableKind,
    ProjectUrlKind,
    ProvideKind,
    ReleaseKind,
    ReleaseUrgency,
)
from appstream_catalog.model.icon import (
    CachedIcon,
    LocalIcon,
    RemoteIcon,
    StockIcon,
    UnrecognizedIcon,
)
from appstream_catalog.model.release import Release
from appstream_catalog.model.screenshot import Image, Screenshot, Video
from appstream_catalog.model.types.app_id import AppId
from appstream_catalog.model.types.localized import LocalizedList, LocalizedText
from appstream_catalog.model.types.open_enum import Unrecognized
from appstream_catalog.model.types.url import Url

IconT: TypeAlias = StockIcon | CachedIcon | LocalIcon | RemoteIcon | UnrecognizedIcon


class ImageBuilder:
    def __init__(self, url: Url) -> None:
        self._url = url
        self._kind: ImageKind | Unrecognized = ImageKind.source
        self._width: int | None = None
        self._height: int | None = None

    def kind(self, kind: ImageKind | Unrecognized) -> Self:
        self._kind = kind
        return self

    def width(self, width: int) -> Self:
        self._width = width
        return self

    def height(self, height: int) -> Self:
        self._height = height
        return self

    def build(self) -> Image:
        return Image(
            kind=self._kind, width=self._width, height=self._height, url=self._url
        )


class VideoBuilder:
    def __init__(self, url: Url) -> None:
        self._url = url
        self._width: int | None = None
        self._height: int | None = None
        self._codec: str | None = None
        self._container: str | None = None

    def width(self, width: int) -> Self:
        self._width = width
        return self

    def height(self, height: int) -> Self:
        self._height = height
        return self

    def codec(self, codec: str) -> Self:
        self._codec = codec
        return self

    def container(self, container: str) -> Self:
        self._container = container
        return self

    def build(self) -> Video:
        return Video(
            width=self._width,
            height=self._height,
            codec=self._codec,
            container=self._container,
            url=self._url,
        )


class ScreenshotBuilder:
    """
    Screenshots are the default screenshot unless `set_default(False)`
    is called, matching screenshots decoded without a `type` attribute.
    """

    def __init__(self) -> None:
        self._is_default = True
        self._caption: LocalizedText | None = None
        self._images: list[Image] = []
        self._videos: list[Video] = []

    def set_default(self, is_default: bool) -> Self:
        self._is_default = is_default
        return self

    def caption(self, caption: LocalizedText) -> Self:
        self._caption = caption
        return self

    def image(self, image: Image) -> Self:
        self._images.append(image)
        return self

    def images(self, images: list[Image]) -> Self:
        self._images.extend(images)
        return self

    def video(self, video: Video) -> Self:
        self._videos.append(video)
        return self

    def videos(self, videos: list[Video]) -> Self:
        self._videos.extend(videos)
        return self

    def build(self) -> Screenshot:
        return Screenshot(
            is_default=self._is_default,
            caption=self._caption,
            images=tuple(self._images),
            videos=tuple(self._videos),
        )


class ReleaseBuilder:
    def __init__(self, version: str) -> None:
        self._version = version
        self._kind: ReleaseKind | Unrecognized = ReleaseKind.stable
        self._date: datetime | None = None
        self._date_eol: datetime | None = None
        self._urgency: ReleaseUrgency | Unrecognized | None = None
        self._description: LocalizedText | None = None

    def kind(self, kind: ReleaseKind | Unrecognized) -> Self:
        self._kind = kind
        return self

    def date(self, date: datetime) -> Self:
        self._date = date
        return self

    def date_eol(self, date_eol: datetime) -> Self:
        self._date_eol = date_eol
        return self

    def urgency(self, urgency: ReleaseUrgency | Unrecognized) -> Self:
        self._urgency = urgency
        return self

    def description(self, description: LocalizedText) -> Self:
        self._description = description
        return self

    def build(self) -> Release:
        return Release(
            version=self._version,
            kind=self._kind,
            date=self._date,
            date_eol=self._date_eol,
            urgency=self._urgency,
            description=self._description,
        )


class ComponentBuilder:
    def __init__(self, id: AppId, name: LocalizedText) -> None:
        self._id = id
        self._name = name
        self._kind: ComponentKind | Unrecognized = ComponentKind.generic
        self._fields: dict[str, Any] = {}
        self._urls: list[ProjectUrl] = []
        self._screenshots: list[Screenshot] = []
        self._releases: list[Release] = []
        self._provides: list[Provide] = []
        self._mimetypes: list[str] = []
        self._categories: list[Category | Unrecognized] = []
        self._icons: list[IconT] = []
        self._launchables: list[Launchable] = []
        self._extends: list[AppId] = []
        self._compulsory_for_desktops: list[str] = []

    def kind(self, kind: ComponentKind | Unrecognized) -> Self:
        self._kind = kind
        return self

    def pkgname(self, pkgname: str) -> Self:
        self._fields["pkgname"] = pkgname
        return self

    def source_pkgname(self, source_pkgname: str) -> Self:
        self._fields["source_pkgname"] = source_pkgname
        return self

    def project_license(self, project_license: str) -> Self:
        self._fields["project_license"] = project_license
        return self

    def metadata_license(self, metadata_license: str) -> Self:
        self._fields["metadata_license"] = metadata_license
        return self

    def project_group(self, project_group: str) -> Self:
        self._fields["project_group"] = project_group
        return self

    def update_contact(self, update_contact: str) -> Self:
        self._fields["update_contact"] = update_contact
        return self

    def summary(self, summary: LocalizedText) -> Self:
        self._fields["summary"] = summary
        return self

    def description(self, description: LocalizedText) -> Self:
        self._fields["description"] = description
        return self

    def developer_name(self, developer_name: LocalizedText) -> Self:
        self._fields["developer_name"] = developer_name
        return self

    def keywords(self, keywords: LocalizedList) -> Self:
        self._fields["keywords"] = keywords
        return self

    def url(
        self, url: Url, kind: ProjectUrlKind | Unrecognized = ProjectUrlKind.homepage
    ) -> Self:
        self._urls.append(ProjectUrl(kind=kind, url=url))
        return self

    def screenshot(self, screenshot: Screenshot) -> Self:
        self._screenshots.append(screenshot)
        return self

    def release(self, release: Release) -> Self:
        self._releases.append(release)
        return self

    def provide(
        self,
        kind: ProvideKind | Unrecognized,
        value: str,
        type: str | None = None,
    ) -> Self:
        self._provides.append(Provide(kind=kind, value=value, type=type))
        return self

    def mimetype(self, mimetype: str) -> Self:
        self._mimetypes.append(mimetype)
        return self

    def category(self, category: Category | Unrecognized) -> Self:
        self._categories.append(category)
        return self

    def icon(self, icon: IconT) -> Self:
        self._icons.append(icon)
        return self

    def launchable(
        self,
        value: str,
        kind: LaunchableKind | Unrecognized = LaunchableKind.desktop_id,
    ) -> Self:
        self._launchables.append(Launchable(kind=kind, value=value))
        return self

    def extends(self, id: AppId) -> Self:
        self._extends.append(id)
        return self

    def compulsory_for_desktop(self, desktop: str) -> Self:
        self._compulsory_for_desktops.append(desktop)
        return self

    def build(self) -> Component:
        return Component(
            id=self._id,
            name=self._name,
            kind=self._kind,
            urls=tuple(self._urls),
            screenshots=tuple(self._screenshots),
            releases=tuple(self._releases),
            provides=tuple(self._provides),
            mimetypes=tuple(self._mimetypes),
            categories=tuple(self._categories),
            icons=tuple(self._icons),
            launchables=tuple(self._launchables),
            extends=tuple(self._extends),
            compulsory_for_desktops=tuple(self._compulsory_for_desktops),
            **self._fields,
        )


class CollectionBuilder:
    def __init__(self, version: str) -> None:
        self._version = version
        self._origin: str | None = None
        self._architecture: str | None = None
        self._components: list[Component] = []

    def origin(self, origin: str) -> Self:
        self._origin = origin
        return self

    def architecture(self, architecture: str) -> Self:
        self._architecture = architecture
        return self

    def component(self, component: Component) -> Self:
        self._components.append(component)
        return self

    def components(self, components: list[Component]) -> Self:
        self._components.extend(components)
        return self

    def build(self) -> Collection:
        return Collection(
            version=self._version,
            origin=self._origin,
            architecture=self._architecture,
            components=tuple(self._components),
        )
