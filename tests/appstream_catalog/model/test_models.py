import pydantic
import pytest

from appstream_catalog.model.collection import Collection
from appstream_catalog.model.component import Component, ProjectUrl, Provide
from appstream_catalog.model.enums import (
    ComponentKind,
    ImageKind,
    ProjectUrlKind,
    ProvideKind,
)
from appstream_catalog.model.icon import (
    CachedIcon,
    LocalIcon,
    RemoteIcon,
    StockIcon,
    UnrecognizedIcon,
)
from appstream_catalog.model.screenshot import Image, Screenshot
from appstream_catalog.model.types.app_id import AppId
from appstream_catalog.model.types.localized import LocalizedText
from appstream_catalog.model.types.open_enum import Unrecognized
from appstream_catalog.model.types.url import Url


def _component(id: str, name: str = "App", **kwargs) -> Component:
    return Component(id=AppId(id), name=LocalizedText(name), **kwargs)


class TestComponent:
    def test_defaults(self) -> None:
        component = _component("org.example.App")
        assert component.kind is ComponentKind.generic
        assert component.summary is None
        assert component.keywords is None
        assert component.screenshots == ()
        assert component.categories == ()
        assert component.default_screenshot is None

    def test_frozen(self) -> None:
        component = _component("org.example.App")
        with pytest.raises(pydantic.ValidationError):
            component.pkgname = "app"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert hash(_component("org.example.App")) == hash(
            _component("org.example.App")
        )

    def test_localized_name(self) -> None:
        component = Component(
            id=AppId("org.mozilla.Firefox"),
            name=LocalizedText.with_default("Firefox").and_locale("en_GB", "Firefoux"),
        )
        assert component.localized_name() == "Firefox"
        assert component.localized_name("en_GB") == "Firefoux"
        assert component.localized_name("fr_FR") == "Firefox"

    def test_default_screenshot(self) -> None:
        extra = Screenshot(
            is_default=False,
            images=(Image(url=Url("https://example.org/extra.png")),),
        )
        default = Screenshot(
            is_default=True,
            images=(Image(url=Url("https://example.org/default.png")),),
        )
        component = _component("org.example.App", screenshots=(extra, default))
        assert component.default_screenshot == default

        # Without a default, the first screenshot is used
        component = _component("org.example.App", screenshots=(extra,))
        assert component.default_screenshot == extra

    def test_urls_of_kind(self) -> None:
        component = _component(
            "org.example.App",
            urls=(
                ProjectUrl(url=Url("https://example.org")),
                ProjectUrl(
                    kind=ProjectUrlKind.bugtracker, url=Url("https://example.org/bugs")
                ),
                ProjectUrl(kind=Unrecognized("wiki"), url=Url("https://example.org/w")),
            ),
        )
        assert component.urls_of_kind(ProjectUrlKind.homepage) == (
            "https://example.org",
        )
        assert component.urls_of_kind(ProjectUrlKind.bugtracker) == (
            "https://example.org/bugs",
        )
        assert component.urls_of_kind(Unrecognized("wiki")) == ("https://example.org/w",)
        assert component.urls_of_kind(ProjectUrlKind.faq) == ()

    def test_provided(self) -> None:
        component = _component(
            "org.freedesktop.PulseAudio",
            provides=(
                Provide(kind=ProvideKind.library, value="libpulse.so.0"),
                Provide(kind=ProvideKind.binary, value="pulseaudio"),
                Provide(kind=ProvideKind.library, value="libpulse-simple.so.0"),
            ),
        )
        assert component.provided(ProvideKind.library) == (
            "libpulse.so.0",
            "libpulse-simple.so.0",
        )
        assert component.provided(ProvideKind.font) == ()


class TestScreenshot:
    def test_images(self) -> None:
        source = Image(url=Url("https://example.org/main.png"), width=800, height=600)
        thumbnail = Image(
            kind=ImageKind.thumbnail,
            url=Url("https://example.org/main-small.png"),
            width=200,
            height=150,
        )
        screenshot = Screenshot(images=(thumbnail, source))
        assert screenshot.is_default is True
        assert screenshot.source_image == source
        assert screenshot.thumbnails == (thumbnail,)

        assert Screenshot().source_image is None

    def test_image_dimensions(self) -> None:
        url = Url("https://example.org/main.png")
        image = Image(url=url, width=0, height="0")  # type: ignore[arg-type]
        assert (image.width, image.height) == (0, 0)
        assert Image(url=url, width=4294967295).width == 4294967295

    @pytest.mark.parametrize(
        "width",
        [
            pytest.param(-1, id="negative"),
            pytest.param(4294967296, id="too large"),
            pytest.param("800.0", id="decimal string"),
            pytest.param("1e3", id="exponent string"),
            pytest.param("-1", id="negative string"),
            pytest.param("\u0663", id="non-ascii digit"),
            pytest.param(800.0, id="float"),
            pytest.param(True, id="bool"),
        ],
    )
    def test_image_dimensions_must_be_integers(self, width: object) -> None:
        with pytest.raises(pydantic.ValidationError):
            Image(url=Url("https://example.org/main.png"), width=width)  # type: ignore[arg-type]


class TestIcon:
    @pytest.mark.parametrize(
        "data, expected",
        [
            pytest.param(
                {"type": "stock", "name": "web-browser"},
                StockIcon(name="web-browser"),
                id="stock",
            ),
            pytest.param(
                {"type": "cached", "path": "firefox.png", "width": "64"},
                CachedIcon(path="firefox.png", width=64),
                id="cached",
            ),
            pytest.param(
                {"type": "local", "path": "/usr/share/icons/firefox.png"},
                LocalIcon(path="/usr/share/icons/firefox.png"),
                id="local",
            ),
            pytest.param(
                {"type": "remote", "url": "https://example.org/icon.png"},
                RemoteIcon(url=Url("https://example.org/icon.png")),
                id="remote",
            ),
            pytest.param(
                {"type": "vector", "value": "firefox.svg"},
                UnrecognizedIcon(type="vector", value="firefox.svg"),
                id="unrecognized",
            ),
        ],
    )
    def test_discrimination(self, data: dict[str, str], expected: object) -> None:
        component = _component("org.example.App", icons=[data])
        assert component.icons == (expected,)

    def test_instances(self) -> None:
        icons = (
            StockIcon(name="web-browser"),
            UnrecognizedIcon(type="vector", value="firefox.svg"),
        )
        component = _component("org.example.App", icons=icons)
        assert component.icons == icons

    def test_invalid(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="valid icon"):
            _component("org.example.App", icons=["web-browser"])

    def test_icon_sizes_must_be_integers(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="non-negative integer"):
            _component(
                "org.example.App",
                icons=[{"type": "cached", "path": "firefox.png", "scale": "2.0"}],
            )
        component = _component(
            "org.example.App",
            icons=[{"type": "cached", "path": "firefox.png", "scale": "0"}],
        )
        assert component.icons == (CachedIcon(path="firefox.png", scale=0),)


class TestCollection:
    def test_find_by_id(self) -> None:
        calculator = _component("org.gnome.Calculator", pkgname="gnome-calculator")
        legacy = _component("org.gnome.Calculator", pkgname="gnome-calculator-old")
        bc = _component("org.gnu.bc")
        collection = Collection(version="0.8", components=(calculator, bc, legacy))

        assert collection.find_by_id(AppId("org.gnome.Calculator")) == (
            calculator,
            legacy,
        )
        assert collection.find_by_id("org.gnu.bc") == (bc,)
        assert collection.find_by_id("org.gnu.dc") == ()

    def test_defaults(self) -> None:
        collection = Collection(version="1.0")
        assert collection.origin is None
        assert collection.architecture is None
        assert collection.components == ()
