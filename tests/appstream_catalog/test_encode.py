from lxml import etree

from appstream_catalog.builders import (
    ImageBuilder,
    ScreenshotBuilder,
    VideoBuilder,
)
from appstream_catalog.decode import parse_screenshot
from appstream_catalog.encode import (
    MediaWriter,
    image_to_xml,
    screenshot_to_xml,
    video_to_xml,
)
from appstream_catalog.model.enums import ImageKind
from appstream_catalog.model.screenshot import Screenshot
from appstream_catalog.model.types.localized import LocalizedText
from appstream_catalog.model.types.open_enum import Unrecognized
from appstream_catalog.model.types.url import Url
from appstream_catalog.util.xmlparser import XML_LANG


class TestMediaWriter:
    def test_image(self) -> None:
        image = (
            ImageBuilder(Url("https://example.org/main.png"))
            .width(800)
            .height(600)
            .build()
        )
        tag = MediaWriter.image(image)
        assert tag.tag == "image"
        assert tag.text == "https://example.org/main.png"
        assert dict(tag.attrib) == {"type": "source", "width": "800", "height": "600"}

        assert (
            image_to_xml(image).strip()
            == '<image type="source" width="800" height="600">https://example.org/main.png</image>'
        )

    def test_image_without_size(self) -> None:
        image = (
            ImageBuilder(Url("https://example.org/main-small.png"))
            .kind(ImageKind.thumbnail)
            .build()
        )
        tag = MediaWriter.image(image)
        assert dict(tag.attrib) == {"type": "thumbnail"}

    def test_image_with_zero_size(self) -> None:
        image = (
            ImageBuilder(Url("https://example.org/a.png")).width(0).height(0).build()
        )
        tag = MediaWriter.image(image)
        assert dict(tag.attrib) == {"type": "source", "width": "0", "height": "0"}
        assert parse_screenshot(
            screenshot_to_xml(ScreenshotBuilder().image(image).build())
        ).images == (image,)

    def test_unrecognized_image_kind(self) -> None:
        image = (
            ImageBuilder(Url("https://example.org/a.png"))
            .kind(Unrecognized("preview"))
            .build()
        )
        assert MediaWriter.image(image).get("type") == "preview"

    def test_video(self) -> None:
        video = (
            VideoBuilder(Url("https://example.org/demo.webm"))
            .codec("av1")
            .container("webm")
            .width(1920)
            .height(1080)
            .build()
        )
        tag = MediaWriter.video(video)
        assert tag.text == "https://example.org/demo.webm"
        assert dict(tag.attrib) == {
            "width": "1920",
            "height": "1080",
            "codec": "av1",
            "container": "webm",
        }

        bare = etree.fromstring(
            video_to_xml(VideoBuilder(Url("https://example.org/demo.mkv")).build())
        )
        assert dict(bare.attrib) == {}

    def test_screenshot(self) -> None:
        screenshot = (
            ScreenshotBuilder()
            .set_default(False)
            .caption(
                LocalizedText.with_default("The editor").and_locale("de", "Der Editor")
            )
            .image(ImageBuilder(Url("https://example.org/main.png")).build())
            .video(VideoBuilder(Url("https://example.org/demo.webm")).build())
            .build()
        )
        tag = etree.fromstring(screenshot_to_xml(screenshot))
        assert tag.tag == "screenshot"
        assert tag.get("type") == "extra"
        assert [child.tag for child in tag] == ["caption", "caption", "image", "video"]

        default_caption, de_caption = tag.findall("caption")
        assert default_caption.text == "The editor"
        assert default_caption.get(XML_LANG) is None
        assert de_caption.text == "Der Editor"
        assert de_caption.get(XML_LANG) == "de"

    def test_default_screenshot(self) -> None:
        tag = MediaWriter.screenshot(Screenshot())
        assert tag.get("type") == "default"
        assert len(tag) == 0

    def test_roundtrip(self) -> None:
        screenshot = (
            ScreenshotBuilder()
            .caption(
                LocalizedText.with_default("The main window")
                .and_locale("de", "Das Hauptfenster")
                .and_locale("fr_FR", "La fenêtre principale")
            )
            .images(
                [
                    ImageBuilder(Url("https://example.org/main.png"))
                    .width(800)
                    .height(600)
                    .build(),
                    ImageBuilder(Url("https://example.org/main-small.png"))
                    .kind(ImageKind.thumbnail)
                    .width(200)
                    .height(150)
                    .build(),
                ]
            )
            .videos(
                [
                    VideoBuilder(Url("https://example.org/demo.webm"))
                    .codec("vp9")
                    .build()
                ]
            )
            .build()
        )
        assert parse_screenshot(screenshot_to_xml(screenshot)) == screenshot

        extra = ScreenshotBuilder().set_default(False).build()
        assert parse_screenshot(screenshot_to_xml(extra)) == extra
