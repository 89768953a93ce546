import logging

import pytest
from pydantic import BaseModel, TypeAdapter

from appstream_catalog.model.enums import (
    AnyCategory,
    AnyComponentKind,
    Category,
    ComponentKind,
    ImageKind,
    ProjectUrlKind,
    ReleaseUrgency,
)
from appstream_catalog.model.types.open_enum import OpenEnum, Unrecognized
from appstream_catalog.util.log import LogLevel


class TestOpenEnum:
    @pytest.mark.parametrize(
        "enum, token, expected",
        [
            (ComponentKind, "desktop-application", ComponentKind.desktop_application),
            (ComponentKind, "inputmethod", ComponentKind.input_method),
            (ImageKind, "thumbnail", ImageKind.thumbnail),
            (ProjectUrlKind, "vcs-browser", ProjectUrlKind.vcs_browser),
            (Category, "2DGraphics", Category.Graphics2D),
            (Category, "WebBrowser", Category.WebBrowser),
            (ReleaseUrgency, "critical", ReleaseUrgency.critical),
        ],
    )
    def test_parse_known(
        self, enum: type[OpenEnum], token: str, expected: OpenEnum
    ) -> None:
        parsed = enum.parse(token)
        assert parsed is expected
        # Members convert back to the token they were parsed from
        assert str(parsed) == token

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("desktop", ComponentKind.desktop_application),
            ("desktop-app", ComponentKind.desktop_application),
            ("webapp", ComponentKind.web_application),
        ],
    )
    def test_parse_legacy(self, token: str, expected: ComponentKind) -> None:
        assert ComponentKind.parse(token) is expected

    def test_parse_unrecognized(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(LogLevel.debug)

        parsed = Category.parse("X-Vendor-Special")
        assert parsed == Unrecognized("X-Vendor-Special")
        assert str(parsed) == "X-Vendor-Special"
        assert "Keeping unrecognized Category token 'X-Vendor-Special'" in caplog.text

        [record] = caplog.records
        assert record.levelno == logging.DEBUG
        assert record.name == "appstream_catalog.model.enums.Category"

    def test_parse_is_case_sensitive(self) -> None:
        assert Category.parse("network") == Unrecognized("network")
        assert Category.parse("Network") is Category.Network

    def test_parse_passthrough(self) -> None:
        unrecognized = Unrecognized("foo")
        assert ComponentKind.parse(unrecognized) is unrecognized
        assert ComponentKind.parse(ComponentKind.font) is ComponentKind.font
        assert ComponentKind.parse(None) is None

    def test_unrecognized_never_equals_member(self) -> None:
        assert Unrecognized("font") != ComponentKind.font
        assert ComponentKind.font != Unrecognized("font")
        assert Unrecognized("font") == Unrecognized("font")
        assert hash(Unrecognized("font")) == hash(Unrecognized("font"))

    def test_model_field(self) -> None:
        class Model(BaseModel):
            kind: AnyComponentKind = ComponentKind.generic
            categories: tuple[AnyCategory, ...] = ()

        model = Model.model_validate(
            {"kind": "runtime", "categories": ["Game", "X-Unknown"]}
        )
        assert model.kind is ComponentKind.runtime
        assert model.categories == (Category.Game, Unrecognized("X-Unknown"))

        model = Model.model_validate({"kind": "plugin"})
        assert model.kind == Unrecognized("plugin")

        assert Model().kind is ComponentKind.generic

        # Already parsed values are accepted as they are
        assert Model(kind=Unrecognized("plugin")).kind == Unrecognized("plugin")

    def test_type_adapter(self) -> None:
        adapter = TypeAdapter(AnyCategory)
        assert adapter.validate_python("Office") is Category.Office
        assert adapter.validate_python("Officey") == Unrecognized("Officey")
