from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Discriminator, Tag

from appstream_catalog.model.base import BaseCatalogModel
from appstream_catalog.model.types.dimension import Dimension
from appstream_catalog.model.types.url import Url


class _SizedIcon(BaseCatalogModel):
    width: Dimension | None = None
    height: Dimension | None = None
    scale: Dimension | None = None


class StockIcon(BaseCatalogModel):
    """An icon looked up by name in the current icon theme."""

    type: Literal["stock"] = "stock"
    name: str


class CachedIcon(_SizedIcon):
    """An icon shipped in the icon cache of the catalog, by file name."""

    type: Literal["cached"] = "cached"
    path: str


class LocalIcon(_SizedIcon):
    """An icon at an absolute path on the local file system."""

    type: Literal["local"] = "local"
    path: str


class RemoteIcon(_SizedIcon):
    """An icon that has to be downloaded."""

    type: Literal["remote"] = "remote"
    url: Url


class UnrecognizedIcon(_SizedIcon):
    """
    An icon with a `type` we don't know about. The type token and the
    content of the element are kept verbatim.
    """

    type: str
    value: str


ICON_TYPES: dict[str, type[BaseCatalogModel]] = {
    "stock": StockIcon,
    "cached": CachedIcon,
    "local": LocalIcon,
    "remote": RemoteIcon,
}


# See these links for more information about Pydantic type discriminators:
# https://docs.pydantic.dev/latest/concepts/unions/#discriminated-unions-with-callable-discriminator
def _discriminate_icon(value: Any) -> str | None:
    if isinstance(value, UnrecognizedIcon):
        return "unrecognized"
    if isinstance(value, BaseCatalogModel):
        return getattr(value, "type", None)
    if isinstance(value, dict):
        icon_type = value.get("type")
        return icon_type if icon_type in ICON_TYPES else "unrecognized"
    return None


Icon = Annotated[
    (
        Annotated[StockIcon, Tag("stock")]
        | Annotated[CachedIcon, Tag("cached")]
        | Annotated[LocalIcon, Tag("local")]
        | Annotated[RemoteIcon, Tag("remote")]
        | Annotated[UnrecognizedIcon, Tag("unrecognized")]
    ),
    Discriminator(
        _discriminate_icon,
        custom_error_type="invalid_icon",
        custom_error_message="Input should be a valid icon",
    ),
]
"""
A Pydantic model field TypeAlias for the icon variants.

The `type` of the icon selects the variant. Unknown types are kept as an
UnrecognizedIcon rather than failing validation.
"""
