from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict

from appstream_catalog.util.log import LogLevel


class DecodeConfiguration(BaseModel):
    """
    Options that control how documents are decoded.

    This is passed explicitly to the parsers. It is never loaded from the
    environment, decoding is a pure function of the input and these options.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # lxml stops processing a document when it encounters a null character,
    # so by default they are removed before parsing.
    remove_null_bytes: bool = True

    # Lift lxml's limits on tree depth and text node size. Full distribution
    # catalogs can be large enough to hit them.
    huge_tree: bool = False

    # Level used for the "Starting..." / "Completed." lines that time
    # a collection decode. Level names and logging level numbers are accepted.
    timing_log_level: Annotated[LogLevel, BeforeValidator(LogLevel.from_level)] = (
        LogLevel.debug
    )
