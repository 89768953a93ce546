from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Self

from appstream_catalog.util.log import logger_for_cls


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """
    A token that is not part of a known vocabulary.

    Documents routinely use vocabulary that is newer than this library, or
    vendor specific. Rather than rejecting it, we keep the token verbatim so
    it can be inspected and written back unchanged. An Unrecognized value never
    compares equal to a member of an enum, even if the tokens match.
    """

    value: str

    def __str__(self) -> str:
        return self.value


class OpenEnum(StrEnum):
    """
    Base for enums that describe an open vocabulary.

    Subclasses list the tokens we know about. `parse` maps a token onto a
    member, or onto an Unrecognized value carrying the token when there is no
    member for it. Subclasses can implement `_missing_` to accept legacy
    spellings of known tokens.
    """

    @classmethod
    def parse(cls, token: Any) -> Self | Unrecognized:
        """
        Turn a raw token into a member or an Unrecognized value.

        Values that are already members or Unrecognized are passed through
        unchanged, as is anything that isn't a string, so this can be used
        as a pydantic `BeforeValidator`.
        """
        if isinstance(token, (cls, Unrecognized)) or not isinstance(token, str):
            return token
        try:
            return cls(token)
        except ValueError:
            logger_for_cls(cls).debug(
                f"Keeping unrecognized {cls.__name__} token '{token}'."
            )
            return Unrecognized(token)
