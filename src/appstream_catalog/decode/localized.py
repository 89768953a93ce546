"""
Merging of localized markup.

Translatable fields are written as repeated elements, one per locale:

    <summary>Web browser</summary>
    <summary xml:lang="fr_FR">Navigateur web</summary>

These functions collapse such repeats into a single localized value. They
work on (locale, value) pairs in document order, with a locale of None for
untagged content, so they don't depend on how the pairs were extracted.
"""

from __future__ import annotations

from collections.abc import Iterable

from appstream_catalog.model.types.localized import (
    DEFAULT_LOCALE,
    LocalizedList,
    LocalizedText,
)


def merge_localized_text(
    entries: Iterable[tuple[str | None, str]],
) -> LocalizedText | None:
    """
    Merge translations into a LocalizedText.

    Untagged entries supply the default value. When a locale appears more
    than once, the last entry wins.

    :return: The merged value, or None if there is no untagged entry to
        provide the default.
    """
    mapping: dict[str, str] = {}
    for locale, value in entries:
        mapping[locale or DEFAULT_LOCALE] = value

    if DEFAULT_LOCALE not in mapping:
        return None
    return LocalizedText(mapping)


def merge_localized_list(
    blocks: Iterable[Iterable[tuple[str | None, str]]],
) -> LocalizedList | None:
    """
    Merge translated lists into a LocalizedList.

    Each block is one occurrence of the list element (for example one
    `<keywords>` element), given as (locale, item) pairs. Within a block,
    items are appended to the list of their locale. A locale's list from a
    later block replaces the list for that locale from an earlier block.

    :return: The merged value, or None if there are no untagged items to
        provide the default.
    """
    mapping: dict[str, list[str]] = {}
    for block in blocks:
        block_mapping: dict[str, list[str]] = {}
        for locale, item in block:
            block_mapping.setdefault(locale or DEFAULT_LOCALE, []).append(item)
        mapping.update(block_mapping)

    if DEFAULT_LOCALE not in mapping:
        return None
    return LocalizedList(mapping)
