"""Locate trail items by document identifier."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Sequence

from doctrail.schemas import TrailItem


def document_stem(identifier: str) -> str:
    """Reduce a document identifier to its base name without extension.

    ``"docs/guide/s1.muse"`` and ``"s1"`` both become ``"s1"``.
    """
    return PurePosixPath(identifier.replace("\\", "/")).stem


def find_item(trail: Sequence[TrailItem], identifier: str) -> TrailItem | None:
    """Return the first item whose link matches the identifier's stem.

    Items are examined in pre-order: a match inside an item's subtrail wins
    over any later sibling of that item.
    """
    return _find_by_link(trail, document_stem(identifier))


def contains_item(trail: Sequence[TrailItem], identifier: str) -> bool:
    """Check whether any item in the trail matches the identifier's stem."""
    return find_item(trail, identifier) is not None


def _find_by_link(trail: Sequence[TrailItem], stem: str) -> TrailItem | None:
    for item in trail:
        if item.link == stem:
            return item
        if item.subtrail:
            found = _find_by_link(item.subtrail, stem)
            if found is not None:
                return found
    return None
