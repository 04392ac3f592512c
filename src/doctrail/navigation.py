"""Compute up/next/previous/down neighbors of a trail item.

All lookups compare whole items rather than links and take the full
forest, except :func:`find_down` which only needs the item itself.

Next and previous are level-local: they only look at siblings in the
level where the target was matched. The last item of a subtrail has no
next item even if its owner has a following sibling, and the first item
of a subtrail has no previous one.
"""

from __future__ import annotations

from typing import Sequence

from doctrail.schemas import TrailItem, TrailNeighbors
from doctrail.search import find_item


def find_up(trail: Sequence[TrailItem], target: TrailItem) -> TrailItem | None:
    """Return the item whose subtrail directly contains ``target``."""
    for item in trail:
        if not item.subtrail:
            continue
        if target in item.subtrail:
            return item
        owner = find_up(item.subtrail, target)
        if owner is not None:
            return owner
    return None


def find_next(trail: Sequence[TrailItem], target: TrailItem) -> TrailItem | None:
    """Return the sibling following ``target`` at the level it was matched."""
    _, following = _scan_next(trail, target)
    return following


def find_previous(trail: Sequence[TrailItem], target: TrailItem) -> TrailItem | None:
    """Return the sibling preceding ``target`` at the level it was matched."""
    _, preceding = _scan_previous(trail, target, None)
    return preceding


def find_down(item: TrailItem) -> TrailItem | None:
    """Return the first item of ``item``'s subtrail."""
    if not item.subtrail:
        return None
    return item.subtrail[0]


def neighbors(trail: Sequence[TrailItem], identifier: str) -> TrailNeighbors | None:
    """Locate a document and collect all of its neighbors.

    Returns None when the document is not part of the trail.
    """
    item = find_item(trail, identifier)
    if item is None:
        return None
    return TrailNeighbors(
        item=item,
        up=find_up(trail, item),
        previous=find_previous(trail, item),
        next=find_next(trail, item),
        down=find_down(item),
    )


# The scanners return (matched, result) so that a match with no neighbor
# stops the walk instead of falling through to later siblings.


def _scan_next(
    trail: Sequence[TrailItem], target: TrailItem
) -> tuple[bool, TrailItem | None]:
    for index, item in enumerate(trail):
        if item == target:
            if index + 1 < len(trail):
                return True, trail[index + 1]
            return True, None
        if item.subtrail:
            matched, following = _scan_next(item.subtrail, target)
            if matched:
                return True, following
    return False, None


def _scan_previous(
    trail: Sequence[TrailItem],
    target: TrailItem,
    last_seen: TrailItem | None,
) -> tuple[bool, TrailItem | None]:
    for item in trail:
        if item == target:
            return True, last_seen
        if item.subtrail:
            matched, preceding = _scan_previous(item.subtrail, target, None)
            if matched:
                return True, preceding
        last_seen = item
    return False, None
