"""Whole-trail utilities: iteration, counting, outlines and link checks."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, Sequence

from doctrail.exceptions import TrailConfigError
from doctrail.schemas import TrailItem
from doctrail.search import document_stem


def iter_items(trail: Sequence[TrailItem], depth: int = 0) -> Iterator[tuple[int, TrailItem]]:
    """Yield ``(depth, item)`` pairs in pre-order."""
    for item in trail:
        yield depth, item
        if item.subtrail:
            yield from iter_items(item.subtrail, depth + 1)


def count_items(trail: Iterable[TrailItem]) -> int:
    """Count total items in the trail, nested ones included."""
    total = 0
    for item in trail:
        total += 1
        if item.subtrail:
            total += count_items(item.subtrail)
    return total


def format_trail_tree(trail: Sequence[TrailItem], indent: int = 0) -> str:
    """Render an indented plain-text outline of the trail."""
    lines: list[str] = []
    for item in trail:
        lines.append(" " * (indent * 4) + f"{item.text} ({item.link})")
        if item.subtrail:
            lines.append(format_trail_tree(item.subtrail, indent + 1))
    return "\n".join(lines)


def find_duplicate_links(trail: Sequence[TrailItem]) -> list[str]:
    """Return links used by more than one item, in first-seen order."""
    counts = Counter(item.link for _, item in iter_items(trail))
    return [link for link, count in counts.items() if count > 1]


def find_dangling_links(trail: Sequence[TrailItem], documents: Iterable[str]) -> list[str]:
    """Return links that match none of the given documents."""
    known = {document_stem(document) for document in documents}
    dangling: list[str] = []
    for _, item in iter_items(trail):
        if item.link not in known and item.link not in dangling:
            dangling.append(item.link)
    return dangling


def validate_trail(
    trail: Sequence[TrailItem],
    documents: Iterable[str] | None = None,
) -> None:
    """Reject trails with duplicate links or links to unknown documents.

    Args:
        trail: The trail to check.
        documents: Known document identifiers. Dangling links are only
            checked when this is given.

    Raises:
        TrailConfigError: If any problem is found.
    """
    problems: list[str] = []
    duplicates = find_duplicate_links(trail)
    if duplicates:
        problems.append(f"duplicate links: {', '.join(duplicates)}")
    if documents is not None:
        dangling = find_dangling_links(trail, documents)
        if dangling:
            problems.append(f"links without a document: {', '.join(dangling)}")
    if problems:
        raise TrailConfigError("Invalid trail: " + "; ".join(problems))
