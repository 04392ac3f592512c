"""Render trails as navigation bars and nested link listings."""

from __future__ import annotations

from typing import Literal, Sequence

from doctrail.config import DOCTRAIL_INDEX_NAME, DOCTRAIL_OUTPUT_SUFFIX
from doctrail.schemas import TrailItem
from doctrail.search import document_stem, find_item

NavTitle = Literal["Up", "Next", "Previous"]

TOP_CONTROL = '<b>Top:</b> <a href="index.html">Index</a>'


def render_item_link(item: TrailItem | None, *, suffix: str = DOCTRAIL_OUTPUT_SUFFIX) -> str:
    """Render an item as an anchor, or an empty string when absent."""
    if item is None:
        return ""
    return f'<a href="{item.link}{suffix}">{item.text}</a>'


def render_nav_control(title: NavTitle, item: TrailItem | None) -> str:
    """Render a labeled Up/Next/Previous control."""
    if item is None:
        return ""
    return f"<b>{title}</b>: {render_item_link(item)}"


def render_top_control() -> str:
    return TOP_CONTROL


def render_nav_bar(
    *,
    previous: TrailItem | None,
    up: TrailItem | None,
    next: TrailItem | None,
) -> str:
    """Compose the navigation bar from optional neighbors.

    Absent neighbors leave an empty slot; only the Top control is always
    present.
    """
    return (
        '<div class="trail-nav-bar">'
        f"{render_top_control()}&nbsp;"
        f"{render_nav_control('Previous', previous)} "
        f"{render_nav_control('Up', up)} "
        f"{render_nav_control('Next', next)}"
        "</div>"
    )


def render_trail_listing(trail: Sequence[TrailItem]) -> str:
    """Render a trail as a nested unordered list wrapped in a div."""
    return f'<div class="trail-itemized">{_render_list(trail)}</div>'


def render_trail_for_document(
    trail: Sequence[TrailItem],
    identifier: str,
    *,
    index_name: str = DOCTRAIL_INDEX_NAME,
) -> str:
    """Pick the listing to show on a document.

    The index document lists the whole trail. Any other document lists
    its own subtrail, or nothing when it is a leaf or not in the trail.
    """
    if document_stem(identifier) == index_name:
        return render_trail_listing(trail)
    item = find_item(trail, identifier)
    if item is None or not item.subtrail:
        return ""
    return render_trail_listing(item.subtrail)


def _render_list(trail: Sequence[TrailItem]) -> str:
    parts: list[str] = ["<ul>"]
    for item in trail:
        parts.append(f"<li>{render_item_link(item)}</li>\n")
        if item.subtrail:
            parts.append(_render_list(item.subtrail))
    parts.append("</ul>")
    return "".join(parts)
