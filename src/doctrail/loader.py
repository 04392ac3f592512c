"""Build trails from Python data, JSON files and rendered HTML listings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from doctrail.exceptions import TrailLoadError
from doctrail.schemas import Trail, TrailItem
from doctrail.search import document_stem
from doctrail.utils.logging_config import get_logger

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise TrailLoadError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = get_logger(__name__)

_TRAIL_ADAPTER: TypeAdapter[Trail] = TypeAdapter(Trail)


def parse_trail(data: Any) -> Trail:
    """Validate nested Python data into a trail.

    Items may be mappings with ``text``/``link``/``subtrail`` keys or the
    compact ``[text, link]`` / ``[text, link, [children]]`` list form.

    Raises:
        TrailLoadError: If the data does not describe a trail.
    """
    try:
        return _TRAIL_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise TrailLoadError(f"Invalid trail data: {exc}") from exc


def load_trail(path: Path | str) -> Trail:
    """Read a trail from a JSON file.

    Raises:
        TrailLoadError: If the file cannot be read or is not a valid trail.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TrailLoadError(f"Cannot read trail file {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TrailLoadError(f"Trail file {path} is not valid JSON: {exc}") from exc

    trail = parse_trail(data)
    logger.debug("Loaded trail", extra={"path": str(path), "items": len(trail)})
    return trail


def trail_from_html(html: str) -> Trail:
    """Rebuild a trail from a rendered listing page.

    Looks for ``<div class="trail-itemized">`` first and falls back to the
    first ``<ul>`` in the document. Nested lists are accepted both inside
    an ``<li>`` and as the sibling directly following it.

    Raises:
        TrailLoadError: If the page has no list to read.
    """
    soup = BeautifulSoup(html, "lxml")
    container = soup.find("div", class_="trail-itemized")
    root_list = container.find("ul") if isinstance(container, Tag) else soup.find("ul")
    if not isinstance(root_list, Tag):
        raise TrailLoadError("No trail listing found in HTML")
    return _items_from_list(root_list)


def _items_from_list(list_tag: Tag) -> Trail:
    items: list[TrailItem] = []
    pending: dict[str, Any] | None = None

    for child in list_tag.children:
        if not isinstance(child, Tag):
            continue
        if child.name == "li":
            if pending is not None:
                items.append(TrailItem(**pending))
            pending = _item_fields(child)
        elif child.name == "ul" and pending is not None:
            pending["subtrail"] = pending.get("subtrail", ()) + _items_from_list(child)

    if pending is not None:
        items.append(TrailItem(**pending))
    return tuple(items)


def _item_fields(li: Tag) -> dict[str, Any]:
    anchor = li.find("a")
    if not isinstance(anchor, Tag):
        text = li.get_text(" ", strip=True)
        raise TrailLoadError(f"Trail entry without a link: {text!r}")

    href = str(anchor.get("href", ""))
    fields: dict[str, Any] = {
        "text": anchor.get_text(" ", strip=True),
        "link": document_stem(href.split("#", 1)[0]),
    }
    nested = li.find("ul", recursive=False)
    if isinstance(nested, Tag):
        fields["subtrail"] = _items_from_list(nested)
    return fields
