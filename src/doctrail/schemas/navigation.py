"""Navigation result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from doctrail.schemas.trail import TrailItem


class TrailNeighbors(BaseModel):
    """Neighbors of a located trail item.

    Attributes:
        item: The item the document resolved to.
        up: Item whose subtrail directly contains ``item``.
        previous: Preceding sibling at the same level.
        next: Following sibling at the same level.
        down: First item of ``item``'s subtrail.
    """

    model_config = ConfigDict(frozen=True)

    item: TrailItem
    up: TrailItem | None = None
    previous: TrailItem | None = None
    next: TrailItem | None = None
    down: TrailItem | None = None


class DocumentNavigation(BaseModel):
    """Markup generated for one document at publishing time."""

    nav_bar: str = ""
    listing: str = ""
