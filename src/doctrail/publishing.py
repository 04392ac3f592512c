"""Navigation markup for the host publishing pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from doctrail.navigation import neighbors
from doctrail.project import TrailProject
from doctrail.rendering import render_nav_bar, render_trail_for_document
from doctrail.schemas import DocumentNavigation


@dataclass
class PublishingOptions:
    """Options for per-document navigation markup.

    Attributes:
        include_nav_bar: Emit the previous/up/next navigation bar.
        include_listing: Emit the trail listing for the document.
    """

    include_nav_bar: bool = True
    include_listing: bool = True


def render_document_navigation(
    project: TrailProject,
    identifier: str,
    options: PublishingOptions | None = None,
) -> DocumentNavigation:
    """Render the navigation bar and trail listing for one document.

    Projects without a bound trail get empty markup. A document that is
    not in the trail still gets a bar with only the Top control.
    """
    opts = options or PublishingOptions()
    trail = project.bound_trail
    if trail is None:
        return DocumentNavigation()

    nav_bar = ""
    if opts.include_nav_bar:
        found = neighbors(trail, identifier)
        if found is None:
            nav_bar = render_nav_bar(previous=None, up=None, next=None)
        else:
            nav_bar = render_nav_bar(previous=found.previous, up=found.up, next=found.next)

    listing = ""
    if opts.include_listing:
        listing = render_trail_for_document(trail, identifier, index_name=project.index_name)

    return DocumentNavigation(nav_bar=nav_bar, listing=listing)
