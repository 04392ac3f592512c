"""doctrail: reading-order navigation over independently linked documents."""

from doctrail.commands import TrailCommands, TrailHost
from doctrail.exceptions import DoctrailError, TrailConfigError, TrailLoadError
from doctrail.loader import load_trail, parse_trail, trail_from_html
from doctrail.navigation import find_down, find_next, find_previous, find_up, neighbors
from doctrail.project import TrailProject, TrailRegistry
from doctrail.publishing import PublishingOptions, render_document_navigation
from doctrail.rendering import (
    render_item_link,
    render_nav_bar,
    render_nav_control,
    render_top_control,
    render_trail_for_document,
    render_trail_listing,
)
from doctrail.schemas import DocumentNavigation, Trail, TrailItem, TrailNeighbors
from doctrail.search import contains_item, document_stem, find_item

__all__ = [
    "DocumentNavigation",
    "DoctrailError",
    "PublishingOptions",
    "Trail",
    "TrailCommands",
    "TrailConfigError",
    "TrailHost",
    "TrailItem",
    "TrailLoadError",
    "TrailNeighbors",
    "TrailProject",
    "TrailRegistry",
    "contains_item",
    "document_stem",
    "find_down",
    "find_item",
    "find_next",
    "find_previous",
    "find_up",
    "load_trail",
    "neighbors",
    "parse_trail",
    "render_document_navigation",
    "render_item_link",
    "render_nav_bar",
    "render_nav_control",
    "render_top_control",
    "render_trail_for_document",
    "render_trail_listing",
    "trail_from_html",
]
