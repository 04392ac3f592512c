"""Shared schemas for doctrail."""

from doctrail.schemas.navigation import DocumentNavigation, TrailNeighbors
from doctrail.schemas.trail import Trail, TrailItem

__all__ = ["DocumentNavigation", "Trail", "TrailItem", "TrailNeighbors"]
