"""Custom exceptions for doctrail."""


class DoctrailError(Exception):
    """Base exception for doctrail operations."""


class TrailLoadError(DoctrailError):
    """Error while reading or parsing a trail source."""


class TrailConfigError(DoctrailError):
    """Trail failed validation when bound to a project."""
