"""Internal helpers for doctrail."""
