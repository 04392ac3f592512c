"""Local configuration for doctrail."""

from __future__ import annotations

import os

DEFAULT_INDEX_NAME = "index"
DEFAULT_OUTPUT_SUFFIX = ".html"
DEFAULT_SOURCE_SUFFIX = ".muse"
DEFAULT_LOG_LEVEL = "WARNING"

# Stem of the document that renders the whole top-level trail.
DOCTRAIL_INDEX_NAME = os.getenv("DOCTRAIL_INDEX_NAME", DEFAULT_INDEX_NAME)
DOCTRAIL_OUTPUT_SUFFIX = os.getenv("DOCTRAIL_OUTPUT_SUFFIX", DEFAULT_OUTPUT_SUFFIX)
DOCTRAIL_SOURCE_SUFFIX = os.getenv("DOCTRAIL_SOURCE_SUFFIX", DEFAULT_SOURCE_SUFFIX)
DOCTRAIL_STRICT_LINKS = os.getenv("DOCTRAIL_STRICT_LINKS", "false").lower() == "true"
DOCTRAIL_LOG_LEVEL = os.getenv("DOCTRAIL_LOG_LEVEL", DEFAULT_LOG_LEVEL)
