"""Turning files and URLs into readability metadata records."""

from __future__ import annotations

from legible.extraction.content import ContentExtractor, LocalContentExtractor
from legible.extraction.extractor import ReadabilityExtractor
from legible.extraction.mime import is_mimetype_supported

__all__ = [
    "ContentExtractor",
    "LocalContentExtractor",
    "ReadabilityExtractor",
    "is_mimetype_supported",
]
