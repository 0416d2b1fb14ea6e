"""MIME-type helpers for deciding which resources can carry readable text."""

from __future__ import annotations

from typing import Final

SUPPORTED_MIMETYPES: Final[frozenset[str]] = frozenset(
    {
        "text/plain",
        "text/html",
        "application/pdf",
        "application/msword",
        "application/vnd.oasis.opendocument.text",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/x-abiword",
        "application/vnd.ms-powerpoint",
        "application/vnd.oasis.opendocument.presentation",
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    }
)

DOCX_MIMETYPE: Final[str] = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)


def get_mimetype_without_parameters(mimetype: str) -> str:
    """Keep only ``type/subtype``, dropping ``; charset=...`` style parameters.

    >>> get_mimetype_without_parameters("text/html; charset=UTF-8")
    'text/html'
    """
    return mimetype.split(";", 1)[0].strip().lower()


def is_mimetype_supported(mimetype: str | None) -> bool:
    """Return ``True`` if readability metadata can be extracted for ``mimetype``.

    Parameters are ignored, so ``text/plain; charset=utf-8`` is supported.
    Empty or missing MIME types are not.
    """
    if not mimetype:
        return False
    return get_mimetype_without_parameters(mimetype) in SUPPORTED_MIMETYPES


__all__ = [
    "SUPPORTED_MIMETYPES",
    "DOCX_MIMETYPE",
    "get_mimetype_without_parameters",
    "is_mimetype_supported",
]
