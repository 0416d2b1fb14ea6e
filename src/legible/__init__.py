"""Legible: readability metrics and reading-time estimates for documents.

The scoring core lives in :mod:`legible.core`; file and URL handling in
:mod:`legible.extraction`.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
