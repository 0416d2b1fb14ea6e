"""Exception hierarchy shared by the extraction layer and the outer surfaces.

The readability engine itself never raises for string input; these errors
describe what can go wrong *around* it, while turning a file or URL into text.

- :class:`MissingDependencyError`: the injected content extractor is not ready.
- :class:`ExtractionError`: content or MIME type could not be resolved.
- :class:`NetworkError`: a transport failure while resolving a remote
  resource. It subclasses :class:`ExtractionError` but must always be
  re-raised, never folded into a negative validation result, so the host can
  retry later.
"""

from __future__ import annotations


class LegibleError(Exception):
    """Base class for every error raised by this package."""


class MissingDependencyError(LegibleError):
    """A required collaborator (e.g. the content extractor) is unavailable."""

    def __init__(self, dependency: str, detail: str | None = None) -> None:
        self.dependency = dependency
        message = f"Missing dependency: {dependency}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ExtractionError(LegibleError):
    """Content or MIME type could not be extracted from a resource."""

    def __init__(self, message: str, *, resource: str | None = None) -> None:
        self.resource = resource
        super().__init__(message)


class NetworkError(ExtractionError):
    """A network failure occurred while resolving a remote resource."""


__all__ = [
    "LegibleError",
    "MissingDependencyError",
    "ExtractionError",
    "NetworkError",
]
