"""
Readability metadata extraction for files and URLs.

`ReadabilityExtractor` composes two collaborators:

- a :class:`~legible.extraction.content.ContentExtractor` that resolves MIME
  types and plain text;
- a :class:`~legible.core.calculator.ReadabilityCalculator` that turns text
  into a :class:`~legible.core.contracts.scores.ScoreSet`.

Every public operation first checks that the content extractor is ready and
raises :class:`MissingDependencyError` otherwise. Network failures always
propagate, even from :meth:`ReadabilityExtractor.validate_resource`.
"""

from __future__ import annotations

from urllib.parse import urlparse

from legible.core.calculator import ReadabilityCalculator
from legible.core.contracts.resource import (
    RESOURCE_TYPE_FILE,
    RESOURCE_TYPE_URL,
    FileResource,
    ResourceType,
    UrlResource,
)
from legible.core.contracts.scores import ReadabilityMetadata
from legible.core.errors import ExtractionError, MissingDependencyError, NetworkError
from legible.core.settings import Settings, get_logger
from legible.extraction.content import ContentExtractor, LocalContentExtractor
from legible.extraction.mime import is_mimetype_supported

logger = get_logger(__name__)

_URL_SCHEMES = ("http", "https")


def is_valid_url(url: str) -> bool:
    """Return ``True`` for absolute ``http``/``https`` URLs with a host."""
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme.lower() in _URL_SCHEMES and bool(parsed.netloc)


class ReadabilityExtractor:
    """Produce readability metadata records for files and URLs."""

    def __init__(
        self,
        content_extractor: ContentExtractor,
        calculator: ReadabilityCalculator | None = None,
    ) -> None:
        self.content_extractor = content_extractor
        self.calculator = calculator or ReadabilityCalculator()

    @classmethod
    def from_settings(cls, config: Settings) -> ReadabilityExtractor:
        """Wire the local content extractor and a settings-driven calculator."""
        return cls(
            LocalContentExtractor(timeout_seconds=config.url_timeout),
            ReadabilityCalculator.from_settings(config),
        )

    def _require_ready(self) -> None:
        if not self.content_extractor.is_ready():
            raise MissingDependencyError(
                "content extractor", "the configured extractor reports it is not ready"
            )

    # ----- Validation --------------------------------------------------------
    def validate_resource(
        self, resource: FileResource | UrlResource, resource_type: ResourceType
    ) -> bool:
        """Return ``True`` if metadata can be extracted from ``resource``.

        Files must not be directories; URLs must be absolute ``http(s)`` URLs.
        Either way the resolved MIME type must be supported. Extraction
        failures count as "not supported", but :class:`NetworkError` is
        re-raised.
        """
        self._require_ready()

        try:
            if resource_type == RESOURCE_TYPE_FILE:
                if not isinstance(resource, FileResource) or resource.is_directory:
                    return False
                mimetype = self.content_extractor.extract_file_mimetype(resource)
            elif resource_type == RESOURCE_TYPE_URL:
                if not isinstance(resource, UrlResource) or not is_valid_url(
                    resource.externalurl
                ):
                    return False
                mimetype = self.content_extractor.extract_url_mimetype(resource)
            else:
                logger.debug("Unknown resource type %r", resource_type)
                return False
        except NetworkError:
            raise
        except ExtractionError as exc:
            logger.info("Resource rejected: %s", exc)
            return False

        return is_mimetype_supported(mimetype)

    # ----- Extraction --------------------------------------------------------
    def extract_file_metadata(self, file: FileResource) -> ReadabilityMetadata | None:
        """Score the text of ``file``; ``None`` when it has no text."""
        self._require_ready()
        content = self.content_extractor.extract_file_content(file)
        if not content.strip():
            logger.info("No readable content in %s", file.filename or file.path)
            return None
        return ReadabilityMetadata(
            resourcehash=file.resourcehash(),
            scores=self.calculator.calculate_scores(content),
        )

    def extract_url_metadata(self, url: UrlResource) -> ReadabilityMetadata | None:
        """Score the text behind ``url``; ``None`` when it has no text."""
        self._require_ready()
        content = self.content_extractor.extract_url_content(url)
        if not content.strip():
            logger.info("No readable content at %s", url.externalurl)
            return None
        return ReadabilityMetadata(
            resourcehash=url.resourcehash(),
            scores=self.calculator.calculate_scores(content),
        )


__all__ = ["ReadabilityExtractor", "is_valid_url"]
