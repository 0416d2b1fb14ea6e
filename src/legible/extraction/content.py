"""
Content extraction: turning a file or URL into plain text.

The readability extractor depends on a *capability*, not a class: anything
that satisfies :class:`ContentExtractor` can be injected, which keeps tests
free of real files and network access.

This module also ships :class:`LocalContentExtractor`, a dependency-light
implementation good enough for command-line and API use:

Plain text
    Decoded as UTF-8 (undecodable bytes are replaced).
HTML
    Parsed with BeautifulSoup; ``script``/``style``/``noscript`` are dropped
    and the remaining text is joined with single spaces.
PDF
    Page text from :mod:`pdfplumber`, one page per paragraph.
DOCX
    Non-empty paragraphs from :mod:`python-docx`.
Anything else on the allow-list (legacy Word, ODF, AbiWord, PowerPoint)
    Yields an empty string: no readable text, hence no metadata.

Remote resources are fetched with :mod:`urllib.request`. Transport failures
(unreachable host, timeout, HTTP 5xx) raise :class:`NetworkError` so hosts can
retry; HTTP 4xx and undecodable documents raise :class:`ExtractionError`.
"""

from __future__ import annotations

import io
import mimetypes
import urllib.error
import urllib.request
import zipfile
from typing import Protocol, runtime_checkable

import pdfplumber
from bs4 import BeautifulSoup
from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from legible import __version__
from legible.core.contracts.resource import FileResource, UrlResource
from legible.core.errors import ExtractionError, NetworkError
from legible.core.settings import get_logger
from legible.extraction.mime import DOCX_MIMETYPE, get_mimetype_without_parameters

logger = get_logger(__name__)

DEFAULT_MIMETYPE = "application/octet-stream"

_SKIPPED_HTML_TAGS = ("script", "style", "noscript", "template")


@runtime_checkable
class ContentExtractor(Protocol):
    """Capability required to turn resources into text and MIME types."""

    def is_ready(self) -> bool:
        """Return ``True`` when the extractor can serve requests."""
        ...

    def extract_file_content(self, file: FileResource) -> str:
        """Return the plain text of a file (empty when there is none)."""
        ...

    def extract_url_content(self, url: UrlResource) -> str:
        """Return the plain text behind a URL (empty when there is none)."""
        ...

    def extract_file_mimetype(self, file: FileResource) -> str:
        """Return the MIME type of a file."""
        ...

    def extract_url_mimetype(self, url: UrlResource) -> str:
        """Return the MIME type served for a URL."""
        ...


# ===========================================================================
# Format helpers
# ===========================================================================


def html_to_text(markup: str) -> str:
    """Strip markup and return the visible text of an HTML document."""
    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup(list(_SKIPPED_HTML_TAGS)):
        tag.decompose()
    return soup.get_text(" ", strip=True)


def _pdf_to_text(data: bytes) -> str:
    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            pages = [(page.extract_text() or "").strip() for page in pdf.pages]
    except Exception as exc:
        # pdfminer parse failures do not share a public base class.
        raise ExtractionError(f"Could not read PDF content: {exc}") from exc
    return "\n\n".join(page for page in pages if page)


def _docx_to_text(data: bytes) -> str:
    document = Document(io.BytesIO(data))
    paragraphs = ((p.text or "").strip() for p in document.paragraphs)
    return "\n\n".join(p for p in paragraphs if p)


def text_from_bytes(data: bytes, mimetype: str, charset: str | None = None) -> str:
    """Decode ``data`` of the given MIME type into plain text.

    Raises
    ------
    ExtractionError
        If the document cannot be parsed as the declared format.
    """
    kind = get_mimetype_without_parameters(mimetype)
    encoding = charset or "utf-8"

    try:
        if kind == "text/plain":
            return data.decode(encoding, errors="replace")
        if kind == "text/html":
            return html_to_text(data.decode(encoding, errors="replace"))
        if kind == "application/pdf":
            return _pdf_to_text(data)
        if kind == DOCX_MIMETYPE:
            return _docx_to_text(data)
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError, OSError) as exc:
        raise ExtractionError(f"Could not read {kind} content: {exc}") from exc
    except LookupError as exc:
        raise ExtractionError(f"Unknown text encoding {encoding!r}") from exc

    logger.debug("No text extraction available for %s", kind)
    return ""


# ===========================================================================
# Local implementation
# ===========================================================================


class LocalContentExtractor:
    """Extract text from local files and plain HTTP(S) URLs.

    Parameters
    ----------
    timeout_seconds:
        Network timeout for each remote request.
    user_agent:
        ``User-Agent`` header sent with remote requests.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = 10.0,
        user_agent: str = f"legible/{__version__}",
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent

    def is_ready(self) -> bool:
        """Format libraries are imported at module load, so always ready."""
        return True

    # ----- Files -------------------------------------------------------------
    def extract_file_mimetype(self, file: FileResource) -> str:
        """Guess the MIME type from the file name."""
        guessed, _ = mimetypes.guess_type(file.filename or file.path.name)
        return guessed or DEFAULT_MIMETYPE

    def extract_file_content(self, file: FileResource) -> str:
        """Read the file and decode it according to its MIME type."""
        if file.is_directory:
            raise ExtractionError("Directories have no content", resource=str(file.path))
        try:
            data = file.read_bytes()
        except OSError as exc:
            raise ExtractionError(
                f"Could not read file: {exc}", resource=str(file.path)
            ) from exc
        return text_from_bytes(data, self.extract_file_mimetype(file))

    # ----- URLs --------------------------------------------------------------
    def _open(self, url: UrlResource, method: str) -> tuple[bytes, str, str | None]:
        request = urllib.request.Request(
            url=url.externalurl,
            headers={"User-Agent": self.user_agent},
            method=method,
        )
        try:
            with urllib.request.urlopen(request, timeout=self.timeout_seconds) as resp:
                body = resp.read() if method != "HEAD" else b""
                content_type = resp.headers.get("Content-Type", "") or ""
                charset = resp.headers.get_content_charset()
        except urllib.error.HTTPError as exc:
            logger.warning("HTTP %s fetching %s", exc.code, url.externalurl)
            if exc.code >= 500:
                raise NetworkError(
                    f"HTTP error {exc.code}: {exc.reason}", resource=url.externalurl
                ) from exc
            raise ExtractionError(
                f"HTTP error {exc.code}: {exc.reason}", resource=url.externalurl
            ) from exc
        except (urllib.error.URLError, TimeoutError) as exc:
            logger.warning("Network failure fetching %s: %s", url.externalurl, exc)
            raise NetworkError(f"Network error: {exc}", resource=url.externalurl) from exc
        except ValueError as exc:
            raise ExtractionError(
                f"Invalid URL: {url.externalurl}", resource=url.externalurl
            ) from exc
        return body, content_type, charset

    def extract_url_mimetype(self, url: UrlResource) -> str:
        """Return the ``Content-Type`` served for the URL (parameters included)."""
        _, content_type, _ = self._open(url, "HEAD")
        return content_type or DEFAULT_MIMETYPE

    def extract_url_content(self, url: UrlResource) -> str:
        """Download the document behind the URL and decode it."""
        body, content_type, charset = self._open(url, "GET")
        return text_from_bytes(body, content_type or DEFAULT_MIMETYPE, charset)


__all__ = [
    "ContentExtractor",
    "LocalContentExtractor",
    "html_to_text",
    "text_from_bytes",
]
