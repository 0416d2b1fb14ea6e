"""
Resource contracts: the file and URL inputs readability metadata is bound to.

Both models expose `resourcehash()`, the identity under which a host stores
extracted metadata:

- files hash their *content* (SHA-1, like content-addressed file stores), so
  renamed copies share one record;
- URLs hash the URL string itself.
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

ResourceType = Literal["file", "url"]

RESOURCE_TYPE_FILE: ResourceType = "file"
RESOURCE_TYPE_URL: ResourceType = "url"

_CHUNK_SIZE = 64 * 1024


class FileResource(BaseModel):
    """A local file (or directory entry) that may carry readable text."""

    path: Path = Field(description="Filesystem path of the resource.")
    is_directory: bool = Field(default=False, description="True for directory entries.")
    filename: str | None = Field(default=None, description="Display name, if known.")

    @classmethod
    def from_path(cls, path: str | Path) -> FileResource:
        """Build a resource from a filesystem path, resolving it first."""
        p = Path(path).expanduser().resolve()
        return cls(path=p, is_directory=p.is_dir(), filename=p.name)

    def read_bytes(self) -> bytes:
        """Return the raw file content."""
        return self.path.read_bytes()

    def resourcehash(self) -> str:
        """SHA-1 of the file content."""
        digest = hashlib.sha1()
        with self.path.open("rb") as fh:
            for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
                digest.update(chunk)
        return digest.hexdigest()


class UrlResource(BaseModel):
    """An external URL whose document may carry readable text."""

    externalurl: str = Field(min_length=1, description="Absolute URL of the resource.")
    name: str | None = Field(default=None, description="Display name, if known.")

    def resourcehash(self) -> str:
        """SHA-1 of the URL string."""
        return hashlib.sha1(self.externalurl.encode("utf-8")).hexdigest()


__all__ = [
    "ResourceType",
    "RESOURCE_TYPE_FILE",
    "RESOURCE_TYPE_URL",
    "FileResource",
    "UrlResource",
]
