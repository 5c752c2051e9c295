"""Core docmanifest data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Document:
    """A text document read from the document root.

    ``path`` is relative to the root and always uses ``/`` separators.
    """

    path: str
    raw_bytes: bytes
    size: int
    mtime: float

    @property
    def content(self) -> str:
        return self.raw_bytes.decode("utf-8")

    @property
    def stem_path(self) -> str:
        """Root-relative path without its file extension."""
        suffix = Path(self.path).suffix
        return self.path[: -len(suffix)] if suffix else self.path


@dataclass(slots=True)
class GenerationResult:
    """Outcome of a successful generator run."""

    version: str
    documentation_hash: str
    resource_count: int
    tool_count: int
    total_size: int
    manifest_path: Path
    version_path: Path
