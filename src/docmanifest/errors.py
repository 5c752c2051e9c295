"""Exceptions raised by the manifest pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ManifestError(Exception):
    """Base class for every fatal manifest error."""


class ConfigurationError(ManifestError):
    """The configuration cannot be used, e.g. the document root is missing."""


class ReadError(ManifestError):
    """A discovered document could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class WriteError(ManifestError):
    """The artifacts could not be persisted."""


class ArtifactMissingError(ManifestError):
    """One or both persisted artifacts are absent."""

    def __init__(self, paths: Sequence[Path]) -> None:
        names = ", ".join(str(path) for path in paths)
        super().__init__(f"Artifact not found: {names}")
        self.paths = list(paths)


class ArtifactInvalidError(ManifestError):
    """An artifact exists but cannot be parsed or contradicts its sibling."""


class DriftError(ManifestError):
    """The documents no longer match the persisted artifacts."""

    def __init__(self, message: str, *, expected: object, actual: object) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class HashMismatchError(DriftError):
    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(
            "Documentation has changed since the manifest was last generated "
            f"(recorded {expected}, current {actual})",
            expected=expected,
            actual=actual,
        )


class CountMismatchError(DriftError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Resource count mismatch (recorded {expected}, current {actual})",
            expected=expected,
            actual=actual,
        )
