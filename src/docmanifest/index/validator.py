"""Staleness check between the document tree and the persisted artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from docmanifest.artifacts import Manifest, VersionRecord
from docmanifest.config import AppConfig
from docmanifest.errors import (
    ArtifactInvalidError,
    ArtifactMissingError,
    CountMismatchError,
    HashMismatchError,
)
from docmanifest.index.digest import digest_set
from docmanifest.index.storage import ArtifactStore
from docmanifest.ingestion.reader import read_documents

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SyncReport:
    current_hash: str
    current_count: int
    record: VersionRecord

    @property
    def recorded_hash(self) -> str:
        return self.record.documentation_hash

    @property
    def recorded_count(self) -> int:
        return self.record.resource_count

    def check(self) -> "SyncReport":
        """Raise the matching drift error, or return ``self`` when in sync.

        Count is compared first so that added or removed documents are
        reported as a changed resource set rather than changed content.
        """
        if self.current_count != self.recorded_count:
            raise CountMismatchError(self.recorded_count, self.current_count)
        if self.current_hash != self.recorded_hash:
            raise HashMismatchError(self.recorded_hash, self.current_hash)
        return self


class SyncValidator:
    """Single-shot comparison of the current documents against the artifacts."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.store = ArtifactStore(config.manifest_path, config.version_path)

    def load_artifacts(self) -> tuple[VersionRecord, Manifest]:
        missing = self.store.missing()
        if missing:
            raise ArtifactMissingError(missing)
        record = self.store.load_version_record()
        manifest = self.store.load_manifest()
        if not manifest.agrees_with(record):
            raise ArtifactInvalidError(
                f"{self.store.version_path} and {self.store.manifest_path} disagree; "
                "they were not written by the same run"
            )
        return record, manifest

    def current_state(self) -> tuple[str, int]:
        documents = read_documents(
            self.config.docs_dir,
            extension=self.config.extension,
            ignore=self.config.ignore,
            workers=self.config.workers,
        )
        return digest_set(documents), len(documents)

    def inspect(self) -> SyncReport:
        """Load the artifacts and measure the current tree without judging drift."""
        record, _ = self.load_artifacts()
        current_hash, current_count = self.current_state()
        LOGGER.debug("Current hash %s, recorded hash %s", current_hash, record.documentation_hash)
        return SyncReport(current_hash=current_hash, current_count=current_count, record=record)

    def validate(self) -> SyncReport:
        return self.inspect().check()
