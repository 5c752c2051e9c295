"""JSON persistence for the manifest and version record."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple, Type, TypeVar

from pydantic import ValidationError

from docmanifest.artifacts import Manifest, VersionRecord, ArtifactModel
from docmanifest.errors import ArtifactInvalidError, ArtifactMissingError, WriteError

LOGGER = logging.getLogger(__name__)

ArtifactT = TypeVar("ArtifactT", bound=ArtifactModel)


class ArtifactStore:
    """Reads and writes the two artifact files as one logical unit."""

    def __init__(self, manifest_path: Path, version_path: Path) -> None:
        self.manifest_path = Path(manifest_path)
        self.version_path = Path(version_path)

    def missing(self) -> List[Path]:
        return [path for path in (self.version_path, self.manifest_path) if not path.is_file()]

    @contextmanager
    def transaction(self) -> Iterator[List[Tuple[Path, str]]]:
        """Collect ``(target, text)`` pairs and commit them all or none.

        Every payload is written to a temporary sibling first. Existing
        targets are moved aside before the swap and restored if any step
        fails.
        """
        pending: List[Tuple[Path, str]] = []
        yield pending

        staged: List[Tuple[Path, Path]] = []
        backups: List[Tuple[Path, Path]] = []
        replaced: List[Path] = []
        try:
            for target, text in pending:
                target.parent.mkdir(parents=True, exist_ok=True)
                temp = target.with_name(f".{target.name}.tmp")
                staged.append((target, temp))
                with temp.open("w", encoding="utf-8", newline="\n") as handle:
                    handle.write(text)
                    handle.flush()
                    os.fsync(handle.fileno())
            for target, _ in staged:
                if target.exists():
                    backup = target.with_name(f".{target.name}.bak")
                    os.replace(target, backup)
                    backups.append((target, backup))
            for target, temp in staged:
                os.replace(temp, target)
                replaced.append(target)
        except OSError as exc:
            LOGGER.error("Artifact write failed, restoring previous state: %s", exc)
            self._rollback(staged, backups, replaced)
            raise WriteError(f"Cannot write artifacts: {exc}") from exc

        for _, backup in backups:
            backup.unlink(missing_ok=True)

    @staticmethod
    def _rollback(
        staged: List[Tuple[Path, Path]],
        backups: List[Tuple[Path, Path]],
        replaced: List[Path],
    ) -> None:
        for target in replaced:
            target.unlink(missing_ok=True)
        for _, temp in staged:
            temp.unlink(missing_ok=True)
        for target, backup in backups:
            try:
                os.replace(backup, target)
            except OSError as exc:  # pragma: no cover - nothing left to do
                LOGGER.error("Could not restore %s from %s: %s", target, backup, exc)

    def commit(self, manifest: Manifest, record: VersionRecord) -> None:
        if not manifest.agrees_with(record):
            raise WriteError("Version record does not match the manifest it summarises")
        with self.transaction() as pending:
            pending.append((self.manifest_path, manifest.to_json()))
            pending.append((self.version_path, record.to_json()))
        LOGGER.info("Wrote %s and %s", self.manifest_path, self.version_path)

    def _load(self, path: Path, model: Type[ArtifactT]) -> ArtifactT:
        if not path.is_file():
            raise ArtifactMissingError([path])
        try:
            return model.model_validate_json(path.read_bytes())
        except ValidationError as exc:
            raise ArtifactInvalidError(f"{path} is not a valid {model.__name__}: {exc}") from exc
        except OSError as exc:
            raise ArtifactInvalidError(f"Cannot read {path}: {exc}") from exc

    def load_manifest(self) -> Manifest:
        return self._load(self.manifest_path, Manifest)

    def load_version_record(self) -> VersionRecord:
        return self._load(self.version_path, VersionRecord)
