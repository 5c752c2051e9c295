"""Discover and read documents under a document root."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterator, List, Sequence

from docmanifest.errors import ConfigurationError, ReadError
from docmanifest.models import Document

LOGGER = logging.getLogger(__name__)


def _is_ignored(relative: Path, ignore: Sequence[str]) -> bool:
    posix = relative.as_posix()
    for pattern in ignore:
        if fnmatch(posix, pattern):
            return True
        if any(fnmatch(part, pattern) for part in relative.parts[:-1]):
            return True
    return False


def ensure_root(root: Path) -> Path:
    if not root.exists():
        raise ConfigurationError(f"Document root does not exist: {root}")
    if not root.is_dir():
        raise ConfigurationError(f"Document root is not a directory: {root}")
    return root


def iter_document_paths(
    root: Path, *, extension: str = ".md", ignore: Sequence[str] = ()
) -> Iterator[Path]:
    """Yield document paths under ``root`` sorted by their root-relative path.

    The extension match is case-sensitive and dot-entries are skipped.
    Anything with the extension that is not a directory is yielded, so
    unreadable entries such as dangling links fail in :func:`read_document`.
    """
    ensure_root(root)
    candidates = []
    for path in root.rglob("*"):
        if path.suffix != extension or path.is_dir():
            continue
        relative = path.relative_to(root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if _is_ignored(relative, ignore):
            LOGGER.debug("Ignoring %s", relative)
            continue
        candidates.append((relative.as_posix(), path))
    for _, path in sorted(candidates):
        yield path


def read_document(root: Path, path: Path) -> Document:
    """Read one document, failing loudly on any I/O or decoding problem."""
    relative = path.relative_to(root).as_posix()
    try:
        raw = path.read_bytes()
        stat = path.stat()
    except OSError as exc:
        raise ReadError(path, exc.strerror or str(exc)) from exc
    try:
        raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ReadError(path, f"not valid UTF-8 ({exc.reason})") from exc
    LOGGER.debug("Read %s (%d bytes)", relative, len(raw))
    return Document(path=relative, raw_bytes=raw, size=len(raw), mtime=stat.st_mtime)


def read_documents(
    root: Path,
    *,
    extension: str = ".md",
    ignore: Sequence[str] = (),
    workers: int = 1,
) -> List[Document]:
    """Read every document under ``root``.

    Reads may run on a thread pool; the result is always sorted by path so
    callers never observe completion order.
    """
    paths = list(iter_document_paths(root, extension=extension, ignore=ignore))
    if workers > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            documents = list(pool.map(lambda path: read_document(root, path), paths))
    else:
        documents = [read_document(root, path) for path in paths]
    documents.sort(key=lambda document: document.path)
    LOGGER.info("Read %d documents from %s", len(documents), root)
    return documents
