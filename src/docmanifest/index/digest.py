"""Content digests for single documents and whole document sets.

The aggregate digest is SHA-256 over the raw bytes of every document,
concatenated in path order. The generator and the validator both call
:func:`digest_set`, so there is exactly one canonical rule.
"""

from __future__ import annotations

import hashlib
from typing import Iterable

from docmanifest.models import Document


def digest_one(data: bytes) -> str:
    """Hex SHA-256 of exactly ``data``."""
    return hashlib.sha256(data).hexdigest()


def digest_set(documents: Iterable[Document]) -> str:
    """Hex SHA-256 over the concatenated bytes of ``documents`` sorted by path."""
    sha = hashlib.sha256()
    for document in sorted(documents, key=lambda item: item.path):
        sha.update(document.raw_bytes)
    return sha.hexdigest()
