"""Tests for content digests."""

from __future__ import annotations

import hashlib

from docmanifest.index.digest import digest_one, digest_set
from docmanifest.models import Document


def _doc(path: str, data: bytes) -> Document:
    return Document(path=path, raw_bytes=data, size=len(data), mtime=0.0)


class TestDigestOne:
    """Test digest_one function."""

    def test_known_value(self) -> None:
        expected = "dffd6021bb2bd5b0af676290809ec3a53191dd81c7f70a4b28688a362182986f"

        assert digest_one(b"Hello, World!") == expected

    def test_empty(self) -> None:
        expected = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

        assert digest_one(b"") == expected

    def test_newlines_are_not_normalised(self) -> None:
        """Should hash exact bytes, so CRLF and LF differ."""
        assert digest_one(b"a\r\nb") != digest_one(b"a\nb")


class TestDigestSet:
    """Test digest_set function."""

    def test_hashes_concatenated_content_in_path_order(self) -> None:
        documents = [_doc("b.md", b"B"), _doc("a.md", b"A")]

        assert digest_set(documents) == hashlib.sha256(b"AB").hexdigest()

    def test_independent_of_input_order(self) -> None:
        """Should give one answer however the documents arrive."""
        documents = [_doc("x/1.md", b"one"), _doc("a.md", b"two"), _doc("m.md", b"three")]

        assert digest_set(documents) == digest_set(list(reversed(documents)))

    def test_not_a_hash_of_digests(self) -> None:
        documents = [_doc("a.md", b"A"), _doc("b.md", b"B")]
        hash_of_hashes = hashlib.sha256(
            (digest_one(b"A") + digest_one(b"B")).encode("ascii")
        ).hexdigest()

        assert digest_set(documents) != hash_of_hashes

    def test_single_byte_change(self) -> None:
        """Should change when any byte of any document changes."""
        before = [_doc("a.md", b"hello"), _doc("b.md", b"world")]
        after = [_doc("a.md", b"hello"), _doc("b.md", b"worle")]

        assert digest_set(before) != digest_set(after)

    def test_added_document(self) -> None:
        before = [_doc("a.md", b"hello")]
        after = [_doc("a.md", b"hello"), _doc("b.md", b"!")]

        assert digest_set(before) != digest_set(after)

    def test_empty_set(self) -> None:
        assert digest_set([]) == digest_one(b"")
