import sys
from pathlib import Path

import pytest

# Ensure the project root is importable without an install
root_path = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root_path))

from bible_processing.models import Book, Chapter, CorpusDocument, VerseEntry


def build_book(name, verse_count, verses_per_chapter=50):
    """Build a book with verse_count verses split into chapters of verses_per_chapter."""
    chapters = []
    remaining, number = verse_count, 1
    while remaining > 0:
        n = min(verses_per_chapter, remaining)
        verses = tuple(VerseEntry(v, f" {name} {number}:{v} ") for v in range(1, n + 1))
        chapters.append(Chapter(number, verses))
        remaining -= n
        number += 1
    return Book(name, tuple(chapters))


class FakeSink:
    """
    Stand-in for the embedding service.

    should_fail(batch, attempt) decides whether a call raises; attempt counts
    from 1 per distinct batch (keyed on the id of its first record).
    """

    def __init__(self, should_fail=None):
        self.should_fail = should_fail or (lambda batch, attempt: False)
        self.calls = []
        self.attempts = {}

    def __call__(self, batch):
        key = batch[0].id
        self.attempts[key] = self.attempts.get(key, 0) + 1
        self.calls.append(list(batch))
        if self.should_fail(batch, self.attempts[key]):
            raise RuntimeError("embedding service unavailable")

    @property
    def distinct_batches(self):
        return list(self.attempts)


@pytest.fixture()
def make_book():
    return build_book


@pytest.fixture()
def make_corpus():
    def build(*books, version="KJV"):
        return CorpusDocument(name=f"{version}: test", version=version, books=tuple(books))
    return build


@pytest.fixture()
def sink():
    return FakeSink()


@pytest.fixture()
def sink_factory():
    return FakeSink


@pytest.fixture()
def sleeps():
    return []


@pytest.fixture()
def fake_sleep(sleeps):
    return sleeps.append
