from dataclasses import dataclass


# ===============================
# 📖 SOURCE DOCUMENT TREE
# ===============================
@dataclass(frozen=True)
class VerseEntry:
    verse: int
    text: str | None = None


@dataclass(frozen=True)
class Chapter:
    chapter: int
    verses: tuple[VerseEntry, ...] = ()


@dataclass(frozen=True)
class Book:
    name: str | None
    chapters: tuple[Chapter, ...] = ()


@dataclass(frozen=True)
class CorpusDocument:
    name: str
    version: str
    books: tuple[Book, ...] = ()


# ===============================
# 🧩 FLAT UNIT OF WORK
# ===============================
@dataclass(frozen=True)
class VerseRecord:
    """One verse ready for embedding, keyed by its coordinates."""

    id: str
    verse_id: str
    version: str
    collection: str
    book: str
    chapter: int
    verse: int
    text: str | None

    @classmethod
    def build(cls, book_id: str, chapter: int, verse: int, version: str, text: str | None):
        verse_id = f"{book_id}:{chapter}:{verse}"
        return cls(
            id=f"{verse_id}:{version}",
            verse_id=verse_id,
            version=version,
            collection=book_id,
            book=book_id,
            chapter=chapter,
            verse=verse,
            text=text,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "verseId": self.verse_id,
            "version": self.version,
            "collection": self.collection,
            "book": self.book,
            "chapter": self.chapter,
            "verse": self.verse,
            "text": self.text,
        }
