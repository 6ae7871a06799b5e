from .models import Chapter, VerseRecord


def flatten_book(chapters: list[Chapter], book_id: str, version: str) -> list[VerseRecord]:
    """Walk a book's chapter/verse tree into verse records, in source order."""
    records = []
    for ch in chapters:
        for v in ch.verses:
            text = v.text.strip() if v.text is not None else None
            records.append(VerseRecord.build(book_id, ch.chapter, v.verse, version, text))
    return records
