import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from tqdm import tqdm

from .batching import batch_count, check_batch_size, iter_batches
from .book_map import BOOK_MAP, resolve_book_name
from .checkpoint import CheckpointStore, is_processed, mark_processed
from .config import BATCH_SIZE, MAX_RETRIES, RETRY_BASE_DELAY
from .console import log
from .embeddings import process_batch_embeddings
from .flatten import flatten_book
from .models import Book
from .retry import check_max_retries, retry_call
from .scrollmapper import fetch_scrollmapper_bible


class BookStatus(Enum):
    UNRESOLVED = "unresolved"
    ALREADY_DONE = "already_done"
    PARTIAL_FAILURE = "partial_failure"
    COMPLETE = "complete"


@dataclass
class BookResult:
    name: str | None
    book_id: str | None
    status: BookStatus
    verses: int = 0
    batches_submitted: int = 0
    failed_offset: int | None = None


@dataclass
class IngestionReport:
    version: str
    results: list[BookResult] = field(default_factory=list)

    def _with(self, status: BookStatus) -> list[BookResult]:
        return [r for r in self.results if r.status is status]

    @property
    def completed(self):
        return self._with(BookStatus.COMPLETE)

    @property
    def skipped(self):
        return self._with(BookStatus.ALREADY_DONE)

    @property
    def unresolved(self):
        return self._with(BookStatus.UNRESOLVED)

    @property
    def failed(self):
        return self._with(BookStatus.PARTIAL_FAILURE)

    @property
    def ok(self) -> bool:
        return not self.failed


# ===============================
# 📘 ONE BOOK
# ===============================
def process_book(
    book: Book,
    version: str,
    processed: list[str],
    *,
    submit: Callable = process_batch_embeddings,
    book_map=BOOK_MAP,
    batch_size: int = BATCH_SIZE,
    max_retries: int = MAX_RETRIES,
    base_delay: float = RETRY_BASE_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> BookResult:
    """
    Embed every verse of one book, batch by batch, in source order.

    The first batch that exhausts its retries stops the book. The caller
    owns the processed list; it is only read here.
    """
    if not book.name or not book.name.strip():
        log("⏭️ Skipping a book with no name.")
        return BookResult(book.name, None, BookStatus.UNRESOLVED)

    book_id = resolve_book_name(book.name, book_map)
    if book_id is None:
        log(f"⚠️ Unknown book: {book.name}")
        return BookResult(book.name, None, BookStatus.UNRESOLVED)

    if is_processed(book_id, processed):
        log(f"⏭️ Skipping {book_id} as it has already been processed.")
        return BookResult(book.name, book_id, BookStatus.ALREADY_DONE)

    records = flatten_book(book.chapters, book_id, version)
    result = BookResult(book.name, book_id, BookStatus.COMPLETE, verses=len(records))
    log(f"📘 Processing {book_id} ({len(records)} verses) for {version}")

    with tqdm(total=batch_count(len(records), batch_size), desc=f"Embedding {book_id}", unit="batch", leave=False) as pbar:
        for start, batch in iter_batches(records, batch_size):
            result.batches_submitted += 1
            succeeded = retry_call(
                lambda: submit(batch),
                max_retries=max_retries,
                base_delay=base_delay,
                sleep=sleep,
                label=f"{book_id} batch @{start}",
            )
            if not succeeded:
                log(
                    f"❌ Failed to process batch starting at index {start} for {book_id} "
                    f"for {version} after {max_retries} retries."
                )
                result.status = BookStatus.PARTIAL_FAILURE
                result.failed_offset = start
                break
            pbar.update(1)

    return result


# ===============================
# 🚀 WHOLE CORPUS
# ===============================
def run_ingestion(
    version: str,
    *,
    fetch: Callable = fetch_scrollmapper_bible,
    submit: Callable = process_batch_embeddings,
    store: CheckpointStore | None = None,
    book_map=BOOK_MAP,
    batch_size: int = BATCH_SIZE,
    max_retries: int = MAX_RETRIES,
    base_delay: float = RETRY_BASE_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> IngestionReport:
    """
    Fetch a translation and embed it book by book, resuming from the checkpoint.

    A book is added to the checkpoint, and the checkpoint saved, as soon as
    all its batches succeed. Errors raised by fetch abort the run.
    """
    check_batch_size(batch_size)
    check_max_retries(max_retries)

    report = IngestionReport(version)
    bible = fetch(version)
    if bible is None or not bible.books:
        log(f"⚠️ {version}: Nothing to process.")
        return report

    store = store or CheckpointStore(bible.version)
    processed = store.load()
    log(f"📂 {len(processed)} book(s) already processed for {bible.version} ({store.path})")

    for book in tqdm(bible.books, desc=f"Processing {bible.version}", unit="book"):
        result = process_book(
            book,
            bible.version,
            processed,
            submit=submit,
            book_map=book_map,
            batch_size=batch_size,
            max_retries=max_retries,
            base_delay=base_delay,
            sleep=sleep,
        )
        report.results.append(result)

        if result.status is BookStatus.COMPLETE:
            mark_processed(result.book_id, processed)
            store.save(processed)
            log(f"✅ Completed processing {result.book_id} ({result.verses} verses) for {bible.version}.")
        elif result.status is BookStatus.PARTIAL_FAILURE:
            log(f"❌ Partial failure in {result.book_id} for {bible.version}; not marking as processed.")

    log(
        f"\n🏁 {report.version}: {len(report.completed)} completed "
        f"({sum(r.verses for r in report.completed)} verses), {len(report.skipped)} already done, "
        f"{len(report.unresolved)} unresolved, {len(report.failed)} failed."
    )
    for r in report.failed:
        log(f"   ❌ {r.book_id}: needs manual retry from batch index {r.failed_offset}")
    return report
