from typing import Iterator, Sequence


def check_batch_size(batch_size: int):
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")


def batch_count(total: int, batch_size: int) -> int:
    check_batch_size(batch_size)
    return -(-total // batch_size)


def iter_batches(records: Sequence, batch_size: int) -> Iterator[tuple[int, list]]:
    """Yield (start_index, batch) slices of at most batch_size records, in order."""
    check_batch_size(batch_size)
    for i in range(0, len(records), batch_size):
        yield i, list(records[i : i + batch_size])
