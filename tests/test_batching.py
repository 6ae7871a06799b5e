import pytest

from bible_processing.batching import batch_count, iter_batches


@pytest.mark.parametrize("total, size, expected", [
    (250, 100, [100, 100, 50]),
    (200, 100, [100, 100]),
    (7, 1, [1] * 7),
    (3, 10, [3]),
    (0, 100, []),
])
def test_batch_sizes(total, size, expected):
    records = list(range(total))
    batches = list(iter_batches(records, size))
    assert [len(b) for _, b in batches] == expected
    assert len(batches) == batch_count(total, size)


def test_batches_reconstruct_source_order():
    records = list(range(23))
    batches = list(iter_batches(records, 5))
    assert [start for start, _ in batches] == [0, 5, 10, 15, 20]
    assert [r for _, b in batches for r in b] == records


@pytest.mark.parametrize("size", [0, -3])
def test_rejects_non_positive_size(size):
    with pytest.raises(ValueError):
        list(iter_batches([1, 2], size))


@pytest.mark.parametrize("size", [0, -1])
def test_batch_count_rejects_non_positive_size(size):
    with pytest.raises(ValueError):
        batch_count(5, size)
