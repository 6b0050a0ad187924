import pytest

from algorithms.errors import EmptySequenceError, TableTooLargeError
from algorithms.lcs import (
    LcssTable,
    lcss_distance,
    lcss_length,
    lcss_length_rolling,
    lcss_table,
)


def test_lcss_length():
    assert lcss_length("gattaca", "tagatca") == 5
    assert lcss_length("acgt", "acgt") == 4
    assert lcss_length("aaaa", "tttt") == 0
    assert lcss_length("acgt", "at") == 2


def test_lcss_empty():
    assert lcss_length("", "acgt") == 0
    assert lcss_length("acgt", "") == 0
    assert lcss_length_rolling("", "") == 0


def test_lcss_symmetric_and_bounded():
    pairs = [("gattaca", "tagatca"), ("acgtacgt", "tgca"), ("cccg", "gcgc")]
    for a, b in pairs:
        n = lcss_length(a, b)
        assert n == lcss_length(b, a)
        assert n == lcss_length_rolling(a, b) == lcss_length_rolling(b, a)
        assert n <= min(len(a), len(b))


def test_lcss_subsequence_reaches_min_length():
    assert lcss_length("aggtcat", "gtt") == 3
    assert lcss_distance("aggtcat", "gtt") == 0.0


def test_distance():
    assert round(lcss_distance("gattaca", "tagatca"), 2) == 0.29
    assert lcss_distance("acgt", "acgt") == 0.0
    assert lcss_distance("aaa", "tt") == 1.0
    assert lcss_distance("acgt", "ac", length=1) == 0.5


def test_distance_empty_fails():
    with pytest.raises(EmptySequenceError):
        lcss_distance("", "acgt")
    with pytest.raises(ZeroDivisionError):
        lcss_distance("acgt", "")


def test_table_boundaries_and_cells():
    table = lcss_table("ac", "ca")
    assert (table.rows, table.cols) == (3, 3)
    assert table.row(0) == [0, 0, 0]
    assert [table[i, 0] for i in range(3)] == [0, 0, 0]
    assert table.row(1) == [0, 0, 1]
    assert table.row(2) == [0, 1, 1]


def test_table_bounds_checked():
    table = LcssTable(2, 3, max_cells=100)
    table[1, 2] = 7
    assert table[1, 2] == 7
    with pytest.raises(IndexError):
        table[2, 0]
    with pytest.raises(IndexError):
        table[0, 3]


def test_table_limit():
    with pytest.raises(TableTooLargeError) as exc:
        lcss_length("acgt", "acgt", max_cells=24)
    assert isinstance(exc.value, MemoryError)
    assert lcss_length("acgt", "acgt", max_cells=25) == 4


def test_table_limit_from_env(monkeypatch):
    monkeypatch.setenv("DNA_MATCH_MAX_TABLE_CELLS", "4")
    with pytest.raises(TableTooLargeError):
        lcss_length("acg", "acg")


def test_allocation_failure_becomes_table_too_large(monkeypatch):
    def no_memory(*args):
        raise MemoryError

    monkeypatch.setattr("algorithms.lcs.array", no_memory)
    with pytest.raises(TableTooLargeError):
        lcss_length("gattaca", "tagatca", max_cells=1000)
    assert lcss_length_rolling("gattaca", "tagatca") == 5
