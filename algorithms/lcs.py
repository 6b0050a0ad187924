# algorithms/lcs.py
"""
Longest common subsequence length and the distance derived from it.

`lcss_length` fills the full (lenA+1) x (lenB+1) table; `lcss_length_rolling`
keeps one row over the shorter sequence and gives the same number.
"""

import logging
from array import array
from typing import Optional

from algorithms.errors import EmptySequenceError, TableTooLargeError
from config import load_settings

logger = logging.getLogger(__name__)


class LcssTable:
    """Row-major table of LCSS prefix lengths over one contiguous buffer."""

    def __init__(self, rows: int, cols: int, max_cells: Optional[int] = None):
        if rows < 1 or cols < 1:
            raise ValueError(f"table needs at least one row and column, got {rows}x{cols}")
        if max_cells is None:
            max_cells = load_settings().max_table_cells
        size = rows * cols
        if size > max_cells:
            raise TableTooLargeError(rows, cols, max_cells)
        try:
            self.cells = array("l", [0]) * size
        except MemoryError:
            raise TableTooLargeError(rows, cols, max_cells) from None
        self.rows = rows
        self.cols = cols

    def index(self, i: int, j: int) -> int:
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"cell ({i}, {j}) outside {self.rows}x{self.cols} table")
        return i * self.cols + j

    def __getitem__(self, ij):
        return self.cells[self.index(*ij)]

    def __setitem__(self, ij, value: int):
        self.cells[self.index(*ij)] = value

    def row(self, i: int):
        start = self.index(i, 0)
        return self.cells[start:start + self.cols].tolist()


def lcss_table(a: str, b: str, max_cells: Optional[int] = None) -> LcssTable:
    n, m = len(a), len(b)
    table = LcssTable(n + 1, m + 1, max_cells)
    cells, stride = table.cells, table.cols
    for i in range(1, n + 1):
        up = (i - 1) * stride
        cur = i * stride
        ai = a[i - 1]
        for j in range(1, m + 1):
            if ai == b[j - 1]:
                cells[cur + j] = cells[up + j - 1] + 1
            else:
                left, above = cells[cur + j - 1], cells[up + j]
                cells[cur + j] = left if left > above else above
    return table


def lcss_length(a: str, b: str, max_cells: Optional[int] = None) -> int:
    if not a or not b:
        return 0
    logger.debug("lcss table: %d x %d", len(a) + 1, len(b) + 1)
    table = lcss_table(a, b, max_cells)
    return table[len(a), len(b)]


def lcss_length_rolling(a: str, b: str) -> int:
    if len(b) > len(a):
        a, b = b, a
    n, m = len(a), len(b)
    if m == 0:
        return 0
    logger.debug("lcss rolling row: %d x %d", n, m)
    dp = [0] * (m + 1)
    for i in range(1, n + 1):
        prev = 0
        for j in range(1, m + 1):
            cur = dp[j]
            if a[i - 1] == b[j - 1]:
                dp[j] = prev + 1
            else:
                dp[j] = max(dp[j], dp[j - 1])
            prev = cur
    return dp[m]


def lcss_distance(a: str, b: str, length: Optional[int] = None) -> float:
    """1 - lcss / min(lenA, lenB); raises EmptySequenceError when a side is empty."""
    shortest = min(len(a), len(b))
    if shortest == 0:
        raise EmptySequenceError("distance is undefined when a sequence is empty")
    if length is None:
        length = lcss_length(a, b)
    return 1 - length / shortest
