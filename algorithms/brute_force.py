import logging

from algorithms.errors import EmptyPatternError

logger = logging.getLogger(__name__)


def brute_force_find_all(t: str, p: str):
    """Start index of every (possibly overlapping) occurrence of p in t."""
    n, m = len(t), len(p)
    if m == 0:
        raise EmptyPatternError("pattern must contain at least one symbol")
    logger.debug("brute force: subject=%d pattern=%d", n, m)
    res = []
    for i in range(n - m + 1):
        j = 0
        while j < m and t[i + j] == p[j]:
            j += 1
        if j == m:
            res.append(i)
    return res


def brute_force_count(t: str, p: str) -> int:
    return len(brute_force_find_all(t, p))
