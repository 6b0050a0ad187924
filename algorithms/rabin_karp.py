# algorithms/rabin_karp.py
"""
Karp-Rabin exact matching with a base-2 rolling hash.

A window hashes to sum(code(s[k]) * 2**(m-1-k)) mod `mod`. Equal hashes only
nominate a candidate; every candidate is confirmed symbol by symbol, so the
result is exact for any modulus >= 2.
"""

import logging
from typing import Optional

from algorithms.errors import EmptyPatternError
from config import load_settings

logger = logging.getLogger(__name__)


def code(symbol: str) -> int:
    return ord(symbol)


def lead_weight(m: int, mod: int) -> int:
    """2**(m-1) mod `mod`, by doubling."""
    w = 1 % mod
    for _ in range(m - 1):
        w = (w << 1) % mod
    return w


def window_hash(seq: str, start: int, m: int, mod: int) -> int:
    h = 0
    for k in range(start, start + m):
        h = ((h << 1) + code(seq[k])) % mod
    return h


def rehash(h: int, outgoing: str, incoming: str, weight: int, mod: int) -> int:
    """Slide a window one symbol to the right in O(1)."""
    return (((h - code(outgoing) * weight) << 1) + code(incoming)) % mod


def _resolve_mod(mod: Optional[int]) -> int:
    if mod is None:
        return load_settings().hash_mod
    if mod < 2:
        raise ValueError(f"hash modulus must be >= 2, got {mod}")
    return mod


def _confirm(t: str, p: str, i: int) -> bool:
    j = 0
    while j < len(p) and t[i + j] == p[j]:
        j += 1
    return j == len(p)


def rabin_karp_find_all(t: str, p: str, mod: Optional[int] = None):
    n, m = len(t), len(p)
    if m == 0:
        raise EmptyPatternError("pattern must contain at least one symbol")
    if m > n:
        return []
    mod = _resolve_mod(mod)
    weight = lead_weight(m, mod)
    hp = window_hash(p, 0, m, mod)
    h = window_hash(t, 0, m, mod)
    res, collisions = [], 0
    for i in range(n - m + 1):
        if h == hp:
            if _confirm(t, p, i):
                res.append(i)
            else:
                collisions += 1
        if i < n - m:
            h = rehash(h, t[i], t[i + m], weight, mod)
    logger.debug(
        "karp-rabin: subject=%d pattern=%d mod=%d matches=%d collisions=%d",
        n, m, mod, len(res), collisions,
    )
    return res


def rabin_karp_count(t: str, p: str, mod: Optional[int] = None) -> int:
    return len(rabin_karp_find_all(t, p, mod))
