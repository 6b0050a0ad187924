import random

import pytest

from algorithms.brute_force import brute_force_find_all
from algorithms.errors import EmptyPatternError
from algorithms.rabin_karp import (
    lead_weight,
    rabin_karp_count,
    rabin_karp_find_all,
    rehash,
    window_hash,
)

BIG = 10**9 + 7


def test_rk_basic():
    assert rabin_karp_find_all("acgtacgt", "acgt") == [0, 4]
    assert rabin_karp_find_all("aaaa", "aa") == [0, 1, 2]
    assert rabin_karp_count("acgt", "tttt") == 0
    assert rabin_karp_find_all("ac", "acg") == []


def test_rk_last_window():
    assert rabin_karp_find_all("ggggt", "gt") == [3]
    assert rabin_karp_find_all("t", "t") == [0]


def test_rk_empty_pattern_rejected():
    with pytest.raises(EmptyPatternError):
        rabin_karp_find_all("acgt", "")


def test_rk_rejects_tiny_modulus():
    with pytest.raises(ValueError):
        rabin_karp_find_all("acgt", "a", mod=1)


def test_window_hash_is_base_two_polynomial():
    # 97*8 + 99*4 + 103*2 + 116
    assert window_hash("acgt", 0, 4, BIG) == 1494
    assert lead_weight(4, BIG) == 8
    assert lead_weight(1, BIG) == 1
    assert lead_weight(4, 7) == 1


def test_rehash_matches_fresh_hash():
    for mod in (BIG, 7, 2):
        seq = "gattacagattaca"
        m = 5
        w = lead_weight(m, mod)
        h = window_hash(seq, 0, m, mod)
        for i in range(len(seq) - m):
            h = rehash(h, seq[i], seq[i + m], w, mod)
            assert h == window_hash(seq, i + 1, m, mod)
            assert 0 <= h < mod


def test_rk_engineered_collision_is_confirmed():
    # 2*ord('c') + ord('c') == 2*ord('a') + ord('g')
    assert window_hash("cc", 0, 2, BIG) == window_hash("ag", 0, 2, BIG)
    assert rabin_karp_find_all("ccag", "ag") == [2]
    assert rabin_karp_count("cccc", "ag") == 0


def test_rk_matches_brute_force():
    rng = random.Random(1234)
    for _ in range(300):
        t = "".join(rng.choice("acgt") for _ in range(rng.randint(0, 40)))
        p = "".join(rng.choice("acg" if rng.random() < 0.5 else "at") for _ in range(rng.randint(1, 4)))
        expected = brute_force_find_all(t, p)
        for mod in (None, 2, 7, 101):
            assert rabin_karp_find_all(t, p, mod) == expected, (t, p, mod)


def test_rk_uses_configured_modulus(monkeypatch):
    monkeypatch.setenv("DNA_MATCH_HASH_MOD", "3")
    assert rabin_karp_count("acgtacgtacgt", "cgta") == 2
