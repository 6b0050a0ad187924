# algorithms/modes.py
"""Pick one of the three procedures by name and package its result."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional

from algorithms.brute_force import brute_force_find_all
from algorithms.errors import (
    PatternLongerThanSubjectError,
    TableTooLargeError,
    UnknownModeError,
)
from algorithms.lcs import lcss_distance, lcss_length, lcss_length_rolling
from algorithms.rabin_karp import rabin_karp_find_all

logger = logging.getLogger(__name__)


class Mode(str, enum.Enum):
    BRUTE_FORCE = "bf"
    KARP_RABIN = "kr"
    LCSS = "lcss"

    @property
    def exact(self) -> bool:
        return self is not Mode.LCSS


_ALIASES = {
    "bf": Mode.BRUTE_FORCE,
    "brute-force": Mode.BRUTE_FORCE,
    "bruteforce": Mode.BRUTE_FORCE,
    "kr": Mode.KARP_RABIN,
    "rk": Mode.KARP_RABIN,
    "karp-rabin": Mode.KARP_RABIN,
    "rabin-karp": Mode.KARP_RABIN,
    "rabinkarp": Mode.KARP_RABIN,
    "lcss": Mode.LCSS,
    "lcs": Mode.LCSS,
}


MODE_NAMES = frozenset(_ALIASES)


def parse_mode(name: str) -> Mode:
    key = (name or "").strip().lower().lstrip("-")
    try:
        return _ALIASES[key]
    except KeyError:
        raise UnknownModeError(
            f"unknown algorithm {name!r}; use one of: bf, kr, lcss"
        ) from None


@dataclass(frozen=True)
class MatchResult:
    mode: Mode
    occurrences: Optional[int] = None
    positions: Optional[List[int]] = None
    lcss_length: Optional[int] = None
    distance: Optional[float] = None

    def render(self) -> str:
        if self.mode.exact:
            return f"The pattern was found: {self.occurrences} times"
        return (
            f"The length of the largest common subsequence is: {self.lcss_length}\n"
            f"The distance between the two DNA sequences is: {self.distance:.2f}"
        )


def run(mode, subject: str, other: str, *, strict: bool = False,
        hash_mod: Optional[int] = None, max_cells: Optional[int] = None) -> MatchResult:
    if not isinstance(mode, Mode):
        mode = parse_mode(mode)

    if mode.exact:
        if strict and len(other) > len(subject):
            raise PatternLongerThanSubjectError(len(subject), len(other))
        if mode is Mode.BRUTE_FORCE:
            positions = brute_force_find_all(subject, other)
        else:
            positions = rabin_karp_find_all(subject, other, hash_mod)
        return MatchResult(mode, occurrences=len(positions), positions=positions)

    try:
        length = lcss_length(subject, other, max_cells)
    except TableTooLargeError as e:
        logger.warning("%s; retrying with the rolling-row variant", e)
        length = lcss_length_rolling(subject, other)
    distance = lcss_distance(subject, other, length)
    return MatchResult(mode, lcss_length=length, distance=distance)
