"""English-likeness scoring for candidate plaintexts.

A buffer is reduced to a histogram over a few normalized categories
(lowercase letters, space, and a single ``.`` bucket for every other
printable character) and compared against ``FREQUENCY_TABLE``. The score is
the Euclidean distance between the observed counts and the expected counts
scaled to the buffer length, so lower means more English-like.

Buffers holding ASCII control characters or bytes >= 0x80 are rejected
outright with ``MAX_SCORE``.
"""

from __future__ import annotations

import math
from collections import Counter
from types import MappingProxyType
from typing import Mapping, Optional

SPACE = ord(" ")
OTHER = ord(".")

MAX_SCORE = math.inf

# Percentages in representative English text. Rare letters are kept even at
# tiny values; the table does not sum to exactly 100.
FREQUENCY_TABLE: Mapping[int, float] = MappingProxyType(
    {
        SPACE: 12.17,
        OTHER: 6.57,
        ord("a"): 6.09,
        ord("b"): 1.05,
        ord("c"): 2.84,
        ord("d"): 2.92,
        ord("e"): 11.36,
        ord("f"): 1.79,
        ord("g"): 1.38,
        ord("h"): 3.41,
        ord("i"): 5.44,
        ord("j"): 0.24,
        ord("k"): 0.41,
        ord("l"): 2.92,
        ord("m"): 2.76,
        ord("n"): 5.44,
        ord("o"): 6.00,
        ord("p"): 1.95,
        ord("q"): 0.24,
        ord("r"): 4.95,
        ord("s"): 5.68,
        ord("t"): 8.03,
        ord("u"): 2.43,
        ord("v"): 0.97,
        ord("w"): 1.38,
        ord("x"): 0.24,
        ord("y"): 1.30,
        ord("z"): 0.03,
    }
)

_WHITESPACE = frozenset(b" \t\n\x0c\r")


def _is_control(b: int) -> bool:
    return b < 0x20 or b == 0x7F


def category(b: int) -> Optional[int]:
    """Map a byte to its histogram category, or None if it is rejected.

    Control bytes are checked before whitespace, so tab and newline are
    rejected like any other control character.
    """
    if b >= 0x80 or _is_control(b):
        return None
    if 0x41 <= b <= 0x5A:
        return b + 0x20
    if 0x61 <= b <= 0x7A:
        return b
    if b in _WHITESPACE:
        return SPACE
    return OTHER


def histogram(buffer: bytes) -> Optional[Counter]:
    """Count categories in ``buffer``; None if any byte is rejected."""
    counts: Counter = Counter()
    for b in buffer:
        c = category(b)
        if c is None:
            return None
        counts[c] += 1
    return counts


def score_english(
    buffer: bytes, table: Mapping[int, float] = FREQUENCY_TABLE
) -> float:
    """Return the distance of ``buffer`` from English letter statistics.

    An empty buffer scores 0.0 against any table, so it cannot be told apart
    from anything else.
    """
    counts = histogram(buffer)
    if counts is None:
        return MAX_SCORE
    n = len(buffer)
    total = 0.0
    for c, pct in table.items():
        expected = pct / 100.0 * n
        total += (expected - counts.get(c, 0)) ** 2
    return math.sqrt(total)


__all__ = [
    "FREQUENCY_TABLE",
    "MAX_SCORE",
    "category",
    "histogram",
    "score_english",
]
