"""Recover single-byte XOR plaintexts by brute force over all 256 keys.

Each key produces a candidate plaintext which is scored with
``score_english``; the lowest score wins and ties go to the smaller key.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .codec import decode_hex
from .scoring import score_english

logger = logging.getLogger(__name__)

KEYS = range(256)


@dataclass(frozen=True)
class Candidate:
    key: int
    score: float
    plaintext: bytes

    @property
    def text(self) -> str:
        """Plaintext as UTF-8, or "" if it does not decode."""
        try:
            return self.plaintext.decode("utf-8")
        except UnicodeDecodeError:
            return ""


def xor_single_byte(buffer: bytes, key: int) -> bytes:
    return bytes(b ^ key for b in buffer)


def _make_candidate(ciphertext: bytes, key: int) -> Candidate:
    plaintext = xor_single_byte(ciphertext, key)
    return Candidate(key=key, score=score_english(plaintext), plaintext=plaintext)


def iter_candidates(ciphertext: bytes) -> Iterator[Candidate]:
    """Yield one candidate per key, in ascending key order."""
    for key in KEYS:
        yield _make_candidate(ciphertext, key)


def _pick_best(candidates: Iterable[Candidate]) -> Candidate:
    best: Optional[Candidate] = None
    for cand in candidates:
        # strict < keeps the earliest key on ties
        if best is None or cand.score < best.score:
            best = cand
    if best is None:
        raise ValueError("no candidates")
    return best


def best_candidate(ciphertext: bytes, workers: Optional[int] = None) -> Candidate:
    """Return the lowest-scoring candidate over all keys.

    With ``workers`` > 1 the keys are scored on a thread pool. ``map`` hands
    results back in key order, so the tie-break is the same as the
    sequential path.
    """
    if workers is not None and workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            best = _pick_best(
                pool.map(lambda k: _make_candidate(ciphertext, k), KEYS)
            )
    else:
        best = _pick_best(iter_candidates(ciphertext))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("best key 0x%02x score %.4f", best.key, best.score)
    return best


def rank_candidates(ciphertext: bytes, n: int = 3) -> List[Candidate]:
    """Return the ``n`` best candidates ordered by (score, key)."""
    ranked = sorted(iter_candidates(ciphertext), key=lambda c: (c.score, c.key))
    return ranked[: max(0, n)]


def break_single_byte_xor(hex_ciphertext: str, workers: Optional[int] = None) -> str:
    """Decode ``hex_ciphertext`` and return the most English-like plaintext.

    Raises ``InvalidHex`` for malformed input. A winning candidate that is not
    valid UTF-8 comes back as "".
    """
    ciphertext = decode_hex(hex_ciphertext)
    return best_candidate(ciphertext, workers=workers).text


single_byte_xor_cypher = break_single_byte_xor


def detect_single_byte_xor(hex_lines: Iterable[str]) -> Tuple[int, Candidate]:
    """Find which of several hex ciphertexts was single-byte XOR encrypted.

    Every non-blank line is broken independently; the line whose best
    candidate scores lowest wins (earliest line on ties). Returns the
    zero-based line index together with that candidate.
    """
    winner: Optional[Tuple[int, Candidate]] = None
    for idx, line in enumerate(hex_lines):
        line = line.strip()
        if not line:
            continue
        cand = best_candidate(decode_hex(line))
        if winner is None or cand.score < winner[1].score:
            winner = (idx, cand)
    if winner is None:
        raise ValueError("no ciphertext lines given")
    logger.debug("detected line %d key 0x%02x", winner[0], winner[1].key)
    return winner
