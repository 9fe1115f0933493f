"""Toy XOR cryptanalysis: hex/base64 codecs, fixed XOR and single-byte XOR
breaking by English letter frequency.
"""

from .breaker import (
    Candidate,
    best_candidate,
    break_single_byte_xor,
    detect_single_byte_xor,
    iter_candidates,
    rank_candidates,
    single_byte_xor_cypher,
    xor_single_byte,
)
from .codec import InvalidHex, decode_hex, encode_base64, encode_hex, hex_to_base64
from .fixed_xor import REFERENCE_HEX, fixed_xor, xor_buffers
from .scoring import FREQUENCY_TABLE, MAX_SCORE, score_english

__all__ = [
    "Candidate",
    "FREQUENCY_TABLE",
    "InvalidHex",
    "MAX_SCORE",
    "REFERENCE_HEX",
    "best_candidate",
    "break_single_byte_xor",
    "decode_hex",
    "detect_single_byte_xor",
    "encode_base64",
    "encode_hex",
    "fixed_xor",
    "hex_to_base64",
    "iter_candidates",
    "rank_candidates",
    "score_english",
    "single_byte_xor_cypher",
    "xor_buffers",
    "xor_single_byte",
]
