"""Fixed XOR: combine two equal-role buffers byte by byte."""

from __future__ import annotations

import logging

from .codec import decode_hex, encode_hex

logger = logging.getLogger(__name__)

# "hit the bull's eye"
REFERENCE_HEX = "686974207468652062756c6c277320657965"


def xor_buffers(a: bytes, b: bytes) -> bytes:
    """XOR ``a`` with ``b``; the result has the length of the shorter one."""
    if len(a) != len(b):
        logger.debug(
            "xor_buffers: truncating %d/%d bytes to the shorter", len(a), len(b)
        )
    return bytes(x ^ y for x, y in zip(a, b))


def fixed_xor(hex_a: str, hex_b: str = REFERENCE_HEX) -> str:
    """XOR two hex strings and return the result as hex.

    The second operand defaults to the reference phrase. Raises
    ``InvalidHex`` if either operand does not decode.
    """
    rhs = decode_hex(hex_b)
    lhs = decode_hex(hex_a)
    return encode_hex(xor_buffers(lhs, rhs))
