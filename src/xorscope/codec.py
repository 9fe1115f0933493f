"""Byte-buffer codecs: hex in and out, base64 out.

All helpers are pure functions over ``bytes``. ``InvalidHex`` is the only
error raised here; ``hex_to_base64`` is the one forgiving boundary and maps
it to an empty string.
"""

from __future__ import annotations

import base64
import logging
import string

logger = logging.getLogger(__name__)

_HEXDIGITS = frozenset(string.hexdigits)


class InvalidHex(ValueError):
    """Raised when text is not an even-length run of hex digits."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"invalid hex ({reason}): {text[:32]!r}")


def decode_hex(text: str) -> bytes:
    """Parse hex digit pairs into bytes (upper or lower case)."""
    if len(text) % 2:
        raise InvalidHex(text, "odd length")
    # bytes.fromhex tolerates whitespace, so validate digits first
    if not _HEXDIGITS.issuperset(text):
        raise InvalidHex(text, "non-hex character")
    return bytes.fromhex(text)


def encode_hex(buffer: bytes) -> str:
    return buffer.hex()


def encode_base64(buffer: bytes) -> str:
    return base64.b64encode(buffer).decode("ascii")


def hex_to_base64(text: str) -> str:
    """Re-encode hex as padded base64.

    Malformed input yields ``""`` instead of raising.
    """
    try:
        return encode_base64(decode_hex(text))
    except InvalidHex as e:
        logger.debug("hex_to_base64: %s", e)
        return ""


__all__ = [
    "InvalidHex",
    "decode_hex",
    "encode_hex",
    "encode_base64",
    "hex_to_base64",
]
