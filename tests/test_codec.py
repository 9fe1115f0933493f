import pytest

from xorscope.codec import (
    InvalidHex,
    decode_hex,
    encode_base64,
    encode_hex,
    hex_to_base64,
)

ICE_HEX = (
    "49276d206b696c6c696e6720796f757220627261696e206c"
    "696b65206120706f69736f6e6f7573206d757368726f6f6d"
)
ICE_B64 = "SSdtIGtpbGxpbmcgeW91ciBicmFpbiBsaWtlIGEgcG9pc29ub3VzIG11c2hyb29t"


def test_hex_to_base64_known_vector():
    assert hex_to_base64(ICE_HEX) == ICE_B64


def test_hex_to_base64_swallows_bad_input():
    assert hex_to_base64("abc") == ""
    assert hex_to_base64("zz") == ""


def test_decode_hex_accepts_mixed_case():
    assert decode_hex("DeadBEEF") == b"\xde\xad\xbe\xef"
    assert decode_hex("") == b""


@pytest.mark.parametrize("text", ["1", "abc", "1g", "0x00", "de ad", "00\n"])
def test_decode_hex_rejects(text):
    with pytest.raises(InvalidHex):
        decode_hex(text)


def test_invalid_hex_is_value_error():
    with pytest.raises(ValueError) as ei:
        decode_hex("1g")
    assert ei.value.reason == "non-hex character"
    assert ei.value.text == "1g"


def test_encode_hex_lowercase_and_round_trip():
    buf = bytes(range(256))
    h = encode_hex(buf)
    assert h == h.lower()
    assert len(h) == 512
    assert decode_hex(h) == buf
    assert encode_hex(buf) == h


def test_encode_base64_padding():
    assert encode_base64(b"") == ""
    assert encode_base64(b"f") == "Zg=="
    assert encode_base64(b"fo") == "Zm8="
    assert encode_base64(b"foo") == "Zm9v"
