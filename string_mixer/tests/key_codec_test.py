import pytest

from string_mixer.core.exceptions import KeyFormatError
from string_mixer.services.key_codec import (
    build_key,
    decode_lengths,
    encode_lengths,
    header_length,
    parse_key,
)


def test_encode_lengths_two_digits_each():
    assert encode_lengths([7, 16, 0, 1295]) == "070g00zz"


def test_encode_lengths_overflow_spills_extra_digit():
    """Legacy keys spill the extra digit into the next field."""
    assert encode_lengths([1296]) == "100"
    assert encode_lengths([1296, 1]) == "10001"


def test_decode_lengths():
    assert decode_lengths("070g00zz") == [7, 16, 0, 1295]
    assert decode_lengths("") == []


def test_decode_lengths_rejects_bad_digits():
    with pytest.raises(KeyFormatError):
        decode_lengths("0!")
    with pytest.raises(KeyFormatError):
        decode_lengths("070")


def test_build_key_two_values_fills_width_exactly():
    assert build_key([7, 16], "ABCDEFGHIJ") == "02070gABCDEFGHIJ"


def test_build_key_single_value_is_not_padded():
    key = build_key([5], "ABCDEFGHIJ")
    assert key == "0105ABCDEFGHIJ"
    assert len(key) == 14


def test_build_key_three_values_loses_salt():
    key = build_key([10, 11, 12], "ABCDEFGHIJ")
    assert key == "030a0b0cABCDEFGH"
    assert len(key) == 16


def test_build_key_eight_values_loses_a_length():
    key = build_key([1] * 8, "ABCDEFGHIJ")
    assert key == "08" + "01" * 7
    assert len(key) == 16


def test_build_key_unbounded():
    key = build_key([1] * 8, "ABCDEFGHIJ", key_width=None)
    assert key == "08" + "01" * 8 + "ABCDEFGHIJ"


def test_header_length():
    assert header_length(1) == 4
    assert header_length(7) == 16
    assert header_length(8) == 18


def test_parse_key():
    metadata = parse_key("02070gABCDEFGHIJ")
    assert metadata.count == 2
    assert metadata.lengths == [7, 16]
    assert metadata.salt == "ABCDEFGHIJ"
    assert metadata.total_length == 23


def test_parse_key_accepts_uppercase_digits():
    assert parse_key("02070GABCDEFGHIJ").lengths == [7, 16]


def test_parse_key_without_salt():
    metadata = parse_key("0105")
    assert metadata.lengths == [5]
    assert metadata.salt == ""


@pytest.mark.parametrize("key", [
    "",
    "0",
    "!!070gABCDEFGHIJ",
    "02070",
    "0207!gABCDEFGHIJ",
    "08" + "01" * 7,
])
def test_parse_key_rejects_malformed(key):
    with pytest.raises(KeyFormatError):
        parse_key(key)
