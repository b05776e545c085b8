"""Key layout: ``[count:2][length:2 per value][salt]``, cut to the key width.

All metadata digits are base36. The salt only feeds the seed hash; nothing
is read back from it.
"""
import logging
from typing import List, Optional, Sequence

from string_mixer.core.exceptions import KeyFormatError
from string_mixer.schemas.token import KeyMetadata
from string_mixer.utils.encoding import decode_base36, encode_base36

logger = logging.getLogger(__name__)

KEY_WIDTH = 16
SALT_LENGTH = 10
DIGITS_PER_FIELD = 2
# largest value a two-digit base36 field holds (36**2 - 1)
MAX_FIELD_VALUE = 1295


def header_length(count: int) -> int:
    return DIGITS_PER_FIELD + DIGITS_PER_FIELD * count


def encode_lengths(lengths: Sequence[int]) -> str:
    # A length above MAX_FIELD_VALUE yields three or more digits and shifts
    # every field after it. The reader can then parse lengths that still add
    # up to the value length and split it wrongly without any error.
    return ''.join(encode_base36(length, DIGITS_PER_FIELD) for length in lengths)


def decode_lengths(segment: str) -> List[int]:
    if len(segment) % DIGITS_PER_FIELD:
        raise KeyFormatError(f"lengths segment has odd size {len(segment)}")
    lengths = []
    for i in range(0, len(segment), DIGITS_PER_FIELD):
        try:
            lengths.append(decode_base36(segment[i:i + DIGITS_PER_FIELD]))
        except ValueError as e:
            raise KeyFormatError(f"bad length field at offset {i + 2}: {e}") from e
    return lengths


def build_key(lengths: Sequence[int], salt: str, key_width: Optional[int] = KEY_WIDTH) -> str:
    """Assemble a key, cutting it to key_width when one is set.

    With the default width, three or more values lose salt characters and
    more than seven values lose length fields. No padding is ever added.
    """
    key = encode_base36(len(lengths), DIGITS_PER_FIELD) + encode_lengths(lengths) + salt
    if key_width is not None and len(key) > key_width:
        logger.debug("Key cut from %d to %d characters", len(key), key_width)
        key = key[:key_width]
    return key


def parse_key(key: str) -> KeyMetadata:
    if len(key) < DIGITS_PER_FIELD:
        raise KeyFormatError("key is shorter than its count field")

    try:
        count = decode_base36(key[:DIGITS_PER_FIELD])
    except ValueError as e:
        raise KeyFormatError(f"bad count field: {e}") from e

    end = header_length(count)
    segment = key[DIGITS_PER_FIELD:end]
    if len(segment) < DIGITS_PER_FIELD * count:
        raise KeyFormatError(
            f"key announces {count} values but holds only {len(segment)} length digits"
        )

    return KeyMetadata(count=count, lengths=decode_lengths(segment), salt=key[end:])
