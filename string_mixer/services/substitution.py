import math

from string_mixer.services.prng import Mulberry32
from string_mixer.utils.encoding import ALPHABET_SIZE, char_at, index_of


def draw_offset(stream: Mulberry32) -> int:
    return math.floor(stream.random() * ALPHABET_SIZE)


def shift(char: str, offset: int) -> str:
    """Move char forward around the ring; '@', '.' and friends pass through."""
    i = index_of(char)
    if i is None:
        return char
    return char_at(i + offset)


def unshift(char: str, offset: int) -> str:
    i = index_of(char)
    if i is None:
        return char
    return char_at(i - offset)


# One draw per character, even for characters outside the ring, so the
# stream stays aligned between both sides.
def shift_all(text: str, stream: Mulberry32) -> str:
    return ''.join(shift(ch, draw_offset(stream)) for ch in text)


def unshift_all(text: str, stream: Mulberry32) -> str:
    return ''.join(unshift(ch, draw_offset(stream)) for ch in text)
