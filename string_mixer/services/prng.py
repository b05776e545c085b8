"""Seed hash and the Mulberry32 stream that drives mixing.

Both sides of a token (issuer and reader) must draw the exact same sequence
from the same key, so everything here is plain 32-bit integer arithmetic.
"""

MASK32 = 0xFFFFFFFF
_GOLDEN = 0x6D2B79F5
_TWO_POW_32 = 4294967296


def hash_string(s: str) -> int:
    """Rolling ``h * 31 + code point`` hash, kept to 32 unsigned bits."""
    h = 0
    for ch in s:
        h = (h * 31 + ord(ch)) & MASK32
    return h


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32


class Mulberry32:
    """Stateful float stream in [0, 1).

    One instance is consumed in call order; restart it only by reseeding.
    """

    def __init__(self, seed: int):
        self._state = seed & MASK32
        self.draws = 0

    def random(self) -> float:
        self._state = (self._state + _GOLDEN) & MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        self.draws += 1
        return ((t ^ (t >> 14)) & MASK32) / _TWO_POW_32

    def __iter__(self):
        return self

    def __next__(self) -> float:
        return self.random()

    @classmethod
    def from_key(cls, key: str) -> "Mulberry32":
        return cls(hash_string(key))
