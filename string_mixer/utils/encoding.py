import secrets
from typing import Dict, Optional

# Substitution ring. The order is part of the token format: every issuer and
# reader must agree on it.
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
ALPHABET_SIZE = len(ALPHABET)
_ALPHABET_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}

# Base36 digits (lowercase, parsed case-insensitively) for key metadata
BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE36 = len(BASE36_DIGITS)
_BASE36_INDEX: Dict[str, int] = {ch: i for i, ch in enumerate(BASE36_DIGITS)}


def index_of(char: str) -> Optional[int]:
    """Position of char in the ring, or None when it is not a ring symbol."""
    return _ALPHABET_INDEX.get(char)


def char_at(index: int) -> str:
    return ALPHABET[index % ALPHABET_SIZE]


def generate_salt(length: int) -> str:
    """Random ring symbols for the tail of a key. Not reproducible."""
    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


def encode_base36(num: int, width: int = 2) -> str:
    """Encode a non-negative integer, left-padded with '0' to width.

    Numbers that need more digits than width are returned whole.
    """
    if num < 0:
        raise ValueError("base36 encoding only supports non-negative integers")
    out = []
    while num:
        num, rem = divmod(num, BASE36)
        out.append(BASE36_DIGITS[rem])
    return ''.join(reversed(out)).rjust(width, '0')


def decode_base36(s: str) -> int:
    """Decode base36 digits to an integer, raising ValueError on anything else."""
    if not s:
        raise ValueError("empty base36 string")
    n = 0
    for ch in s.lower():
        digit = _BASE36_INDEX.get(ch)
        if digit is None:
            raise ValueError(f"invalid base36 character: {ch!r}")
        n = n * BASE36 + digit
    return n
