# re-export the public surface for simpler imports
from .core.exceptions import (
    InputCountOverflow,
    InvalidTokenError,
    KeyFormatError,
    KeyTruncationError,
    LengthMismatchError,
    LengthOverflow,
    MixerError,
)
from .schemas.token import IssuedToken, KeyMetadata, MixedToken, TokenPurpose
from .services.mixer import StringMixer, decode, encode
from .services.tokens import TokenService

__all__ = [
    "encode",
    "decode",
    "StringMixer",
    "TokenService",
    "MixedToken",
    "KeyMetadata",
    "IssuedToken",
    "TokenPurpose",
    "MixerError",
    "KeyFormatError",
    "LengthMismatchError",
    "InputCountOverflow",
    "LengthOverflow",
    "KeyTruncationError",
    "InvalidTokenError",
]
