# re-export common schemas for simpler imports
from .token import IssuedToken, KeyMetadata, MixedToken, TokenPurpose

__all__ = [
    "IssuedToken",
    "KeyMetadata",
    "MixedToken",
    "TokenPurpose",
]
