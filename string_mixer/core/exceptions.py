"""Errors raised by the string mixer and the token helpers built on it.

Every codec failure derives from :class:`MixerError`, itself a ``ValueError``,
so callers that already catch ``ValueError`` around user input keep working.
"""


class MixerError(ValueError):
    """Base class for encode/decode failures."""


class KeyFormatError(MixerError):
    """The key is too short, cut short, or holds non base-36 metadata."""


class LengthMismatchError(MixerError):
    """The lengths recorded in the key do not add up to the value length."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"key describes {expected} characters but value has {actual}"
        )


class InputCountOverflow(MixerError):
    """Too many inputs for the two-digit count field."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"cannot mix {count} values, the limit is {limit}")


class LengthOverflow(MixerError):
    """An input is too long for its two-digit length field."""

    def __init__(self, position: int, length: int, limit: int):
        self.position = position
        self.length = length
        self.limit = limit
        super().__init__(
            f"value #{position} has {length} characters, the limit is {limit}"
        )


class KeyTruncationError(MixerError):
    """The count and lengths header does not fit in the configured key width."""

    def __init__(self, header_length: int, key_width: int):
        self.header_length = header_length
        self.key_width = key_width
        super().__init__(
            f"key header needs {header_length} characters but keys are cut at {key_width}"
        )


class InvalidTokenError(ValueError):
    """Uniform failure for token links: never says which check failed."""

    def __init__(self, message: str = "Invalid or tampered token"):
        super().__init__(message)
