import logging
from typing import Callable, List, Optional

from string_mixer.core.config import Settings, settings
from string_mixer.core.exceptions import (
    InputCountOverflow,
    KeyTruncationError,
    LengthMismatchError,
    LengthOverflow,
    MixerError,
)
from string_mixer.schemas.token import MixedToken
from string_mixer.services.interleaver import build_source_map, interleave, split
from string_mixer.services.key_codec import (
    KEY_WIDTH,
    MAX_FIELD_VALUE,
    SALT_LENGTH,
    build_key,
    header_length,
    parse_key,
)
from string_mixer.services.prng import Mulberry32
from string_mixer.services.substitution import shift_all, unshift_all
from string_mixer.utils.encoding import generate_salt

logger = logging.getLogger(__name__)

MAX_INPUT_COUNT = 35

# Takes the salt length, returns that many characters
SaltSource = Callable[[int], str]


class StringMixer:
    """Packs several strings into one opaque value plus a short key.

    The key records how many values there were and how long each one was,
    followed by a random salt. Its hash seeds a Mulberry32 stream that is
    drawn in two phases: first to decide which value supplies each position,
    then to shift each character around the alphabet. Reading a token
    replays the same draws from the key alone.

    The defaults keep the legacy key layout: keys are cut at 16 characters
    and oversized inputs are only logged, not rejected. ``strict=True``
    refuses inputs that would not survive a round trip; ``key_width=None``
    keeps the whole key.
    """

    def __init__(
        self,
        key_width: Optional[int] = KEY_WIDTH,
        salt_length: int = SALT_LENGTH,
        strict: bool = False,
        salt_source: Optional[SaltSource] = None,
    ):
        self.key_width = key_width
        self.salt_length = salt_length
        self.strict = strict
        self.salt_source = salt_source or generate_salt

    @classmethod
    def from_settings(cls, config: Settings = settings, salt_source: Optional[SaltSource] = None) -> "StringMixer":
        return cls(
            key_width=config.MIXER_KEY_WIDTH,
            salt_length=config.MIXER_SALT_LENGTH,
            strict=config.MIXER_STRICT,
            salt_source=salt_source,
        )

    def check_encodable(self, lengths: List[int]) -> None:
        """Raise if a key built for these lengths could not be read back."""
        if len(lengths) > MAX_INPUT_COUNT:
            raise InputCountOverflow(len(lengths), MAX_INPUT_COUNT)
        for position, length in enumerate(lengths):
            if length > MAX_FIELD_VALUE:
                raise LengthOverflow(position, length, MAX_FIELD_VALUE)
        needed = header_length(len(lengths))
        if self.key_width is not None and needed > self.key_width:
            raise KeyTruncationError(needed, self.key_width)

    def encode(self, *values: str) -> MixedToken:
        if not values:
            raise MixerError("at least one value is required")

        lengths = [len(v) for v in values]
        if self.strict:
            try:
                self.check_encodable(lengths)
            except MixerError as e:
                logger.warning(f"Strict encode rejected {len(values)} values: {e}")
                raise
        else:
            try:
                self.check_encodable(lengths)
            except MixerError as e:
                # legacy keys are still issued; the reader may get wrong splits
                logger.warning(f"Encoding {len(values)} values that will not decode intact: {e}")

        key = build_key(lengths, self.salt_source(self.salt_length), self.key_width)
        stream = Mulberry32.from_key(key)

        # interleave draws first, substitution draws after; never mixed
        source_map = build_source_map(lengths, stream)
        value = shift_all(interleave(values, source_map), stream)

        logger.debug("Encoded %d values into %d characters", len(values), len(value))
        return MixedToken(value=value, key=key)

    def decode(self, value: str, key: str) -> List[str]:
        metadata = parse_key(key)
        if metadata.total_length != len(value):
            raise LengthMismatchError(metadata.total_length, len(value))

        stream = Mulberry32.from_key(key)
        source_map = build_source_map(metadata.lengths, stream)
        decoded = split(unshift_all(value, stream), source_map, metadata.count)

        logger.debug("Decoded %d characters into %d values", len(value), metadata.count)
        return decoded


default_mixer = StringMixer.from_settings(settings)


def encode(*values: str) -> MixedToken:
    return default_mixer.encode(*values)


def decode(value: str, key: str) -> List[str]:
    return default_mixer.decode(value, key)
