import math
from typing import List, Sequence

from string_mixer.services.prng import Mulberry32


def build_source_map(lengths: Sequence[int], stream: Mulberry32) -> List[int]:
    """Replay which value supplies each mixed position.

    Uses exactly sum(lengths) draws. Every value that still has characters
    left is equally likely at each step, whatever its remaining length.
    Only lengths and the stream matter, so issuer and reader agree.
    """
    pointers = [0] * len(lengths)
    source_map = []
    for _ in range(sum(lengths)):
        available = [i for i, length in enumerate(lengths) if pointers[i] < length]
        pick = available[math.floor(stream.random() * len(available))]
        pointers[pick] += 1
        source_map.append(pick)
    return source_map


def interleave(values: Sequence[str], source_map: Sequence[int]) -> str:
    pointers = [0] * len(values)
    mixed = []
    for source in source_map:
        mixed.append(values[source][pointers[source]])
        pointers[source] += 1
    return ''.join(mixed)


def split(mixed: str, source_map: Sequence[int], count: int) -> List[str]:
    buffers: List[List[str]] = [[] for _ in range(count)]
    for ch, source in zip(mixed, source_map):
        buffers[source].append(ch)
    return [''.join(chars) for chars in buffers]
