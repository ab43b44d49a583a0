"""Search helpers over the block informations of a dictionary index entry.

Block informations are ordered by midashi in descending order, each holding
the first midashi of a block of the string area.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "BlockInformation",
    "BrokenDictionaryError",
    "is_okuri_ari",
    "loop_start_hint_index",
    "block_informations_index",
]

BINARY_SEARCH_THRESHOLD = 30
RETURN_ZERO_THRESHOLD = 10
_OKURI_ARI_MIDASHI_MINIMUM_LENGTH = 3


@dataclass(frozen=True)
class BlockInformation:
    """First midashi of a block and where the block lies in the string area."""

    midashi: bytes
    offset: int
    length: int


class BrokenDictionaryError(Exception):
    """The dictionary data does not have the expected structure."""


def is_okuri_ari(midashi: bytes) -> bool:
    """Return True if an EUC midashi ends in a hiragana letter followed by a-z."""
    if len(midashi) < _OKURI_ARI_MIDASHI_MINIMUM_LENGTH:
        return False
    if not (ord("a") <= midashi[-1] <= ord("z")):
        return False
    if not (0xA1 <= midashi[-2] <= 0xF3):
        return False
    return midashi[-3] == 0xA4


def loop_start_hint_index(midashi: bytes, informations: Sequence[BlockInformation]) -> int:
    """Return an index from which a linear scan for ``midashi`` can start.

    The returned index does not necessarily hold the wanted block; it lies
    at most two entries before it when a binary search was done, and at
    most ``BINARY_SEARCH_THRESHOLD // 2`` entries before it otherwise.
    """
    length = len(informations)
    if length < RETURN_ZERO_THRESHOLD:
        return 0
    if length < BINARY_SEARCH_THRESHOLD:
        half = length // 2
        return 0 if midashi > informations[half].midashi else half
    index = length // 2
    diff = index // 2
    previous_direction = 0
    diff_zero_count = 0
    while True:
        direction = 0
        if midashi > informations[index].midashi:
            index -= diff
            if index < 0:
                index = 0
                break
        else:
            direction = 1
            index += diff
            if index >= length:
                index = length - 1
                break
        diff //= 2
        if diff == 0:
            diff = 1
            if diff_zero_count >= 1 and direction != previous_direction:
                index = max(0, index - 1)
                break
            diff_zero_count += 1
        previous_direction = direction
    while index < length and informations[index].midashi > midashi:
        index += 1
    return index


def block_informations_index(midashi: bytes, informations: Sequence[BlockInformation]) -> int:
    """Return the index of the block that may hold ``midashi``.

    The result equals ``len(informations)`` when every block starts after it.
    """
    index = loop_start_hint_index(midashi, informations)
    while index < len(informations) and informations[index].midashi > midashi:
        index += 1
    return index