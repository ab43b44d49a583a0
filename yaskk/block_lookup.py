"""Lookup of candidates and completions inside dictionary string blocks.

A string block is a run of entries such as ``b"\\nmidashiA /a/\\nmidashiB /b/\\n"``.
Every entry is preceded and followed by ``b"\\n"``. Block informations are
ordered by their first midashi in descending order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from yaskk.block_search import (
    BlockInformation,
    BrokenDictionaryError,
    block_informations_index,
    is_okuri_ari,
)

__all__ = ["protocol_midashi", "find_candidates", "find_abbrev"]

BlockReader = Callable[[BlockInformation], bytes]


def protocol_midashi(buffer: bytes) -> bytes:
    """Strip the protocol command byte and the trailing space from a request.

    ``b"1midashi "`` becomes ``b"midashi"``.
    """
    return bytes(buffer[1:-1])


def find_candidates(
    midashi: bytes,
    informations: Sequence[BlockInformation],
    read_block: BlockReader,
) -> bytes | None:
    """Return the candidates of ``midashi`` (``b"/a/b/"``), or None if absent.

    ``read_block`` returns the bytes of the block an information describes.
    Raise BrokenDictionaryError if the entry is not terminated by a newline.
    """
    index = block_informations_index(midashi, informations)
    if index >= len(informations):
        return None
    needle = b"\n" + midashi + b" /"
    buffer = read_block(informations[index])
    found = buffer.find(needle)
    if found < 0:
        return None
    start = found + len(needle)
    end = buffer.find(b"\n", start)
    if end < 0:
        raise BrokenDictionaryError("entry is not terminated by a newline")
    return b"/" + buffer[start:end]


def find_abbrev(
    midashi: bytes,
    informations: Sequence[BlockInformation],
    read_block: BlockReader,
    max_completions: int,
) -> list[bytes]:
    """Return okuri-nasi midashi that start with ``midashi``, in dictionary order.

    At most ``max_completions`` midashi are returned (at least one when any
    is found). Raise BrokenDictionaryError if a midashi has no following space.
    """
    if not informations:
        return []
    index = block_informations_index(midashi, informations)
    if index >= len(informations):
        index -= 1
    needle = b"\n" + midashi
    result: list[bytes] = []
    while True:
        unit = informations[index]
        if result and not unit.midashi.startswith(midashi):
            break
        buffer = read_block(unit)
        offset = 0
        while True:
            found = buffer.find(needle, offset)
            if found < 0:
                if not result:
                    return result
                break
            midashi_start = found + 1
            space = buffer.find(b" ", found + len(needle))
            if space < 0:
                raise BrokenDictionaryError("midashi is not followed by a space")
            offset = space
            candidate = buffer[midashi_start:space]
            if not is_okuri_ari(candidate):
                result.append(candidate)
                if len(result) >= max_completions:
                    return result
        if index == 0:
            break
        index -= 1
    return result