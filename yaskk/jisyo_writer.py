"""Writing of SKK-JISYO files from dictionary string blocks."""

from __future__ import annotations

import enum
from collections.abc import Mapping

from yaskk.block_search import BrokenDictionaryError, is_okuri_ari

__all__ = ["Encoding", "split_okuri_entries", "write_jisyo"]

_EUC_HEADER = b";; -*- mode: fundamental; coding: euc-jis-2004 -*-\n"
_UTF8_HEADER = b";; -*- mode: fundamental; coding: utf-8 -*-\n"
_TITLE = b";; yaskkserv2 dictionary\n"
_OKURI_ARI = b";; okuri-ari entries.\n"
_OKURI_NASI = b";; okuri-nasi entries.\n"


class Encoding(enum.Enum):
    """Character encoding of a jisyo or dictionary."""

    EUC = "euc"
    UTF8 = "utf8"


def split_okuri_entries(buffer: bytes) -> tuple[dict[bytes, bytes], dict[bytes, bytes]]:
    """Split a string block into okuri-ari and okuri-nasi ``midashi -> candidates`` maps.

    The midashi in the block must be EUC encoded. Raise BrokenDictionaryError
    if an entry is not terminated by a newline.
    """
    okuri_ari: dict[bytes, bytes] = {}
    okuri_nasi: dict[bytes, bytes] = {}
    offset = 0
    while True:
        space = buffer.find(b" ", offset)
        if space < 0:
            break
        end = buffer.find(b"\n", space)
        if end < 0:
            raise BrokenDictionaryError("entry is not terminated by a newline")
        midashi = bytes(buffer[offset + 1 : space])
        candidates = bytes(buffer[space + 1 : end])
        target = okuri_ari if is_okuri_ari(midashi) else okuri_nasi
        target[midashi] = candidates
        offset = end
    return okuri_ari, okuri_nasi


def write_jisyo(
    path: str,
    encoding: Encoding,
    okuri_ari: Mapping[bytes, bytes],
    okuri_nasi: Mapping[bytes, bytes],
) -> None:
    """Write a jisyo: okuri-ari entries in descending, okuri-nasi in ascending order."""
    with open(path, "wb") as handle:
        handle.write(_EUC_HEADER if encoding is Encoding.EUC else _UTF8_HEADER)
        handle.write(_TITLE)
        handle.write(_OKURI_ARI)
        for midashi in sorted(okuri_ari, reverse=True):
            handle.write(midashi + b" " + okuri_ari[midashi] + b"\n")
        handle.write(_OKURI_NASI)
        for midashi in sorted(okuri_nasi):
            handle.write(midashi + b" " + okuri_nasi[midashi] + b"\n")