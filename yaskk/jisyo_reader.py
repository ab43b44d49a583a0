"""Reading of SKK-JISYO lines.

Lines may end in LF, CRLF or CR, mixed freely within one file.  Lines that
cannot be dictionary entries are skipped with a reason.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import BinaryIO

__all__ = [
    "iter_jisyo_lines",
    "skip_reason",
    "iter_valid_lines",
    "COMMENT",
    "JISYO_MINIMUM_LINE_LENGTH",
    "JISYO_MAXIMUM_LINE_LENGTH",
    "JISYO_MINIMUM_CANDIDATES_LENGTH",
]

# Smallest entry is ``a /b/``; its candidates part with the space is `` /b/``.
JISYO_MINIMUM_LINE_LENGTH = len(b"a /b/")
JISYO_MINIMUM_CANDIDATES_LENGTH = len(b" /b/")
JISYO_MAXIMUM_LINE_LENGTH = 64 * 1024

COMMENT = "COMMENT"

_UTF8_BOM = b"\xef\xbb\xbf"
_TERMINATOR = re.compile(rb"[\r\n]")
_READ_LENGTH = 16 * 1024

Warn = Callable[[str, int, bytes], None]


def _raw_lines(stream: BinaryIO) -> Iterator[bytes]:
    pending = b""
    while chunk := stream.read(_READ_LENGTH):
        pending += chunk
        start = 0
        for match in _TERMINATOR.finditer(pending):
            yield pending[start : match.end()]
            start = match.end()
        pending = pending[start:]
    if pending:
        yield pending


def iter_jisyo_lines(stream: BinaryIO) -> Iterator[bytes]:
    """Yield the lines of a binary stream without their terminators.

    A leading UTF-8 byte order mark is dropped.
    """
    last_cr = False
    first = True
    for raw in _raw_lines(stream):
        if first:
            first = False
            if raw.startswith(_UTF8_BOM):
                raw = raw[len(_UTF8_BOM):]
                if not raw:
                    continue
        if last_cr and raw == b"\n":
            last_cr = False
            continue
        last_cr = raw.endswith(b"\r")
        yield raw[:-1] if raw[-1:] in (b"\r", b"\n") else raw


def skip_reason(line: bytes) -> str | None:
    """Return why ``line`` is not an entry, or None if it may be one.

    Comment lines give :data:`COMMENT`.
    """
    if not line.strip(b" \r\n"):
        return "EMPTY LINE"
    first = line[:1]
    if first == b";":
        return COMMENT
    if first == b" ":
        return "BEGIN SPACE"
    if first == b"\t":
        return "BEGIN TAB"
    if len(line) < JISYO_MINIMUM_LINE_LENGTH:
        return "LINE TOO SHORT"
    if len(line) > JISYO_MAXIMUM_LINE_LENGTH:
        return "LINE TOO LONG"
    space = line.find(b" ")
    if space < 0:
        return "SPACE NOT FOUND"
    if len(line) < space + JISYO_MINIMUM_CANDIDATES_LENGTH:
        return "CANDIDATES TOO SHORT"
    if line[space + 1] == ord(" "):
        return "MULTI SPACE"
    if b"//" in line[space + 1 :]:
        return "ILLEGAL CANDIDATES"
    return None


def iter_valid_lines(stream: BinaryIO, warn: Warn) -> Iterator[tuple[int, bytes]]:
    """Yield ``(line_number, line)`` for every line that may be an entry.

    ``warn(reason, line_number, line)`` is called for each skipped line
    except comments.  Line numbers start at 1.
    """
    for line_number, line in enumerate(iter_jisyo_lines(stream), start=1):
        reason = skip_reason(line)
        if reason is None:
            yield line_number, line
        elif reason != COMMENT:
            warn(reason, line_number, line)