"""Interpretation of Google Japanese Input and Google Suggest responses.

Candidates are handled as UTF-8 encoded ``bytes``.
"""

from __future__ import annotations

import itertools
import json
import re
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "RequestError",
    "is_utf8_hiragana",
    "is_utf8_katakana",
    "is_utf8_hankaku_katakana",
    "is_utf8_hiragana_only",
    "is_utf8_katakana_only",
    "is_utf8_hankaku_katakana_only",
    "should_add_tail_candidates",
    "should_add",
    "japanese_input_candidates",
    "parse_japanese_input_response",
    "parse_suggest_response",
]

_SUGGESTION_PREFIX = 'suggestion data="'
_SUGGESTION_SUFFIX = '"/>'
_SPACE_AFTER_TRIM = re.compile(r"(\S+)\s.+")


class RequestError(Exception):
    """A response held no usable candidates or could not be parsed."""


def _check_letter(letter: bytes) -> None:
    if len(letter) != 3:
        raise ValueError(f"a letter must be 3 bytes long, got {len(letter)}")


def is_utf8_hiragana(letter: bytes) -> bool:
    """Return True if the 3-byte UTF-8 sequence is a hiragana letter."""
    _check_letter(letter)
    first, second, third = letter
    if first != 0xE3:
        return False
    if second == 0x81:
        return 0x81 <= third <= 0xBF
    if second == 0x82:
        return 0x9B <= third <= 0x9E or 0x80 <= third <= 0x93
    return False


def is_utf8_katakana(letter: bytes) -> bool:
    """Return True if the 3-byte UTF-8 sequence is a katakana letter."""
    _check_letter(letter)
    first, second, third = letter
    if first != 0xE3:
        return False
    if second == 0x82:
        return 0xA1 <= third <= 0xBF
    if second == 0x83:
        return 0xBB <= third <= 0xBE or 0x80 <= third <= 0xB6
    return False


def is_utf8_hankaku_katakana(letter: bytes) -> bool:
    """Return True if the 3-byte UTF-8 sequence is a half-width katakana letter."""
    _check_letter(letter)
    first, second, third = letter
    if first != 0xEF:
        return False
    if second == 0xBD:
        return 0xA1 <= third <= 0xBF
    if second == 0xBE:
        return 0x80 <= third <= 0x9F
    return False


def _all_letters(candidate: bytes, predicate) -> bool:
    if len(candidate) < 3 or len(candidate) % 3 != 0:
        return False
    return all(
        predicate(candidate[start : start + 3]) for start in range(0, len(candidate), 3)
    )


def is_utf8_hiragana_only(candidate: bytes) -> bool:
    """Return True if the candidate consists of hiragana only."""
    return _all_letters(candidate, is_utf8_hiragana)


def is_utf8_katakana_only(candidate: bytes) -> bool:
    """Return True if the candidate consists of katakana only."""
    return _all_letters(candidate, is_utf8_katakana)


def is_utf8_hankaku_katakana_only(candidate: bytes) -> bool:
    """Return True if the candidate consists of half-width katakana only."""
    return _all_letters(candidate, is_utf8_hankaku_katakana)


def should_add_tail_candidates(midashi_tail: bytes) -> bool:
    """Return True unless the tail is empty or ends in an ASCII lowercase letter."""
    if not midashi_tail:
        return False
    last = midashi_tail[-1]
    return not (ord("a") <= last <= ord("z"))


def should_add(
    candidates: Iterable[bytes],
    insert_hiragana: bool,
    insert_katakana: bool,
    insert_hankaku_katakana: bool,
) -> bool:
    """Return False if any part is a kana-only string whose insertion is disabled."""
    for candidate in candidates:
        if not insert_hiragana and is_utf8_hiragana_only(candidate):
            return False
        if not insert_katakana and is_utf8_katakana_only(candidate):
            return False
        if not insert_hankaku_katakana and is_utf8_hankaku_katakana_only(candidate):
            return False
    return True


def _get(value: Any, index: int) -> Any:
    if isinstance(value, list) and 0 <= index < len(value):
        return value[index]
    return None


def _members(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_bytes(value: Any) -> bytes | None:
    return value.encode("utf-8") if isinstance(value, str) else None


def _segment_strings(segment: Any) -> list[bytes]:
    converted = (_as_bytes(member) for member in _members(_get(segment, 1)))
    return [item for item in converted if item is not None]


def _json_length(value: Any) -> int:
    if isinstance(value, (list, dict)):
        return len(value)
    return 0


def _combined_candidates(
    segments: Sequence[Any],
    insert_hiragana: bool,
    insert_katakana: bool,
    insert_hankaku_katakana: bool,
) -> list[bytes]:
    midashi_tail = _as_bytes(_get(segments[-1], 0))
    if midashi_tail is None:
        return []
    add_tail = should_add_tail_candidates(midashi_tail)
    result = []
    for parts in itertools.product(*(_segment_strings(s) for s in segments)):
        if not should_add(parts, insert_hiragana, insert_katakana, insert_hankaku_katakana):
            continue
        head = b"".join(parts[:-1])
        result.append(head + parts[-1] if add_tail else head)
    return result


def japanese_input_candidates(
    json_value: Any,
    max_candidates_length: int,
    insert_hiragana: bool,
    insert_katakana: bool,
    insert_hankaku_katakana: bool,
) -> list[bytes]:
    """Build candidates from a decoded Google Japanese Input response."""
    length = _json_length(json_value)
    if length in (2, 3, 4):
        segments = [_get(json_value, index) for index in range(length)]
        result = _combined_candidates(
            segments, insert_hiragana, insert_katakana, insert_hankaku_katakana
        )
    else:
        result = [
            candidate
            for candidate in _segment_strings(_get(json_value, 0))
            if should_add(
                [candidate], insert_hiragana, insert_katakana, insert_hankaku_katakana
            )
        ]
    return result[:max_candidates_length]


def parse_japanese_input_response(
    content: str,
    max_candidates_length: int,
    insert_hiragana: bool,
    insert_katakana: bool,
    insert_hankaku_katakana: bool,
) -> list[bytes]:
    """Parse a Google Japanese Input JSON body; raise RequestError if nothing is usable."""
    try:
        value = json.loads(content)
    except json.JSONDecodeError as error:
        raise RequestError(f"json error: {error}") from error
    first = _get(value, 0)
    if isinstance(value, list) and isinstance(first, list) and len(first) >= 2:
        result = japanese_input_candidates(
            value,
            max_candidates_length,
            insert_hiragana,
            insert_katakana,
            insert_hankaku_katakana,
        )
    else:
        result = []
    if not result:
        raise RequestError("no candidates in response")
    return result


def _trim_prefix_repeatedly(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix) :]
    return text


def _trim_suffix_repeatedly(text: str, suffix: str) -> str:
    while text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def parse_suggest_response(content: str) -> list[bytes]:
    """Extract suggestion words from a Google Suggest XML body.

    Only the first whitespace-separated word of each suggestion is kept.
    """
    result = []
    for piece in content.split("<"):
        if not piece.startswith(_SUGGESTION_PREFIX):
            continue
        trimmed = _trim_suffix_repeatedly(
            _trim_prefix_repeatedly(piece, _SUGGESTION_PREFIX), _SUGGESTION_SUFFIX
        )
        match = _SPACE_AFTER_TRIM.fullmatch(trimmed)
        if match:
            trimmed = match.group(1)
        result.append(trimmed.encode("utf-8"))
    if not result:
        raise RequestError("no suggestions in response")
    return result