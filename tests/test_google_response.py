import json

import pytest

from yaskk.google_response import (
    RequestError,
    is_utf8_hankaku_katakana,
    is_utf8_hankaku_katakana_only,
    is_utf8_hiragana,
    is_utf8_hiragana_only,
    is_utf8_katakana,
    is_utf8_katakana_only,
    japanese_input_candidates,
    parse_japanese_input_response,
    parse_suggest_response,
    should_add,
    should_add_tail_candidates,
)


def u(text):
    return text.encode("utf-8")


@pytest.mark.parametrize("letter", ["ぁ", "ん", "゛", "ゞ"])
def test_is_utf8_hiragana_true(letter):
    assert is_utf8_hiragana(u(letter)) is True


@pytest.mark.parametrize("letter", ["ァ", "ヶ", "・", "ヾ"])
def test_is_utf8_hiragana_false(letter):
    assert is_utf8_hiragana(u(letter)) is False


@pytest.mark.parametrize("letter", ["ァ", "ヶ", "・", "ヾ"])
def test_is_utf8_katakana_true(letter):
    assert is_utf8_katakana(u(letter)) is True


@pytest.mark.parametrize("letter", ["ぁ", "ん", "゛", "ゞ"])
def test_is_utf8_katakana_false(letter):
    assert is_utf8_katakana(u(letter)) is False


@pytest.mark.parametrize("letter", ["｡", "､", "ﾟ"])
def test_is_utf8_hankaku_katakana_true(letter):
    assert is_utf8_hankaku_katakana(u(letter)) is True


@pytest.mark.parametrize("letter", ["ヾ", "ぁ", "ん", "゛", "ゞ"])
def test_is_utf8_hankaku_katakana_false(letter):
    assert is_utf8_hankaku_katakana(u(letter)) is False


def test_letter_must_be_three_bytes():
    with pytest.raises(ValueError):
        is_utf8_hiragana(b"a")


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        (u("あ"), True),
        (u("あん"), True),
        (u("あア"), False),
        (u("あｱ"), False),
        (u("あa"), False),
        (u("ア"), False),
        (u("ｱ"), False),
        (b"a", False),
    ],
)
def test_is_utf8_hiragana_only(candidate, expected):
    assert is_utf8_hiragana_only(candidate) is expected


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        (u("ア"), True),
        (u("アン"), True),
        (u("あア"), False),
        (u("あｱ"), False),
        (u("あa"), False),
        (u("あ"), False),
        (u("ｱ"), False),
        (b"a", False),
    ],
)
def test_is_utf8_katakana_only(candidate, expected):
    assert is_utf8_katakana_only(candidate) is expected


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        (u("｡｡｡"), True),
        (u("ﾝﾝﾝ"), True),
        (u("ｱ"), True),
        (u("ア"), False),
        (u("アン"), False),
        (u("あア"), False),
        (u("あｱ"), False),
        (u("あa"), False),
        (u("あ"), False),
        (b"a", False),
    ],
)
def test_is_utf8_hankaku_katakana_only(candidate, expected):
    assert is_utf8_hankaku_katakana_only(candidate) is expected


@pytest.mark.parametrize(
    ("tail", "expected"),
    [(b"", False), (b"k", False), (b"K", True), (u("は"), True), (b"1", True)],
)
def test_should_add_tail_candidates(tail, expected):
    assert should_add_tail_candidates(tail) is expected


def test_should_add_respects_flags():
    parts = [u("私"), u("は")]
    assert should_add(parts, False, False, False) is False
    assert should_add(parts, True, False, False) is True
    assert should_add([u("アン")], True, False, True) is False
    assert should_add([u("ｱ")], True, True, False) is False
    assert should_add([u("ｱ")], True, True, True) is True


def test_single_segment_candidates():
    value = [["きょう", ["今日", "京", "きょう"]]]
    assert japanese_input_candidates(value, 10, False, False, False) == [u("今日"), u("京")]
    assert japanese_input_candidates(value, 10, True, False, False) == [
        u("今日"),
        u("京"),
        u("きょう"),
    ]


def test_two_segment_candidates():
    value = [["わたし", ["私", "渡し"]], ["は", ["は", "羽"]]]
    assert japanese_input_candidates(value, 10, False, False, False) == [
        u("私羽"),
        u("渡し羽"),
    ]
    assert japanese_input_candidates(value, 10, True, False, False) == [
        u("私は"),
        u("私羽"),
        u("渡しは"),
        u("渡し羽"),
    ]


def test_lowercase_tail_is_not_appended():
    value = [["か", ["書"]], ["k", ["k"]]]
    assert japanese_input_candidates(value, 10, False, False, False) == [u("書")]


def test_three_segment_candidates():
    value = [["a", ["亜"]], ["b", ["美", "尾"]], ["C", ["X"]]]
    assert japanese_input_candidates(value, 10, False, False, False) == [
        u("亜美X"),
        u("亜尾X"),
    ]


def test_missing_tail_string_yields_nothing():
    value = [["a", ["亜"]], [1, ["美"]]]
    assert japanese_input_candidates(value, 10, False, False, False) == []


def test_candidates_are_truncated():
    value = [["x", ["一", "二", "三", "四"]]]
    assert japanese_input_candidates(value, 2, False, False, False) == [u("一"), u("二")]


def test_parse_japanese_input_response():
    content = json.dumps([["へんかん", ["変換", "返還"]]], ensure_ascii=False)
    assert parse_japanese_input_response(content, 10, False, False, False) == [
        u("変換"),
        u("返還"),
    ]


@pytest.mark.parametrize(
    "content",
    ["not json", "{}", '[["a"]]', '[["a", []]]', '[["あ", ["あ"]]]'],
)
def test_parse_japanese_input_response_errors(content):
    with pytest.raises(RequestError):
        parse_japanese_input_response(content, 10, False, False, False)


def test_parse_suggest_response():
    content = (
        '<?xml version="1.0"?><toplevel><CompleteSuggestion>'
        '<suggestion data="東京 タワー"/></CompleteSuggestion>'
        '<CompleteSuggestion><suggestion data="京都"/></CompleteSuggestion></toplevel>'
    )
    assert parse_suggest_response(content) == [u("東京"), u("京都")]


def test_parse_suggest_response_empty():
    with pytest.raises(RequestError):
        parse_suggest_response("<toplevel></toplevel>")