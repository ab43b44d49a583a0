import pytest

from yaskk.block_search import BrokenDictionaryError
from yaskk.jisyo_writer import Encoding, split_okuri_entries, write_jisyo


def test_split_okuri_entries_separates_kinds():
    buffer = b"\n\xa4\xa2s /x/\nabc /y;note/\n"
    ari, nasi = split_okuri_entries(buffer)
    assert ari == {b"\xa4\xa2s": b"/x/"}
    assert nasi == {b"abc": b"/y;note/"}


def test_split_okuri_entries_empty_block():
    assert split_okuri_entries(b"\n") == ({}, {})


def test_split_okuri_entries_broken():
    with pytest.raises(BrokenDictionaryError):
        split_okuri_entries(b"\nabc /y/")


def test_write_jisyo_euc(tmp_path):
    path = tmp_path / "out.jisyo"
    ari = {b"\xa4\xa2s": b"/a/", b"\xa4\xa4k": b"/b/"}
    nasi = {b"b": b"/2/", b"a": b"/1/"}
    write_jisyo(str(path), Encoding.EUC, ari, nasi)
    assert path.read_bytes() == (
        b";; -*- mode: fundamental; coding: euc-jis-2004 -*-\n"
        b";; yaskkserv2 dictionary\n"
        b";; okuri-ari entries.\n"
        b"\xa4\xa4k /b/\n"
        b"\xa4\xa2s /a/\n"
        b";; okuri-nasi entries.\n"
        b"a /1/\n"
        b"b /2/\n"
    )


def test_write_jisyo_utf8_header(tmp_path):
    path = tmp_path / "out.jisyo"
    write_jisyo(str(path), Encoding.UTF8, {}, {})
    lines = path.read_bytes().splitlines()
    assert lines == [
        b";; -*- mode: fundamental; coding: utf-8 -*-",
        b";; yaskkserv2 dictionary",
        b";; okuri-ari entries.",
        b";; okuri-nasi entries.",
    ]


def test_block_round_trip_through_jisyo(tmp_path):
    buffer = b"\n\xa4\xa2s /x/\nabc /y/\nabd /z/\n"
    ari, nasi = split_okuri_entries(buffer)
    path = tmp_path / "round.jisyo"
    write_jisyo(str(path), Encoding.EUC, ari, nasi)
    entries = [
        line for line in path.read_bytes().splitlines() if not line.startswith(b";;")
    ]
    rebuilt = b"\n" + b"\n".join(entries) + b"\n"
    assert split_okuri_entries(rebuilt) == (ari, nasi)