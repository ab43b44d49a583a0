# yaskk

Building blocks for working with SKK dictionaries (SKK-JISYO) and with the
block-indexed string area of an SKK server dictionary. Everything is pure
Python and needs only the standard library (Python 3.10 or later).

## Modules

- `yaskk.jisyo_reader` – reading JISYO lines. `iter_jisyo_lines` splits a
  binary stream on LF, CRLF or CR (mixed freely) and drops a leading UTF-8
  byte order mark. `skip_reason` tells why a line cannot be an entry
  (`"EMPTY LINE"`, `COMMENT`, `"BEGIN SPACE"`, `"BEGIN TAB"`,
  `"LINE TOO SHORT"`, `"LINE TOO LONG"`, `"SPACE NOT FOUND"`,
  `"CANDIDATES TOO SHORT"`, `"MULTI SPACE"`, `"ILLEGAL CANDIDATES"`) or
  returns `None`. `iter_valid_lines` yields `(line_number, line)` pairs and
  reports every skipped line except comments through a `warn` callback.
- `yaskk.block_search` – `BlockInformation` (first midashi, offset and length
  of a block), `is_okuri_ari` for EUC midashi, and `loop_start_hint_index` /
  `block_informations_index` to find the block that may hold a midashi in a
  list ordered by midashi in descending order. `BrokenDictionaryError` is
  raised by the lookup and splitting functions on malformed data.
- `yaskk.block_lookup` – `protocol_midashi` strips the command byte and the
  trailing space from a request such as `b"1midashi "`; `find_candidates`
  returns the candidates of a midashi (`b"/a/b/"`) or `None`; `find_abbrev`
  collects okuri-nasi midashi that start with a prefix, up to a limit.
  Block bytes are supplied by a `read_block(information)` callable.
- `yaskk.jisyo_writer` – `Encoding` (`EUC`, `UTF8`), `split_okuri_entries`
  to split a string block into okuri-ari and okuri-nasi maps, and
  `write_jisyo` to write a JISYO file with its header, okuri-ari entries in
  descending order and okuri-nasi entries in ascending order.
- `yaskk.google_response` – UTF-8 kana classification
  (`is_utf8_hiragana`, `is_utf8_katakana`, `is_utf8_hankaku_katakana` and
  their `*_only` forms), `should_add` filtering, and parsing of response
  bodies: `parse_japanese_input_response` (JSON) and
  `parse_suggest_response` (XML). Both raise `RequestError` when nothing
  usable is found.
- `yaskk.validators` – checks for server option values (port, connections,
  listen address, hostname for protocol 3, timeouts, cache limits,
  completions). Each returns the parsed value or raises `ValidationError`.
- `yaskk.config_file` – `parse_config_lines` reads `key = value` lines
  (lines starting with `;` or `#` are comments); `ConfigFile` applies them to
  a configuration object only where it still holds the default value, so
  values set elsewhere take precedence. `GoogleTiming` names when Google is
  consulted; invalid values raise `ConfigFileError`.
- `yaskk.make_dictionary_cli` – `parse_arguments(argv)` parses the options of
  a dictionary maker (`jisyo` paths, `--dictionary-filename`,
  `--cache-filename`, `--utf8`, `--output-jisyo-filename`, `--verbose`) into
  a `MakeDictionaryOptions`. It prints the help and raises `SystemExit` when
  neither jisyo nor an output jisyo is given, or jisyo are given without a
  dictionary filename.

## Examples

```python
import io
from yaskk.jisyo_reader import iter_jisyo_lines, skip_reason, COMMENT

list(iter_jisyo_lines(io.BytesIO(b"a /b/\r\nc /d/\r")))  # [b'a /b/', b'c /d/']
skip_reason(b";; comment") == COMMENT                      # True
skip_reason(b"a  /b/")                                     # 'MULTI SPACE'
```

```python
from yaskk.block_search import BlockInformation, is_okuri_ari
from yaskk.block_lookup import find_candidates

is_okuri_ari("あs".encode("euc_jp"))  # True

block = b"\nabc /x/y/\n"
informations = [BlockInformation(b"a", 0, len(block))]
find_candidates(b"abc", informations,
                lambda info: block[info.offset:info.offset + info.length])
# b'/x/y/'
```

```python
from yaskk.google_response import is_utf8_hiragana_only, parse_suggest_response

is_utf8_hiragana_only("あん".encode())  # True
parse_suggest_response('<toplevel><suggestion data="へんかん"/></toplevel>')
# ['へんかん'.encode()]
```

```python
from yaskk.validators import port_validator, ValidationError

port_validator("8080")   # 8080
port_validator("70000")  # raises ValidationError("illegal port number")
```

## What the package does not do

- It does not write the binary dictionary file itself: there is no code here
  for laying out its header and index or computing its checksum, nor for
  cutting entry buffers into search blocks.
- It keeps no cache of Google candidates, and it makes no network requests:
  response bodies must be fetched by the caller and handed to
  `yaskk.google_response`.
- It contains no SKK server and installs no commands; `parse_arguments` only
  parses options.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.