"""Command-line options of the dictionary maker."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from dataclasses import dataclass, field

from yaskk.jisyo_writer import Encoding

__all__ = ["MakeDictionaryOptions", "parse_arguments"]


@dataclass
class MakeDictionaryOptions:
    """Settings chosen on the command line of the dictionary maker."""

    jisyo_full_paths: list[str] = field(default_factory=list)
    dictionary_full_path: str = ""
    input_cache_full_path: str = ""
    output_jisyo_full_path: str = ""
    encoding: Encoding = Encoding.EUC
    is_verbose: bool = False


def _existing_jisyo(value: str) -> str:
    if not os.path.exists(value):
        raise argparse.ArgumentTypeError(f'jisyo "{value}" not found')
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yaskk-make-dictionary",
        description="Create a dictionary from SKK-JISYO files, or a jisyo from a dictionary.",
    )
    parser.add_argument(
        "jisyo", nargs="*", type=_existing_jisyo, help="SKK-JISYO (EUC or UTF8)"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--dictionary-filename", metavar="FILENAME", help="dictionary filename"
    )
    source.add_argument("--cache-filename", metavar="FILENAME", help="cache filename")
    parser.add_argument("--utf8", action="store_true", help="create utf8 dictionary")
    parser.add_argument(
        "--output-jisyo-filename", metavar="FILENAME", help="output jisyo filename"
    )
    parser.add_argument("--verbose", action="store_true", help="verbose mode")
    return parser


def parse_arguments(argv: Sequence[str] | None = None) -> MakeDictionaryOptions:
    """Parse the command line.

    Print the help and raise SystemExit when the options do not describe a
    job: neither jisyo nor output jisyo given, or jisyo given without a
    dictionary filename.
    """
    parser = _build_parser()
    arguments = parser.parse_intermixed_args(argv)
    jisyo = list(arguments.jisyo or [])
    if len(set(jisyo)) != len(jisyo):
        print("Warning: SAME JISYO FOUND")
    options = MakeDictionaryOptions(
        jisyo_full_paths=jisyo,
        dictionary_full_path=arguments.dictionary_filename or "",
        input_cache_full_path=arguments.cache_filename or "",
        output_jisyo_full_path=arguments.output_jisyo_filename or "",
        encoding=Encoding.UTF8 if arguments.utf8 else Encoding.EUC,
        is_verbose=arguments.verbose,
    )
    if options.jisyo_full_paths:
        incomplete = not options.dictionary_full_path
    else:
        incomplete = not options.output_jisyo_full_path
    if incomplete:
        parser.print_help()
        print()
        raise SystemExit(1)
    return options