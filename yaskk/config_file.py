"""Reading of the server's ``key = value`` configuration file.

A value from the file is applied only when the configuration still holds
the default for that setting, so command-line options take precedence.
"""

from __future__ import annotations

import copy
import enum
import re
from collections.abc import Iterable, Mapping
from typing import Any

from yaskk import validators
from yaskk.validators import ValidationError

__all__ = ["GoogleTiming", "ConfigFileError", "ConfigFile", "parse_config_lines"]

_COMMENT = re.compile(r"\s*[;#]")
_ENTRY = re.compile(r"\s*([^=\s]+)\s*=\s*(.+)")
_ENABLE = re.compile(r"\s*enable\s*", re.IGNORECASE)

_INTEGER_SETTINGS = (
    ("google-timeout-milliseconds", "google_timeout_milliseconds",
     validators.google_timeout_milliseconds_validator),
)
_CACHE_INTEGER_SETTINGS = (
    ("google-cache-entries", "google_cache_entries",
     validators.google_cache_entries_validator),
    ("google-cache-expire-seconds", "google_cache_expire_seconds",
     validators.google_cache_expire_seconds_validator),
    ("google-max-candidates-length", "google_max_candidates_length",
     validators.google_max_candidates_length_validator),
    ("max-server-completions", "max_server_completions",
     validators.max_server_completions_validator),
)
_BOOL_SETTINGS = (
    ("google-use-http", "is_http_enabled"),
    ("google-suggest", "is_google_suggest_enabled"),
    ("google-insert-hiragana-only-candidate", "google_insert_hiragana_only_candidate"),
    ("google-insert-katakana-only-candidate", "google_insert_katakana_only_candidate"),
    ("google-insert-hankaku-katakana-only-candidate",
     "google_insert_hankaku_katakana_only_candidate"),
)


class GoogleTiming(enum.Enum):
    """When the Google Japanese Input service is consulted."""

    NOT_FOUND = "notfound"
    DISABLE = "disable"
    LAST = "last"
    FIRST = "first"


class ConfigFileError(Exception):
    """The configuration file holds an invalid value or cannot be read."""


def _chomp(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def parse_config_lines(lines: Iterable[str]) -> dict[str, str]:
    """Collect ``key = value`` pairs; later keys override earlier ones."""
    entries: dict[str, str] = {}
    for raw in lines:
        line = _chomp(raw)
        if len(line.encode("utf-8")) < 2 or _COMMENT.match(line):
            continue
        match = _ENTRY.match(line)
        if match:
            entries[match.group(1)] = match.group(2)
    return entries


class ConfigFile:
    """Merge a configuration file into a configuration object.

    ``config`` and ``default_config`` are objects carrying the server
    settings as attributes; ``config`` is copied, never modified.
    """

    def __init__(self, config: Any, default_config: Any, max_connection: int) -> None:
        self.config = copy.copy(config)
        self.default_config = default_config
        self.max_connection = max_connection

    def read(self, path: str) -> Any:
        """Apply the file at ``path``; a file that cannot be opened is ignored."""
        try:
            handle = open(path, encoding="utf-8", newline="")
        except OSError:
            return self.config
        try:
            with handle:
                entries = parse_config_lines(handle)
        except (OSError, UnicodeDecodeError) as error:
            raise ConfigFileError(str(error)) from error
        return self.apply(entries)

    def _is_default(self, field: str) -> bool:
        return getattr(self.config, field) == getattr(self.default_config, field)

    def _set_integer(self, entries: Mapping[str, str], key: str, field: str, check) -> None:
        if key in entries and self._is_default(field):
            setattr(self.config, field, check(entries[key]))

    def apply(self, entries: Mapping[str, str]) -> Any:
        """Validate and apply parsed entries, returning the resulting configuration."""
        try:
            self._apply(entries)
        except ValidationError as error:
            raise ConfigFileError(str(error)) from error
        return self.config

    def _apply(self, entries: Mapping[str, str]) -> None:
        config = self.config
        if "dictionary" in entries and not config.dictionary_full_path:
            config.dictionary_full_path = validators.dictionary_validator(
                entries["dictionary"]
            )
        if "port" in entries and self._is_default("port"):
            validators.port_validator(entries["port"])
            config.port = entries["port"]
        self._set_integer(
            entries,
            "max-connections",
            "max_connections",
            lambda value: validators.max_connections_validator(value, self.max_connection),
        )
        if "listen-address" in entries and self._is_default("listen_address"):
            config.listen_address = validators.listen_address_validator(
                entries["listen-address"]
            )
        key = "hostname-and-ip-address-for-protocol-3"
        if key in entries and self._is_default("hostname_and_ip_address_for_protocol_3"):
            config.hostname_and_ip_address_for_protocol_3 = (
                validators.hostname_and_ip_address_validator(entries[key])
            )
        for key, field, check in _INTEGER_SETTINGS:
            self._set_integer(entries, key, field, check)
        if "google-cache-filename" in entries and self._is_default("google_cache_full_path"):
            config.google_cache_full_path = entries["google-cache-filename"]
        for key, field, check in _CACHE_INTEGER_SETTINGS:
            self._set_integer(entries, key, field, check)
        if "google-japanese-input" in entries and self._is_default("google_timing"):
            try:
                config.google_timing = GoogleTiming(entries["google-japanese-input"])
            except ValueError:
                config.google_timing = GoogleTiming.NOT_FOUND
        for key, field in _BOOL_SETTINGS:
            if key in entries and self._is_default(field):
                enabled = _ENABLE.fullmatch(entries[key]) is not None
                if enabled and config.google_timing == GoogleTiming.DISABLE:
                    raise ConfigFileError("illegal combination")
                setattr(config, field, enabled)