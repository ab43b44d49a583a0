"""Validation of server option values given on the command line or in a config file."""

from __future__ import annotations

import ipaddress
import os
import re

__all__ = [
    "ValidationError",
    "range_validator",
    "dictionary_validator",
    "port_validator",
    "max_connections_validator",
    "listen_address_validator",
    "hostname_and_ip_address_validator",
    "google_timeout_milliseconds_validator",
    "google_cache_entries_validator",
    "google_cache_expire_seconds_validator",
    "google_max_candidates_length_validator",
    "max_server_completions_validator",
]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_PRINTABLE_ASCII = re.compile(r"[\x21-\x7e]+")

MAX_TIMEOUT_MILLISECONDS = 5 * 60 * 1000
MAX_CACHE_ENTRIES = 1024 * 1024
MAX_EXPIRE_SECONDS = 100 * 365 * 24 * 60 * 60
MAX_CANDIDATES_LENGTH = 1024
MAX_SERVER_COMPLETIONS = 64 * 1024


class ValidationError(ValueError):
    """An option value is malformed or out of range."""


def range_validator(value: str, message: str, minimum: int, maximum: int) -> int:
    """Parse ``value`` as a decimal integer within ``[minimum, maximum]``.

    Raise ValidationError carrying ``message`` otherwise.
    """
    if not _INTEGER.fullmatch(value):
        raise ValidationError(message)
    number = int(value)
    if number < minimum or number > maximum:
        raise ValidationError(message)
    return number


def dictionary_validator(value: str) -> str:
    """Check that the dictionary path exists."""
    if not os.path.exists(value):
        raise ValidationError(f'dictionary "{value}" not found')
    return value


def port_validator(value: str) -> int:
    """Check a TCP port number."""
    return range_validator(value, "illegal port number", 0, 65535)


def max_connections_validator(value: str, max_connection: int) -> int:
    """Check the number of simultaneous connections against ``max_connection``."""
    return range_validator(value, "illegal max connection range", 1, max_connection)


def listen_address_validator(value: str) -> str:
    """Check that the value is an IPv4 or IPv6 address."""
    if "%" in value:
        raise ValidationError("illegal listen address")
    try:
        ipaddress.ip_address(value)
    except ValueError as error:
        raise ValidationError("illegal listen address") from error
    return value


def hostname_and_ip_address_validator(value: str) -> str:
    """Check that the value is a non-empty run of printable ASCII without spaces."""
    if not _PRINTABLE_ASCII.fullmatch(value):
        raise ValidationError("illegal hostname/IP")
    return value


def google_timeout_milliseconds_validator(value: str) -> int:
    """Check the request timeout in milliseconds."""
    return range_validator(
        value, "illegal timeout milliseconds", 0, MAX_TIMEOUT_MILLISECONDS
    )


def google_cache_entries_validator(value: str) -> int:
    """Check the maximum number of cache entries."""
    return range_validator(value, "illegal cache entries", 1, MAX_CACHE_ENTRIES)


def google_cache_expire_seconds_validator(value: str) -> int:
    """Check the cache expiry time in seconds."""
    return range_validator(value, "illegal expire seconds", 1, MAX_EXPIRE_SECONDS)


def google_max_candidates_length_validator(value: str) -> int:
    """Check the maximum number of candidates taken from a response."""
    return range_validator(
        value, "illegal candidates length", 1, MAX_CANDIDATES_LENGTH
    )


def max_server_completions_validator(value: str) -> int:
    """Check the maximum number of completions returned by the server."""
    return range_validator(
        value, "illegal max server completions", 1, MAX_SERVER_COMPLETIONS
    )