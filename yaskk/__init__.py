"""SKK JISYO reading, dictionary block lookup, JISYO writing, Google response parsing and option validation."""

__version__ = "0.1.0"

__all__ = [
    "block_lookup",
    "block_search",
    "config_file",
    "google_response",
    "jisyo_reader",
    "jisyo_writer",
    "make_dictionary_cli",
    "validators",
]