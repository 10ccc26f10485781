"""User-facing messages shared across commands and parsers."""
from typing import Iterable

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


def duplicate_prefixes_message(prefixes: Iterable) -> str:
    unique = sorted({str(prefix) for prefix in prefixes})
    return MESSAGE_DUPLICATE_FIELDS + " ".join(unique)
