"""
Parsing of primitive argument values.

Field validation lives in the value types; these helpers trim input, build
the value and turn a ValidationError into a ParseError with the same
constraint message.
"""
import re
from typing import Iterable

from recruit.parser.cli_syntax import ArgumentMultimap, Prefix
from recruit.services.exceptions import ParseError, ValidationError
from recruit.services.person import Address, Email, Name, Phone
from recruit.services.tags import Tag, Tags

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

_UNSIGNED_INT = re.compile(r"[0-9]+")


def parse_index(one_based_index: str) -> int:
    """
    Parse a 1-based index.

    Raises:
        ParseError: not a positive integer
    """
    trimmed = one_based_index.strip()
    if not _UNSIGNED_INT.fullmatch(trimmed) or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(trimmed)


def _parse_value(value_type, raw: str):
    try:
        return value_type(raw.strip())
    except ValidationError as e:
        raise ParseError(e.message) from e


def parse_name(name: str) -> Name:
    return _parse_value(Name, name)


def parse_phone(phone: str) -> Phone:
    return _parse_value(Phone, phone)


def parse_email(email: str) -> Email:
    return _parse_value(Email, email)


def parse_address(address: str) -> Address:
    return _parse_value(Address, address)


def parse_tag(tag: str) -> Tag:
    return _parse_value(Tag, tag)


def parse_tags(tags: Iterable[str]) -> Tags:
    return Tags(parse_tag(tag) for tag in tags)


def are_prefixes_present(multimap: ArgumentMultimap, *prefixes: Prefix) -> bool:
    return all(multimap.is_present(prefix) for prefix in prefixes)
