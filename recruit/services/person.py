"""
Person - an immutable contact record plus its tags.

Scalar fields are small value types that validate on construction. Any
edit produces a new Person via dataclasses.replace(); the model swaps the
old record for the new one.

Two comparisons exist and must not be mixed up:
- ``==`` is full value equality (used to find the exact record to delete)
- ``IdentityPolicy.matches`` is the weaker "same person" check used for
  duplicate detection
"""
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar

from recruit.services.exceptions import ValidationError
from recruit.services.tags import Tags


@dataclass(frozen=True)
class _FieldValue:
    """Base for single-string fields validated against a pattern."""

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    PATTERN: ClassVar[re.Pattern] = re.compile(r".*")

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.is_valid(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return cls.PATTERN.fullmatch(test) is not None

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Name(_FieldValue):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    # First character must not be whitespace, otherwise " " is a valid name
    PATTERN: ClassVar[re.Pattern] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")


@dataclass(frozen=True)
class Phone(_FieldValue):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    PATTERN: ClassVar[re.Pattern] = re.compile(r"\d{3,}")


_ALNUM = r"[A-Za-z0-9]+"
_LOCAL_PART = rf"{_ALNUM}(?:[+_.\-]{_ALNUM})*"
_DOMAIN_LABEL = rf"{_ALNUM}(?:-{_ALNUM})*"
# Last label is at least two characters long
_DOMAIN = rf"(?:{_DOMAIN_LABEL}\.)*(?=[A-Za-z0-9-]{{2,}}$){_DOMAIN_LABEL}"


@dataclass(frozen=True)
class Email(_FieldValue):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special "
        "characters, excluding the parentheses, (+_.-). The local-part may not start or end "
        "with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of "
        "domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by "
        "hyphens, if any."
    )
    PATTERN: ClassVar[re.Pattern] = re.compile(rf"{_LOCAL_PART}@{_DOMAIN}")


@dataclass(frozen=True)
class Address(_FieldValue):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values, and it should not be blank"
    PATTERN: ClassVar[re.Pattern] = re.compile(r"\S.*", re.DOTALL)


@dataclass(frozen=True)
class Person:
    """A contact. Immutable; use with_tags()/dataclasses.replace() to derive edits."""

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: Tags = field(default_factory=Tags)

    def with_tags(self, tags: Tags) -> "Person":
        """Return a copy of this person carrying the given tags."""
        return replace(self, tags=tags)

    def __str__(self):
        tags = "".join(str(tag) for tag in self.tags)
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}; Tags: {tags}"
        )


class IdentityPolicy(str, Enum):
    """Rule deciding whether two records describe the same person."""

    NAME = "name"
    NAME_IGNORE_CASE = "name_ignore_case"

    def matches(self, first: Person, second: Person) -> bool:
        if first is second:
            return True
        if first is None or second is None:
            return False
        if self is IdentityPolicy.NAME_IGNORE_CASE:
            return first.name.value.casefold() == second.name.value.casefold()
        return first.name == second.name
