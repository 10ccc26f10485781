"""
RecruitTrack Services Package.

Domain values, the in-memory model and persistence.

Example:
    from recruit.services import Model, Person, Tags, JsonAddressBookStorage

Key service modules:
- tags: Tag and the immutable Tags set
- person: Person record, field value types, IdentityPolicy
- address_book: UniquePersonList, AddressBook and the live Model
- storage: JSON load/save of an AddressBook
- exceptions: error taxonomy shared by every layer
"""

from recruit.services.address_book import (
    AddressBook,
    Model,
    UniquePersonList,
    show_all_persons,
)
from recruit.services.exceptions import (
    CommandError,
    DataLoadingError,
    DuplicateError,
    DuplicatePersonError,
    NotFoundError,
    ParseError,
    PersonNotFoundError,
    RecruitError,
    ValidationError,
)
from recruit.services.person import Address, Email, IdentityPolicy, Name, Person, Phone
from recruit.services.storage import JsonAddressBookStorage, Storage
from recruit.services.tags import Tag, Tags, TagSeparationResult

__all__ = [
    "Address",
    "AddressBook",
    "CommandError",
    "DataLoadingError",
    "DuplicateError",
    "DuplicatePersonError",
    "Email",
    "IdentityPolicy",
    "JsonAddressBookStorage",
    "Model",
    "Name",
    "NotFoundError",
    "ParseError",
    "Person",
    "PersonNotFoundError",
    "Phone",
    "RecruitError",
    "Storage",
    "Tag",
    "TagSeparationResult",
    "Tags",
    "UniquePersonList",
    "ValidationError",
    "show_all_persons",
]
