"""
In-memory contact store.

- UniquePersonList: ordered persons, no two sharing an identity
- AddressBook: the persistable snapshot handed to and from storage
- Model: the live, mutable context object commands run against. Owns the
  address book, the active save-file path and the filter predicate behind
  the displayed list.
"""
import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from recruit.services.exceptions import DuplicatePersonError, PersonNotFoundError
from recruit.services.person import IdentityPolicy, Person

logger = logging.getLogger(__name__)

PersonPredicate = Callable[[Person], bool]


def show_all_persons(person: Person) -> bool:
    """Default filter predicate: everyone is visible."""
    return True


class UniquePersonList:
    """
    Ordered list of persons, unique under an IdentityPolicy.

    Lookups for update/removal use exact equality, duplicate checks use the
    identity policy.
    """

    def __init__(self, identity: IdentityPolicy = IdentityPolicy.NAME):
        self.identity = identity
        self._persons: list[Person] = []

    def contains(self, person: Person) -> bool:
        """True if some stored person has the same identity as person."""
        return any(self.identity.matches(existing, person) for existing in self._persons)

    def add(self, person: Person) -> None:
        if self.contains(person):
            raise DuplicatePersonError()
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """
        Replace target (matched exactly) with edited.

        Raises:
            PersonNotFoundError: target is not in the list
            DuplicatePersonError: edited shares an identity with another record
        """
        try:
            index = self._persons.index(target)
        except ValueError:
            raise PersonNotFoundError() from None

        for i, existing in enumerate(self._persons):
            if i != index and self.identity.matches(existing, edited):
                raise DuplicatePersonError()

        self._persons[index] = edited

    def remove(self, person: Person) -> None:
        try:
            self._persons.remove(person)
        except ValueError:
            raise PersonNotFoundError() from None

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace the whole contents. Rejects input containing duplicates."""
        persons = list(persons)
        for i, person in enumerate(persons):
            if any(self.identity.matches(person, other) for other in persons[i + 1:]):
                raise DuplicatePersonError("Persons list contains duplicate person(s).")
        self._persons = persons

    def as_tuple(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(tuple(self._persons))

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other):
        if not isinstance(other, UniquePersonList):
            return NotImplemented
        return self._persons == other._persons


class AddressBook:
    """Collection of unique persons; the unit storage loads and saves."""

    def __init__(self, persons: Iterable[Person] = (), identity: IdentityPolicy = IdentityPolicy.NAME):
        self._persons = UniquePersonList(identity)
        self._persons.set_persons(persons)

    @property
    def identity(self) -> IdentityPolicy:
        return self._persons.identity

    @property
    def persons(self) -> tuple[Person, ...]:
        """Read-only snapshot of the persons, in order."""
        return self._persons.as_tuple()

    def reset_data(self, new_data: "AddressBook") -> None:
        self._persons.set_persons(new_data.persons)

    def has_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self._persons.set_person(target, edited)

    def remove_person(self, person: Person) -> None:
        self._persons.remove(person)

    def copy(self) -> "AddressBook":
        return AddressBook(self.persons, identity=self.identity)

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other):
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self.persons == other.persons

    def __repr__(self):
        return f"AddressBook({len(self)} persons)"


class Model:
    """
    Live application state for one session.

    The filtered list is re-derived from the full list and the current
    predicate on every read, so it never lags behind a mutation.
    """

    def __init__(
        self,
        address_book: Optional[AddressBook] = None,
        data_path: Optional[Path] = None,
        identity: Optional[IdentityPolicy] = None,
    ):
        if identity is None:
            identity = address_book.identity if address_book is not None else IdentityPolicy.NAME
        self._address_book = AddressBook(
            address_book.persons if address_book is not None else (),
            identity=identity,
        )
        self._data_path = Path(data_path) if data_path is not None else None
        self._predicate: PersonPredicate = show_all_persons
        logger.debug(f"Initialized model with {len(self._address_book)} persons")

    @property
    def data_path(self) -> Optional[Path]:
        """Path of the save file this session reads from and writes to."""
        return self._data_path

    @data_path.setter
    def data_path(self, value) -> None:
        self._data_path = Path(value) if value is not None else None

    @property
    def identity(self) -> IdentityPolicy:
        return self._address_book.identity

    def get_address_book(self) -> AddressBook:
        """Snapshot of the full address book (safe to hand to storage)."""
        return self._address_book.copy()

    def set_address_book(self, address_book: AddressBook) -> None:
        self._address_book.reset_data(address_book)

    def has_person(self, person: Person) -> bool:
        return self._address_book.has_person(person)

    def add_person(self, person: Person) -> None:
        self._address_book.add_person(person)
        self.update_filtered_person_list(show_all_persons)

    def delete_person(self, target: Person) -> None:
        """Remove the record equal to target (full equality, not identity)."""
        self._address_book.remove_person(target)

    def set_person(self, target: Person, edited: Person) -> None:
        self._address_book.set_person(target, edited)

    def get_person_list(self) -> tuple[Person, ...]:
        return self._address_book.persons

    def get_filtered_person_list(self) -> tuple[Person, ...]:
        return tuple(p for p in self._address_book.persons if self._predicate(p))

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        if predicate is None:
            raise ValueError("A filter predicate is required; use show_all_persons to show everyone")
        self._predicate = predicate

    def __eq__(self, other):
        if not isinstance(other, Model):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self.get_filtered_person_list() == other.get_filtered_person_list()
        )
