"""
JSON persistence for the address book.

The whole document is read or written at once:

    {"persons": [{"name": ..., "phone": ..., "email": ..., "address": ..., "tags": [...]}]}

The document shape is declared with pydantic models. Field values are then
re-validated through the same value types as live input, so a hand-edited
file with a bad tag or a duplicate person fails to load instead of
producing an inconsistent model.
"""
import json
import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from recruit.services.address_book import AddressBook
from recruit.services.exceptions import DataLoadingError, DuplicatePersonError, ValidationError
from recruit.services.person import Address, Email, IdentityPolicy, Name, Person, Phone
from recruit.services.tags import Tags

logger = logging.getLogger(__name__)

MISSING_FIELD_MESSAGE_FORMAT = "Person's {} field is missing!"


class JsonAdaptedPerson(BaseModel):
    """Stored form of a Person."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def from_model(cls, person: Person) -> "JsonAdaptedPerson":
        return cls(
            name=person.name.value,
            phone=person.phone.value,
            email=person.email.value,
            address=person.address.value,
            tags=person.tags.to_strings(),
        )

    def to_model_type(self) -> Person:
        """
        Convert back to a Person.

        Raises:
            ValidationError: a field is missing or violates its format rule
        """
        fields = {}
        for field_name, field_type in (
            ("name", Name),
            ("phone", Phone),
            ("email", Email),
            ("address", Address),
        ):
            raw = getattr(self, field_name)
            if raw is None:
                raise ValidationError(MISSING_FIELD_MESSAGE_FORMAT.format(field_type.__name__))
            fields[field_name] = field_type(raw)

        return Person(tags=Tags.from_strings(self.tags), **fields)


class JsonSerializableAddressBook(BaseModel):
    """Stored form of the whole address book."""

    model_config = ConfigDict(extra="ignore")

    persons: list[JsonAdaptedPerson] = Field(default_factory=list)

    @classmethod
    def from_model(cls, address_book: AddressBook) -> "JsonSerializableAddressBook":
        return cls(persons=[JsonAdaptedPerson.from_model(p) for p in address_book.persons])

    def to_model_type(self, identity: IdentityPolicy = IdentityPolicy.NAME) -> AddressBook:
        """
        Raises:
            ValidationError: a person is invalid
            DuplicatePersonError: two persons share an identity
        """
        persons = [adapted.to_model_type() for adapted in self.persons]
        return AddressBook(persons, identity=identity)


class Storage(Protocol):
    """Whole-document load/save of an address book."""

    @property
    def file_path(self) -> Path: ...

    def load(self) -> Optional[AddressBook]: ...

    def save(self, address_book: AddressBook) -> None: ...


class JsonAddressBookStorage:
    """
    Reads and writes the address book as a JSON file on disk.

    Saves are atomic: the document is written to a temp file beside the
    target, re-read to verify it, then moved over the target. When a backup
    directory is configured, the previous file is copied there first and
    only the newest backup_count copies are kept.
    """

    def __init__(
        self,
        file_path,
        backup_path=None,
        backup_count: int = 2,
        identity: IdentityPolicy = IdentityPolicy.NAME,
    ):
        self._file_path = Path(file_path)
        self.backup_path = Path(backup_path) if backup_path else None
        self.backup_count = backup_count
        self.identity = identity

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self, file_path=None) -> Optional[AddressBook]:
        """
        Load the address book.

        Returns:
            The stored AddressBook, or None if the file does not exist

        Raises:
            DataLoadingError: the file exists but is malformed or invalid
        """
        path = Path(file_path) if file_path is not None else self._file_path
        if not path.exists():
            logger.info(f"No existing data file at {path}")
            return None

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DataLoadingError(f"Could not read {path}: {e}", e) from e

        try:
            document = JsonSerializableAddressBook.model_validate_json(text)
        except pydantic.ValidationError as e:
            logger.info(f"Malformed data found in {path}: {e}")
            raise DataLoadingError(f"Data file {path} is not in the expected format", e) from e

        try:
            address_book = document.to_model_type(self.identity)
        except (ValidationError, DuplicatePersonError) as e:
            logger.info(f"Illegal values found in {path}: {e.message}")
            raise DataLoadingError(f"Illegal values found in {path}: {e.message}", e) from e

        logger.info(f"Loaded {len(address_book)} persons from {path}")
        return address_book

    def save(self, address_book: AddressBook, file_path=None) -> None:
        """
        Write the whole address book.

        Raises:
            OSError: the file could not be written
        """
        path = Path(file_path) if file_path is not None else self._file_path
        path.parent.mkdir(parents=True, exist_ok=True)
        data = JsonSerializableAddressBook.from_model(address_book).model_dump()

        if path.exists() and self.backup_path is not None and self.backup_count > 0:
            self._backup(path)

        temp_fd, temp_path = tempfile.mkstemp(suffix=".json", dir=path.parent)
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)

            # Re-read and verify count before replacing the real file
            with open(temp_path, encoding="utf-8") as f:
                validated = json.load(f)
            if len(validated["persons"]) != len(data["persons"]):
                raise OSError(
                    f"Write validation failed: expected {len(data['persons'])} persons, "
                    f"got {len(validated['persons'])}"
                )

            shutil.move(temp_path, path)
            logger.info(f"Saved {len(data['persons'])} persons to {path}")
        except Exception:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def _backup(self, path: Path) -> None:
        """Copy the current file into the backup directory and prune old copies."""
        try:
            self.backup_path.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            backup_file = self.backup_path / f"{path.stem}.{timestamp}{path.suffix}"
            shutil.copy(path, backup_file)
            logger.info(f"Created backup: {backup_file}")

            backups = sorted(self.backup_path.glob(f"{path.stem}.*{path.suffix}"))
            for old_backup in backups[:-self.backup_count]:
                old_backup.unlink()
                logger.debug(f"Removed old backup: {old_backup}")
        except OSError as e:
            # Backup failure shouldn't block saves
            logger.warning(f"Could not create backup: {e}")
