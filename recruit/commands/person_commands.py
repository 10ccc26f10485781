"""Commands that add, edit, delete or clear person records."""
import logging
from dataclasses import dataclass, replace
from typing import Optional

from recruit.commands.base import Command, CommandResult, get_displayed_person
from recruit.services.address_book import AddressBook, Model
from recruit.services.exceptions import DuplicateError
from recruit.services.person import Address, Email, Name, Person, Phone

logger = logging.getLogger(__name__)

MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"


@dataclass(frozen=True)
class AddCommand(Command):
    """Adds a person to the address book."""

    to_add: Person

    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add: Adds a person to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com "
        "a/311, Clementi Ave 2, #02-25 t/friends t/owesMoney"
    )
    SHORT_MESSAGE_USAGE = "add n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]...: Adds a person."
    MESSAGE_SUCCESS = "New person added: {}"

    mutates_model = True

    def execute(self, model: Model) -> CommandResult:
        if model.has_person(self.to_add):
            raise DuplicateError(MESSAGE_DUPLICATE_PERSON)

        model.add_person(self.to_add)
        logger.info(f"Added person '{self.to_add.name}'")
        return CommandResult(self.MESSAGE_SUCCESS.format(self.to_add))


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Fields to change on a person; None means keep the current value."""

    name: Optional[Name] = None
    phone: Optional[Phone] = None
    email: Optional[Email] = None
    address: Optional[Address] = None

    def is_any_field_edited(self) -> bool:
        return any(value is not None for value in (self.name, self.phone, self.email, self.address))

    def apply_to(self, person: Person) -> Person:
        changes = {
            field_name: value
            for field_name, value in (
                ("name", self.name),
                ("phone", self.phone),
                ("email", self.email),
                ("address", self.address),
            )
            if value is not None
        }
        return replace(person, **changes)


@dataclass(frozen=True)
class EditCommand(Command):
    """Edits the contact fields of a displayed person. Tags are left as they are."""

    index: int
    descriptor: EditPersonDescriptor

    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit: Edits the details of the person identified by the index number used in the "
        "displayed person list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS]\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )
    SHORT_MESSAGE_USAGE = "edit INDEX [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS]: Edits a person."
    MESSAGE_EDIT_PERSON_SUCCESS = "Edited Person: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

    mutates_model = True

    def execute(self, model: Model) -> CommandResult:
        person_to_edit = get_displayed_person(model, self.index)
        edited_person = self.descriptor.apply_to(person_to_edit)

        if not model.identity.matches(person_to_edit, edited_person) and model.has_person(edited_person):
            raise DuplicateError(MESSAGE_DUPLICATE_PERSON)

        model.set_person(person_to_edit, edited_person)
        logger.info(f"Edited person '{person_to_edit.name}' -> '{edited_person.name}'")
        return CommandResult(self.MESSAGE_EDIT_PERSON_SUCCESS.format(edited_person))


@dataclass(frozen=True)
class DeleteCommand(Command):
    """Deletes a displayed person."""

    index: int

    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the person identified by the index number used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )
    SHORT_MESSAGE_USAGE = "delete INDEX: Deletes a person."
    MESSAGE_DELETE_PERSON_SUCCESS = "Deleted Person: {}"

    mutates_model = True

    def execute(self, model: Model) -> CommandResult:
        person_to_delete = get_displayed_person(model, self.index)
        model.delete_person(person_to_delete)
        logger.info(f"Deleted person '{person_to_delete.name}'")
        return CommandResult(self.MESSAGE_DELETE_PERSON_SUCCESS.format(person_to_delete))


@dataclass(frozen=True)
class ClearCommand(Command):
    """Removes every person."""

    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear: Deletes all persons from the address book.\nExample: clear"
    SHORT_MESSAGE_USAGE = "clear: Deletes all persons."
    MESSAGE_SUCCESS = "Address book has been cleared!"

    mutates_model = True

    def execute(self, model: Model) -> CommandResult:
        model.set_address_book(AddressBook(identity=model.identity))
        return CommandResult(self.MESSAGE_SUCCESS)
