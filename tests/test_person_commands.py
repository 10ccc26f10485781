"""
Tests for add, edit, delete and clear.
"""
from dataclasses import replace

import pytest

from recruit.commands.messages import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
from recruit.commands.person_commands import (
    MESSAGE_DUPLICATE_PERSON,
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
)
from recruit.services.address_book import AddressBook, Model
from recruit.services.exceptions import DuplicateError, NotFoundError
from recruit.services.person import Email, IdentityPolicy, Name, Phone
from tests.fixtures.command_helpers import assert_command_failure, assert_command_success
from tests.fixtures.typical_persons import ALICE, AMY, BENSON, BOB, CARL

pytestmark = pytest.mark.unit


def show_only(model, person):
    model.update_filtered_person_list(lambda p: p == person)


class TestAddCommand:
    """Tests for AddCommand."""

    def test_add_new_person(self, model, expected_model):
        expected_model.add_person(AMY)
        assert_command_success(
            AddCommand(AMY), model, f"New person added: {AMY}", expected_model
        )
        assert model.get_person_list()[-1] == AMY

    def test_add_to_empty_model(self, empty_model):
        AddCommand(BOB).execute(empty_model)
        assert empty_model.get_person_list() == (BOB,)

    def test_duplicate_identity_rejected(self, model):
        same_name = replace(BOB, name=ALICE.name)
        assert_command_failure(AddCommand(same_name), model, DuplicateError, MESSAGE_DUPLICATE_PERSON)

    def test_duplicate_under_ignore_case_policy(self):
        model = Model(AddressBook([ALICE], identity=IdentityPolicy.NAME_IGNORE_CASE))
        command = AddCommand(replace(ALICE, name=Name("alice PAULINE")))
        assert_command_failure(command, model, DuplicateError, MESSAGE_DUPLICATE_PERSON)

    def test_add_shows_everyone_again(self, model):
        show_only(model, ALICE)
        AddCommand(AMY).execute(model)
        assert len(model.get_filtered_person_list()) == len(model.get_person_list())

    def test_equality(self):
        assert AddCommand(AMY) == AddCommand(AMY)
        assert AddCommand(AMY) != AddCommand(BOB)

    def test_mutates_model(self):
        assert AddCommand.mutates_model


class TestEditPersonDescriptor:
    def test_nothing_edited(self):
        assert not EditPersonDescriptor().is_any_field_edited()

    def test_apply_keeps_unset_fields_and_tags(self):
        descriptor = EditPersonDescriptor(phone=Phone("12345"))
        edited = descriptor.apply_to(BENSON)
        assert edited.phone == Phone("12345")
        assert edited.name == BENSON.name
        assert edited.email == BENSON.email
        assert edited.tags == BENSON.tags


class TestEditCommand:
    """Tests for EditCommand."""

    def test_edit_all_fields(self, model, expected_model):
        descriptor = EditPersonDescriptor(
            name=BOB.name, phone=BOB.phone, email=BOB.email, address=BOB.address
        )
        edited = replace(BOB, tags=ALICE.tags)
        expected_model.set_person(ALICE, edited)

        assert_command_success(
            EditCommand(1, descriptor), model, f"Edited Person: {edited}", expected_model
        )

    def test_edit_some_fields(self, model, expected_model):
        descriptor = EditPersonDescriptor(phone=Phone("91234567"), email=Email("carl@example.com"))
        edited = replace(CARL, phone=Phone("91234567"), email=Email("carl@example.com"))
        expected_model.set_person(CARL, edited)

        assert_command_success(
            EditCommand(3, descriptor), model, f"Edited Person: {edited}", expected_model
        )

    def test_edit_keeps_same_name(self, model):
        descriptor = EditPersonDescriptor(name=ALICE.name)
        EditCommand(1, descriptor).execute(model)
        assert model.get_person_list()[0] == ALICE

    def test_edit_in_filtered_list(self, model, expected_model):
        show_only(model, BENSON)
        descriptor = EditPersonDescriptor(name=Name("Benson Renamed"))
        edited = replace(BENSON, name=Name("Benson Renamed"))

        expected_model.set_person(BENSON, edited)
        expected_model.update_filtered_person_list(lambda p: p == BENSON)

        assert_command_success(
            EditCommand(1, descriptor), model, f"Edited Person: {edited}", expected_model
        )
        # The edited record no longer equals BENSON, so the view is now empty
        assert model.get_filtered_person_list() == ()

    def test_edit_into_existing_name_rejected(self, model):
        descriptor = EditPersonDescriptor(name=BENSON.name)
        assert_command_failure(EditCommand(1, descriptor), model, DuplicateError, MESSAGE_DUPLICATE_PERSON)

    def test_edit_case_change_allowed_under_ignore_case_policy(self):
        model = Model(AddressBook([ALICE, BENSON], identity=IdentityPolicy.NAME_IGNORE_CASE))
        EditCommand(1, EditPersonDescriptor(name=Name("ALICE PAULINE"))).execute(model)
        assert model.get_person_list()[0].name == Name("ALICE PAULINE")

    def test_invalid_index(self, model):
        descriptor = EditPersonDescriptor(phone=Phone("123"))
        out_of_range = len(model.get_filtered_person_list()) + 1
        assert_command_failure(
            EditCommand(out_of_range, descriptor), model, NotFoundError, MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
        )

    def test_index_beyond_filtered_list(self, model):
        show_only(model, ALICE)
        assert_command_failure(
            EditCommand(2, EditPersonDescriptor(phone=Phone("123"))), model, NotFoundError
        )


class TestDeleteCommand:
    """Tests for DeleteCommand."""

    def test_delete_first(self, model, expected_model):
        expected_model.delete_person(ALICE)
        assert_command_success(DeleteCommand(1), model, f"Deleted Person: {ALICE}", expected_model)

    def test_delete_in_filtered_list(self, model, expected_model):
        show_only(model, BENSON)
        expected_model.delete_person(BENSON)
        expected_model.update_filtered_person_list(lambda p: False)

        assert_command_success(DeleteCommand(1), model, f"Deleted Person: {BENSON}", expected_model)
        assert BENSON not in model.get_person_list()

    def test_invalid_index(self, model):
        out_of_range = len(model.get_filtered_person_list()) + 1
        assert_command_failure(
            DeleteCommand(out_of_range), model, NotFoundError, MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
        )

    def test_index_beyond_filtered_list(self, model):
        show_only(model, ALICE)
        assert_command_failure(DeleteCommand(2), model, NotFoundError)

    def test_delete_from_empty(self, empty_model):
        assert_command_failure(DeleteCommand(1), empty_model, NotFoundError)

    def test_equality(self):
        assert DeleteCommand(1) == DeleteCommand(1)
        assert DeleteCommand(1) != DeleteCommand(2)


class TestClearCommand:
    def test_clear(self, model):
        result = ClearCommand().execute(model)
        assert result.feedback_to_user == ClearCommand.MESSAGE_SUCCESS
        assert model.get_person_list() == ()

    def test_clear_empty(self, empty_model):
        assert_command_success(ClearCommand(), empty_model, ClearCommand.MESSAGE_SUCCESS, Model())

    def test_clear_keeps_identity_policy(self):
        model = Model(AddressBook([ALICE], identity=IdentityPolicy.NAME_IGNORE_CASE))
        ClearCommand().execute(model)
        assert model.identity is IdentityPolicy.NAME_IGNORE_CASE
