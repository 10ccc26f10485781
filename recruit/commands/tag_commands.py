"""
Commands that change the tags of one displayed person.

Each computes the minimal change with the Tags set operations and reports
exactly which tags were affected and which were skipped.
"""
import logging
from dataclasses import dataclass

from recruit.commands.base import Command, CommandResult, get_displayed_person
from recruit.services.address_book import Model
from recruit.services.exceptions import DuplicateError, NotFoundError
from recruit.services.tags import Tag, Tags

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddTagsCommand(Command):
    """Adds tags to a person, skipping the ones the person already has."""

    index: int
    tags: Tags

    COMMAND_WORD = "add-tags"
    MESSAGE_USAGE = (
        "add-tags: Adds one or more tags to the person identified by the index number used in "
        "the displayed person list. Tags the person already has are left as they are.\n"
        "Parameters: INDEX (must be a positive integer) t/TAG [t/TAG]...\n"
        "Example: add-tags 1 t/python t/interviewed"
    )
    SHORT_MESSAGE_USAGE = "add-tags INDEX t/TAG [t/TAG]...: Adds tags to a person."
    MESSAGE_ADD_TAGS_SUCCESS = "Added tags {} to {}."
    MESSAGE_ALREADY_TAGGED = "{} already has tags {}."

    mutates_model = True

    def execute(self, model: Model) -> CommandResult:
        person = get_displayed_person(model, self.index)
        new_tags, duplicate_tags = person.tags.separate_new_from_existing(self.tags)

        if new_tags.is_empty():
            raise DuplicateError(self.MESSAGE_ALREADY_TAGGED.format(person.name, duplicate_tags))

        model.set_person(person, person.with_tags(person.tags.combine(new_tags)))
        logger.info(f"Tagged '{person.name}' with {new_tags}")

        message = self.MESSAGE_ADD_TAGS_SUCCESS.format(new_tags, person.name)
        if not duplicate_tags.is_empty():
            message += " " + self.MESSAGE_ALREADY_TAGGED.format(person.name, duplicate_tags)
        return CommandResult(message)


@dataclass(frozen=True)
class RemoveTagsCommand(Command):
    """Removes tags from a person, reporting any the person did not have."""

    index: int
    tags: Tags

    COMMAND_WORD = "remove-tags"
    MESSAGE_USAGE = (
        "remove-tags: Removes one or more tags from the person identified by the index number "
        "used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer) t/TAG [t/TAG]...\n"
        "Example: remove-tags 1 t/python t/interviewed"
    )
    SHORT_MESSAGE_USAGE = "remove-tags INDEX t/TAG [t/TAG]...: Removes tags from a person."
    MESSAGE_REMOVE_TAGS_SUCCESS = "Removed tags {} from {}."
    MESSAGE_TAGS_NOT_FOUND = "{} does not have tags {}."

    mutates_model = True

    def execute(self, model: Model) -> CommandResult:
        person = get_displayed_person(model, self.index)
        # "new" relative to the person means absent from the person
        missing_tags, present_tags = person.tags.separate_new_from_existing(self.tags)

        if present_tags.is_empty():
            raise NotFoundError(self.MESSAGE_TAGS_NOT_FOUND.format(person.name, missing_tags))

        model.set_person(person, person.with_tags(person.tags.exclude(present_tags)))
        logger.info(f"Removed tags {present_tags} from '{person.name}'")

        message = self.MESSAGE_REMOVE_TAGS_SUCCESS.format(present_tags, person.name)
        if not missing_tags.is_empty():
            message += " " + self.MESSAGE_TAGS_NOT_FOUND.format(person.name, missing_tags)
        return CommandResult(message)


@dataclass(frozen=True)
class EditTagCommand(Command):
    """Renames one tag of a person."""

    index: int
    old_tag: Tag
    new_tag: Tag

    COMMAND_WORD = "edit-tag"
    MESSAGE_USAGE = (
        "edit-tag: Replaces one tag of the person identified by the index number used in the "
        "displayed person list.\n"
        "Parameters: INDEX (must be a positive integer) t/OLD_TAG t/NEW_TAG\n"
        "Example: edit-tag 1 t/java t/kotlin"
    )
    SHORT_MESSAGE_USAGE = "edit-tag INDEX t/OLD_TAG t/NEW_TAG: Replaces a tag of a person."
    MESSAGE_EDIT_TAG_SUCCESS = "Replaced tag {} with {} for {}."
    MESSAGE_TAG_NOT_FOUND = "{} does not have the tag {}."
    MESSAGE_TAG_EXISTS = "{} already has the tag {}."

    mutates_model = True

    def execute(self, model: Model) -> CommandResult:
        person = get_displayed_person(model, self.index)
        old_tag = person.tags.get(self.old_tag)

        if old_tag is None:
            raise NotFoundError(self.MESSAGE_TAG_NOT_FOUND.format(person.name, self.old_tag))
        # Same tag in a different case is a re-spelling, not a clash
        if self.new_tag != old_tag and self.new_tag in person.tags:
            raise DuplicateError(self.MESSAGE_TAG_EXISTS.format(person.name, person.tags.get(self.new_tag)))

        model.set_person(person, person.with_tags(person.tags.replace(old_tag, self.new_tag)))
        logger.info(f"Replaced tag {old_tag} with {self.new_tag} for '{person.name}'")
        return CommandResult(self.MESSAGE_EDIT_TAG_SUCCESS.format(old_tag, self.new_tag, person.name))
