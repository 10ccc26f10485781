"""
One parser per command word.

Each parser takes the argument tail (everything after the command word,
leading whitespace included) and returns a command, or raises ParseError
with a message the user can act on. Parsers never touch the model.
"""
from abc import ABC, abstractmethod

from recruit.commands.base import Command
from recruit.commands.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from recruit.commands.person_commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
)
from recruit.commands.predicates import ContainsKeywordsPredicate
from recruit.commands.tag_commands import AddTagsCommand, EditTagCommand, RemoveTagsCommand
from recruit.commands.view_commands import FindCommand, HelpCommand
from recruit.parser.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    ArgumentMultimap,
    ArgumentTokenizer,
)
from recruit.parser.parser_utils import (
    are_prefixes_present,
    parse_address,
    parse_email,
    parse_index,
    parse_name,
    parse_phone,
    parse_tag,
    parse_tags,
)
from recruit.services.exceptions import ParseError
from recruit.services.person import Name, Person

MESSAGE_TAGS_NOT_EDITABLE = (
    "Tags cannot be changed with edit. Use add-tags, remove-tags or edit-tag instead."
)


class CommandParser(ABC):
    """Turns an argument tail into one kind of command."""

    @abstractmethod
    def parse(self, args: str) -> Command:
        """
        Raises:
            ParseError: args do not follow the command's syntax
        """


def _parse_preamble_index(multimap: ArgumentMultimap, usage: str) -> int:
    try:
        return parse_index(multimap.get_preamble())
    except ParseError as e:
        raise ParseError(invalid_format(usage)) from e


class AddCommandParser(CommandParser):
    def parse(self, args: str) -> AddCommand:
        multimap = ArgumentTokenizer.tokenize(
            args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG
        )
        if (
            not are_prefixes_present(multimap, PREFIX_NAME, PREFIX_ADDRESS, PREFIX_PHONE, PREFIX_EMAIL)
            or multimap.get_preamble()
        ):
            raise ParseError(invalid_format(AddCommand.MESSAGE_USAGE))

        multimap.verify_no_duplicate_prefixes_for(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
        person = Person(
            name=parse_name(multimap.get_value(PREFIX_NAME)),
            phone=parse_phone(multimap.get_value(PREFIX_PHONE)),
            email=parse_email(multimap.get_value(PREFIX_EMAIL)),
            address=parse_address(multimap.get_value(PREFIX_ADDRESS)),
            tags=parse_tags(multimap.get_all_values(PREFIX_TAG)),
        )
        return AddCommand(person)


class EditCommandParser(CommandParser):
    def parse(self, args: str) -> EditCommand:
        multimap = ArgumentTokenizer.tokenize(
            args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG
        )
        index = _parse_preamble_index(multimap, EditCommand.MESSAGE_USAGE)

        if multimap.is_present(PREFIX_TAG):
            raise ParseError(MESSAGE_TAGS_NOT_EDITABLE)
        multimap.verify_no_duplicate_prefixes_for(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)

        def optional(prefix, parse):
            value = multimap.get_value(prefix)
            return parse(value) if value is not None else None

        descriptor = EditPersonDescriptor(
            name=optional(PREFIX_NAME, parse_name),
            phone=optional(PREFIX_PHONE, parse_phone),
            email=optional(PREFIX_EMAIL, parse_email),
            address=optional(PREFIX_ADDRESS, parse_address),
        )
        if not descriptor.is_any_field_edited():
            raise ParseError(EditCommand.MESSAGE_NOT_EDITED)

        return EditCommand(index, descriptor)


class DeleteCommandParser(CommandParser):
    def parse(self, args: str) -> DeleteCommand:
        try:
            return DeleteCommand(parse_index(args))
        except ParseError as e:
            raise ParseError(invalid_format(DeleteCommand.MESSAGE_USAGE)) from e


class AddTagsCommandParser(CommandParser):
    def parse(self, args: str) -> AddTagsCommand:
        multimap = ArgumentTokenizer.tokenize(args, PREFIX_TAG)
        index = _parse_preamble_index(multimap, AddTagsCommand.MESSAGE_USAGE)
        if not multimap.is_present(PREFIX_TAG):
            raise ParseError(invalid_format(AddTagsCommand.MESSAGE_USAGE))
        return AddTagsCommand(index, parse_tags(multimap.get_all_values(PREFIX_TAG)))


class RemoveTagsCommandParser(CommandParser):
    def parse(self, args: str) -> RemoveTagsCommand:
        multimap = ArgumentTokenizer.tokenize(args, PREFIX_TAG)
        index = _parse_preamble_index(multimap, RemoveTagsCommand.MESSAGE_USAGE)
        if not multimap.is_present(PREFIX_TAG):
            raise ParseError(invalid_format(RemoveTagsCommand.MESSAGE_USAGE))
        return RemoveTagsCommand(index, parse_tags(multimap.get_all_values(PREFIX_TAG)))


class EditTagCommandParser(CommandParser):
    def parse(self, args: str) -> EditTagCommand:
        multimap = ArgumentTokenizer.tokenize(args, PREFIX_TAG)
        index = _parse_preamble_index(multimap, EditTagCommand.MESSAGE_USAGE)
        values = multimap.get_all_values(PREFIX_TAG)
        if len(values) != 2:
            raise ParseError(invalid_format(EditTagCommand.MESSAGE_USAGE))
        old_tag, new_tag = (parse_tag(value) for value in values)
        return EditTagCommand(index, old_tag, new_tag)


class FindCommandParser(CommandParser):
    def parse(self, args: str) -> FindCommand:
        multimap = ArgumentTokenizer.tokenize(args, PREFIX_NAME, PREFIX_TAG)
        if multimap.get_preamble() or not (
            multimap.is_present(PREFIX_NAME) or multimap.is_present(PREFIX_TAG)
        ):
            raise ParseError(invalid_format(FindCommand.MESSAGE_USAGE))
        multimap.verify_no_duplicate_prefixes_for(PREFIX_NAME)

        name_keywords = ()
        if multimap.is_present(PREFIX_NAME):
            name_keywords = tuple(multimap.get_value(PREFIX_NAME).split())
            if not name_keywords:
                raise ParseError(Name.MESSAGE_CONSTRAINTS)

        tag_keywords = tuple(
            parse_tag(value).tag_name for value in multimap.get_all_values(PREFIX_TAG)
        )
        return FindCommand(ContainsKeywordsPredicate(name_keywords, tag_keywords))


class HelpCommandParser(CommandParser):
    def parse(self, args: str) -> HelpCommand:
        from recruit.commands import COMMAND_TYPES

        words = args.split()
        if not words:
            return HelpCommand()
        if len(words) > 1:
            raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))
        if words[0] not in COMMAND_TYPES:
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)
        return HelpCommand(words[0])


class NoArgumentCommandParser(CommandParser):
    """Parser for commands that take nothing after the command word."""

    def __init__(self, command_type: type[Command]):
        self.command_type = command_type

    def parse(self, args: str) -> Command:
        if args.strip():
            raise ParseError(invalid_format(self.command_type.MESSAGE_USAGE))
        return self.command_type()
