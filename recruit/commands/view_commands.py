"""Commands that only change what is displayed, or control the session."""
from dataclasses import dataclass
from typing import Optional

from recruit.commands.base import Command, CommandResult
from recruit.commands.messages import MESSAGE_PERSONS_LISTED_OVERVIEW, MESSAGE_UNKNOWN_COMMAND
from recruit.commands.predicates import ContainsKeywordsPredicate
from recruit.services.address_book import Model, show_all_persons
from recruit.services.exceptions import NotFoundError


@dataclass(frozen=True)
class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = "list: Lists all persons in the address book.\nExample: list"
    SHORT_MESSAGE_USAGE = "list: Lists all persons."
    MESSAGE_SUCCESS = "Listed all persons"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(show_all_persons)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class FindCommand(Command):
    """Shows only persons matching the given name keywords and/or tags."""

    predicate: ContainsKeywordsPredicate

    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all persons whose names contain any of the specified keywords, "
        "and/or who have any of the specified tags (case-insensitive), "
        "and displays them as a list with index numbers.\n"
        "Parameters: n/KEYWORD [MORE_KEYWORDS]... or t/TAG [t/TAG]...\n"
        "Example: find n/alice bob charlie\n"
        "Example: find t/friends t/colleagues"
    )
    SHORT_MESSAGE_USAGE = "find n/KEYWORD [MORE_KEYWORDS]... or t/TAG [t/TAG]...: Finds persons."

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        return CommandResult(
            MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(model.get_filtered_person_list()))
        )


@dataclass(frozen=True)
class HelpCommand(Command):
    """Shows usage of every command, or the full usage of one."""

    command_word: Optional[str] = None

    COMMAND_WORD = "help"
    MESSAGE_USAGE = (
        "help: Shows program usage instructions.\n"
        "Parameters: [COMMAND_WORD]\n"
        "Example: help\n"
        "Example: help add-tags"
    )
    SHORT_MESSAGE_USAGE = "help [COMMAND_WORD]: Shows usage instructions."
    SHOWING_HELP_MESSAGE = "Available commands:"

    def execute(self, model: Model) -> CommandResult:
        from recruit.commands import COMMAND_TYPES

        if self.command_word is not None:
            command_type = COMMAND_TYPES.get(self.command_word)
            if command_type is None:
                raise NotFoundError(MESSAGE_UNKNOWN_COMMAND)
            return CommandResult(command_type.MESSAGE_USAGE, show_help=True)

        lines = [self.SHOWING_HELP_MESSAGE]
        lines.extend(command_type.SHORT_MESSAGE_USAGE for command_type in COMMAND_TYPES.values())
        return CommandResult("\n".join(lines), show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    """Terminates the session; the shell saves before stopping."""

    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Saves all changes and exits.\nExample: exit"
    SHORT_MESSAGE_USAGE = "exit: Saves all changes and exits."
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting RecruitTrack as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
