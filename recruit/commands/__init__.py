"""
RecruitTrack Commands Package.

One frozen dataclass per command word. COMMAND_TYPES maps each word to its
class, in the order help lists them.
"""

from recruit.commands.base import Command, CommandResult
from recruit.commands.person_commands import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
)
from recruit.commands.predicates import ContainsKeywordsPredicate
from recruit.commands.tag_commands import AddTagsCommand, EditTagCommand, RemoveTagsCommand
from recruit.commands.view_commands import ExitCommand, FindCommand, HelpCommand, ListCommand

COMMAND_TYPES: dict[str, type[Command]] = {
    command_type.COMMAND_WORD: command_type
    for command_type in (
        AddCommand,
        EditCommand,
        DeleteCommand,
        AddTagsCommand,
        RemoveTagsCommand,
        EditTagCommand,
        FindCommand,
        ListCommand,
        ClearCommand,
        HelpCommand,
        ExitCommand,
    )
}

__all__ = [
    "COMMAND_TYPES",
    "AddCommand",
    "AddTagsCommand",
    "ClearCommand",
    "Command",
    "CommandResult",
    "ContainsKeywordsPredicate",
    "DeleteCommand",
    "EditCommand",
    "EditPersonDescriptor",
    "EditTagCommand",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "ListCommand",
    "RemoveTagsCommand",
]
