"""Top-level parser: splits off the command word and dispatches to its parser."""
import logging
import re

from recruit.commands.base import Command
from recruit.commands.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from recruit.commands.person_commands import AddCommand, ClearCommand, DeleteCommand, EditCommand
from recruit.commands.tag_commands import AddTagsCommand, EditTagCommand, RemoveTagsCommand
from recruit.commands.view_commands import ExitCommand, FindCommand, HelpCommand, ListCommand
from recruit.parser.command_parsers import (
    AddCommandParser,
    AddTagsCommandParser,
    CommandParser,
    DeleteCommandParser,
    EditCommandParser,
    EditTagCommandParser,
    FindCommandParser,
    HelpCommandParser,
    NoArgumentCommandParser,
    RemoveTagsCommandParser,
)
from recruit.services.exceptions import ParseError

logger = logging.getLogger(__name__)

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


class RecruitParser:
    """Parses a full line of user input into a Command."""

    def __init__(self):
        self._parsers: dict[str, CommandParser] = {
            AddCommand.COMMAND_WORD: AddCommandParser(),
            EditCommand.COMMAND_WORD: EditCommandParser(),
            DeleteCommand.COMMAND_WORD: DeleteCommandParser(),
            AddTagsCommand.COMMAND_WORD: AddTagsCommandParser(),
            RemoveTagsCommand.COMMAND_WORD: RemoveTagsCommandParser(),
            EditTagCommand.COMMAND_WORD: EditTagCommandParser(),
            FindCommand.COMMAND_WORD: FindCommandParser(),
            HelpCommand.COMMAND_WORD: HelpCommandParser(),
            ListCommand.COMMAND_WORD: NoArgumentCommandParser(ListCommand),
            ClearCommand.COMMAND_WORD: NoArgumentCommandParser(ClearCommand),
            ExitCommand.COMMAND_WORD: NoArgumentCommandParser(ExitCommand),
        }

    @property
    def command_words(self) -> list[str]:
        return list(self._parsers)

    def parse_command(self, user_input: str) -> Command:
        """
        Raises:
            ParseError: unknown command word or malformed arguments
        """
        match = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if not match:
            raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))

        command_word = match.group("command_word")
        arguments = match.group("arguments")
        logger.debug(f"Command word: {command_word}; Arguments: {arguments!r}")

        parser = self._parsers.get(command_word)
        if parser is None:
            logger.debug(f"Unknown command word: {command_word}")
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)

        return parser.parse(arguments)
