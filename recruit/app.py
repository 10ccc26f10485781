"""
RecruitTrackApp - ties parser, model and storage together.

One line of input is parsed, executed and (when it changed the model)
saved before the next line is read. Errors from any layer are printed and
the loop carries on; only an exit command or end of input stops it.
"""
import logging
import sys
from typing import Iterable, Optional, TextIO

from recruit.commands.base import CommandResult
from recruit.parser.recruit_parser import RecruitParser
from recruit.services.address_book import Model
from recruit.services.exceptions import CommandError, RecruitError
from recruit.services.storage import Storage

logger = logging.getLogger(__name__)

FILE_OPS_ERROR_FORMAT = "Could not save data due to the following error: {}"
WELCOME_MESSAGE = "Welcome to RecruitTrack! Type 'help' to see the available commands."


class RecruitTrackApp:
    """Executes command lines against a model and persists the result."""

    def __init__(self, model: Model, storage: Storage, parser: Optional[RecruitParser] = None):
        self.model = model
        self.storage = storage
        self.parser = parser or RecruitParser()
        self._saved_snapshot = model.get_address_book()

    def execute(self, command_text: str) -> CommandResult:
        """
        Parse and run one command line.

        Raises:
            ParseError: the line is not a valid command
            CommandError: the command failed, or its result could not be saved
        """
        logger.info(f"----------------[USER COMMAND][{command_text}]")
        command = self.parser.parse_command(command_text)
        result = command.execute(self.model)

        if command.mutates_model:
            self.save()
        return result

    def save(self) -> None:
        """
        Write the whole model to storage.

        Raises:
            CommandError: the write failed (the in-memory model is kept)
        """
        address_book = self.model.get_address_book()
        try:
            self.storage.save(address_book)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to save to {self.storage.file_path}: {e}")
            raise CommandError(FILE_OPS_ERROR_FORMAT.format(e)) from e
        self._saved_snapshot = address_book

    def has_unsaved_changes(self) -> bool:
        """True if the model differs from what was last loaded or saved, or nothing is on disk yet."""
        return (
            self.model.get_address_book() != self._saved_snapshot
            or not self.storage.file_path.exists()
        )

    def run(self, lines: Iterable[str] = None, out: TextIO = None) -> bool:
        """
        Read-eval-print loop over lines (stdin by default).

        Returns:
            False if the final save failed
        """
        lines = sys.stdin if lines is None else lines
        out = sys.stdout if out is None else out

        print(WELCOME_MESSAGE, file=out, flush=True)
        for line in lines:
            command_text = line.strip()
            if not command_text:
                continue

            try:
                result = self.execute(command_text)
            except RecruitError as e:
                logger.debug(f"Command failed: {e.message}")
                print(e.message, file=out, flush=True)
                continue

            print(result.feedback_to_user, file=out, flush=True)
            if result.exit:
                break

        return self.shutdown(out)

    def shutdown(self, out: TextIO = None) -> bool:
        """
        Final save before the process stops.

        Skipped when nothing changed, so an unreadable data file is left
        untouched unless the user actually edits the fresh model. A failure
        here risks data loss, so it is reported loudly.

        Returns:
            False if there were changes and they could not be saved
        """
        out = sys.stdout if out is None else out
        if not self.has_unsaved_changes():
            logger.info("Session ended, no unsaved changes")
            return True
        try:
            self.save()
        except CommandError as e:
            logger.critical(f"Changes could not be saved on exit: {e.message}")
            print(e.message, file=out, flush=True)
            return False
        logger.info("Session ended, data saved")
        return True
