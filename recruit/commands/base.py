"""
Command base types.

A command is a frozen dataclass holding its parsed arguments. execute()
checks every precondition against the model before the first mutation, so a
raised CommandError always leaves the model untouched.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from recruit.commands.messages import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
from recruit.services.address_book import Model
from recruit.services.exceptions import NotFoundError
from recruit.services.person import Person


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successful command."""
    feedback_to_user: str
    show_help: bool = False
    exit: bool = False


class Command(ABC):
    """One user-facing operation against the model."""

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""
    SHORT_MESSAGE_USAGE: ClassVar[str] = ""

    # The shell saves after a successful command when this is set
    mutates_model: ClassVar[bool] = False

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        """
        Run against model.

        Raises:
            CommandError: a precondition failed; model is unchanged
        """


def get_displayed_person(model: Model, index: int) -> Person:
    """Look up a person by 1-based position in the displayed list."""
    persons = model.get_filtered_person_list()
    if index < 1 or index > len(persons):
        raise NotFoundError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return persons[index - 1]
