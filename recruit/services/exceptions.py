"""
Error types for RecruitTrack.

Every error a user can trigger derives from RecruitError and carries a
human-readable message that the shell prints verbatim.
"""


class RecruitError(Exception):
    """Base class for all RecruitTrack errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(RecruitError, ValueError):
    """Raised when a field or tag value violates its format rule."""
    pass


class ParseError(RecruitError):
    """Raised when command text cannot be turned into a command."""
    pass


class CommandError(RecruitError):
    """Raised when a command's preconditions do not hold for the current model."""
    pass


class NotFoundError(CommandError):
    """Raised when a referenced index, tag or person is absent."""
    pass


class DuplicateError(CommandError):
    """Raised when a command would introduce a duplicate person or tag."""
    pass


class DuplicatePersonError(RecruitError):
    """Raised by the model when a person with the same identity already exists."""

    def __init__(self, message: str = "Operation would result in duplicate persons"):
        super().__init__(message)


class PersonNotFoundError(RecruitError):
    """Raised by the model when the exact person to update or remove is absent."""

    def __init__(self, message: str = "Person not found in the address book"):
        super().__init__(message)


class DataLoadingError(RecruitError):
    """Raised when the save file exists but cannot be turned into an address book."""

    def __init__(self, message: str, cause: Exception = None):
        self.cause = cause
        super().__init__(message)
