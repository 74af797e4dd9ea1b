"""Closed error taxonomy for the validator CLI."""

from enum import StrEnum

UNKNOWN_MESSAGE = "unknown"


class ErrorKind(StrEnum):
    MISSING_ARGUMENT = "missing_argument"
    COLLABORATOR_FAILURE = "collaborator_failure"
    CONFIGURATION = "configuration"
    UNKNOWN_FAILURE = "unknown_failure"


class ValidatorCliError(Exception):
    """Base error. Every instance carries a kind and a non-empty message."""

    kind: ErrorKind = ErrorKind.UNKNOWN_FAILURE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or UNKNOWN_MESSAGE
        super().__init__(self.message)


class MissingArgumentError(ValidatorCliError):
    """A required positional argument was not supplied."""

    kind = ErrorKind.MISSING_ARGUMENT


class CollaboratorError(ValidatorCliError):
    """The external validator failed while loading or reporting."""

    kind = ErrorKind.COLLABORATOR_FAILURE

    @classmethod
    def from_exception(cls, exc: BaseException) -> "CollaboratorError":
        """
        Wrap an arbitrary collaborator exception, passing its message through.

        Args:
            exc: Exception raised by the collaborator.

        Returns:
            CollaboratorError: Error with the verbatim message, or "unknown".
        """
        message = getattr(exc, "message", None) or exc
        return cls(str(message))


class ConfigurationError(ValidatorCliError):
    """No usable validator collaborator could be configured."""

    kind = ErrorKind.CONFIGURATION


class UnknownFailure(ValidatorCliError):
    """Unexpected failure outside the known error kinds."""

    kind = ErrorKind.UNKNOWN_FAILURE
