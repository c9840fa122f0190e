"""Custom exception hierarchy for linespin configuration and lifecycle."""


class LineSpinError(Exception):
    """Base exception for all linespin errors.

    Rendering itself never raises: a non-terminal stream or a failed write
    degrades to no output. These exceptions cover misconfiguration and
    lifecycle misuse only.
    """

    pass


class ConfigError(LineSpinError):
    """Exception raised for invalid spinner configuration.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class SpinnerStateError(LineSpinError):
    """Exception raised when a spinner session is driven from the wrong context.

    Stopping a background session from inside its own refresh thread would
    deadlock on the join, so it is rejected instead.
    """

    pass
