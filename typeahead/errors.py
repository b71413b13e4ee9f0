"""Exception classes for typeahead."""


class TypeaheadError(Exception):
    """Base exception for all typeahead errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(TypeaheadError):
    """Invalid configuration value."""

    def __init__(self, name: str, value, reason: str = ""):
        """
        Initialize with the offending setting.

        Args:
            name: Setting or environment variable name
            value: The rejected value
            reason: Why the value was rejected
        """
        message = f"Invalid value for {name}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class CorruptedTracebackError(TypeaheadError, AssertionError):
    """
    The operation grid holds a cell that is not a valid edit operation.

    Raised while walking a traceback. This is an internal consistency
    failure of the distance engine and is never caught by the library.
    """

    def __init__(self, row: int, column: int, value):
        message = f"Corrupted operation grid at cell ({row}, {column}): {value!r}"
        super().__init__(message)
