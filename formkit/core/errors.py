"""Exception types raised by the form helpers.

Only programmer errors are raised. Missing or malformed submitted data
is absorbed as ``None`` / empty collections by the extractors.
"""


class FormkitError(Exception):
    """Base class for all errors raised by this package."""


class UnknownDataTypeError(FormkitError, ValueError):
    """Raised when a value is sanitised with an unrecognised data type."""

    def __init__(self, data_type: object) -> None:
        super().__init__(f"Unknown data type: {data_type!r}")
        self.data_type = data_type
