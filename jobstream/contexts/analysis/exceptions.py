"""Custom exceptions for the analysis context."""

from typing import Optional


class JobNotFoundError(LookupError):
    """
    Exception raised when a required job match is absent.

    Attributes:
        message: Error description
        searched: Number of jobs that were checked
    """

    def __init__(self, message: str, searched: Optional[int] = None):
        self.message = message
        self.searched = searched

        if searched is not None:
            message = f"{message} (searched {searched} jobs)"

        super().__init__(message)


class DateConversionError(ValueError):
    """
    Exception raised when a job date string cannot be parsed.

    Attributes:
        date_string: The text that failed to parse
        original_error: The underlying parsing error, if any
    """

    def __init__(self, date_string: str, original_error: Optional[Exception] = None):
        self.date_string = date_string
        self.original_error = original_error

        parts = [f"Cannot parse date string: {date_string!r}"]

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))
