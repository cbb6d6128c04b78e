"""Custom exceptions for the intake context with source references."""

from pathlib import Path
from typing import Optional


class JobDataError(ValueError):
    """
    Exception raised when job data cannot be loaded or a record is malformed.

    Attributes:
        message: Error description
        path: File the data was read from, if any
        record_index: Position of the offending record within the file, if any
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        record_index: Optional[int] = None,
    ):
        self.message = message
        self.path = path
        self.record_index = record_index

        parts = [message]

        if path is not None:
            parts.append(f"Source: {path}")

        if record_index is not None:
            parts.append(f"Record: #{record_index}")

        super().__init__("\n".join(parts))
