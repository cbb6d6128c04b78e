"""
Output sinks for the Reporting context.

A sink receives display lines one at a time. Analysis code writes to
whichever sink it is handed, so the same pipeline can print to the console,
go to the log, or be captured in a test.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

import typer
from loguru import logger


class OutputSink(ABC):
    """Destination for display lines."""

    @abstractmethod
    def emit(self, line: str) -> None:
        """Write a single line."""

    def emit_all(self, lines: Iterable[str]) -> int:
        """Write every line in order, returning how many were written."""
        count = 0
        for line in lines:
            self.emit(line)
            count += 1
        return count


class ConsoleSink(OutputSink):
    """Writes lines to stdout (or stderr) via typer."""

    def __init__(self, err: bool = False):
        self.err = err

    def emit(self, line: str) -> None:
        typer.echo(line, err=self.err)


class LoggerSink(OutputSink):
    """Writes lines to the loguru logger at INFO level."""

    def __init__(self, prefix: str = "[report]"):
        self.prefix = prefix

    def emit(self, line: str) -> None:
        logger.info(f"{self.prefix} {line}")


class CollectingSink(OutputSink):
    """Keeps lines in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)
