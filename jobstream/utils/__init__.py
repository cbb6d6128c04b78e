"""
Shared utilities for jobstream.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Text table formatting
- Session timestamps
"""

from jobstream.utils.logger import log_provenance, setup_logger
from jobstream.utils.report_formatter import Column, TableFormatter, format_percentage
from jobstream.utils.timestamp import now

__all__ = ["Column", "TableFormatter", "format_percentage", "log_provenance", "now", "setup_logger"]
