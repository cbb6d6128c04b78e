"""
Analysis context logger.

Provides logging interface for the analysis context with automatic [analysis] prefix.
All analysis modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from jobstream.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[analysis]"


def setup_analysis_logger(log_dir: Path, jobs_file: Path = None) -> Path:
    """
    Setup logger for analysis context.

    Args:
        log_dir: Directory for this analysis session
        jobs_file: Jobs file being analyzed (recorded in the provenance header)

    Returns:
        Path to log file
    """
    extra = {"Jobs file": jobs_file} if jobs_file is not None else None
    return _setup_logger(context_name="analysis", log_dir=log_dir, extra_provenance=extra)


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_frequency_summary(table) -> None:
    """Log size of a FrequencyTable."""
    _log_debug(f"Counted {table.total()} tokens ({len(table)} distinct words)")


def log_query_result(query_name: str, count: int) -> None:
    """Log number of jobs a query returned."""
    _log_debug(f"{query_name}: {count} result(s)")


def log_notification(job) -> None:
    """Log a job that passed a notification check."""
    _log_info(f"Notification sent for: {job}")


def log_conversion_failure(date_string: str) -> None:
    _log_warning(f"Could not convert date string: {date_string!r}")
