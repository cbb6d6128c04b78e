"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
Intake modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    logger.error(f"{CONTEXT_PREFIX} {message}")


def log_jobs_loaded(source_name: str, count: int) -> None:
    """Log how many jobs a source produced."""
    _log_debug(f"Loaded {count} jobs from {source_name}")


def log_load_failure(path: Path, reason: str) -> None:
    """Log a job file that could not be read."""
    _log_error(f"Failed to load jobs from {path}: {reason}")
