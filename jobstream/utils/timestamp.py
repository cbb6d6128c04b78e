"""Timestamp helpers for session directory names."""

from datetime import datetime


def now() -> str:
    """Current local time as a sortable session stamp (e.g., "20261018_101500")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
