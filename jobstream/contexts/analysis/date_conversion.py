"""
Date string conversion for job listings.

The job board serves posting dates as RFC 1123 strings
("Mon, 07 Mar 2016 15:20:00 GMT"). Converters here are plain str -> str
functions built by composing a parser with a renderer, so they can be
mapped over job lists directly.

Examples:
    >>> to_iso = make_date_converter()
    >>> to_iso("Mon, 07 Mar 2016 15:20:00 GMT")
    '2016-03-07T15:20:00'
    >>> to_site = make_date_converter(render=format_site_date)
    >>> to_site("Mon, 07 Mar 2016 15:20:00 GMT")
    '3 / 7 / 16'
"""

import re
from datetime import datetime
from email.utils import parsedate_to_datetime
from itertools import islice
from typing import Callable, Iterable, List

from jobstream.contexts.analysis.exceptions import DateConversionError
from jobstream.contexts.analysis.logger import log_conversion_failure


def compose(*functions: Callable) -> Callable:
    """
    Compose functions left to right: compose(f, g)(x) == g(f(x)).

    Raises:
        ValueError: If no functions are given
    """
    if not functions:
        raise ValueError("compose() needs at least one function")

    def composed(value):
        for function in functions:
            value = function(value)
        return value

    return composed


# Four-digit years only. Weekday and seconds may be omitted.
RFC1123_PATTERN = re.compile(
    r"(?:(?P<weekday>Mon|Tue|Wed|Thu|Fri|Sat|Sun), )?"
    r"\d{1,2} (?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec) \d{4} "
    r"\d{2}:\d{2}(?::\d{2})? (?:GMT|[+-]\d{4})",
    re.IGNORECASE,
)
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def parse_rfc1123(text: str) -> datetime:
    """
    Parse an RFC 1123 date string.

    Stricter than the email header parser it delegates to: obsolete forms such
    as two-digit years or named zones other than GMT are rejected, and a
    weekday, when present, must agree with the date.

    Raises:
        DateConversionError: If the text is not a valid RFC 1123 date
    """
    match = RFC1123_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        log_conversion_failure(text)
        raise DateConversionError(text)

    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError) as e:
        log_conversion_failure(text)
        raise DateConversionError(text, original_error=e) from e

    weekday = match.group("weekday")
    if weekday and weekday.title() != WEEKDAYS[parsed.weekday()]:
        log_conversion_failure(text)
        raise DateConversionError(
            text,
            original_error=ValueError(f"{parsed.date()} is not a {weekday.title()}"),
        )

    return parsed


def format_iso(dt: datetime) -> str:
    """Render as ISO 8601 local date-time (wall clock, no offset)."""
    return dt.strftime("%Y-%m-%dT%H:%M:%S")


def format_site_date(dt: datetime) -> str:
    """Render as "M / d / YY" without zero padding."""
    return f"{dt.month} / {dt.day} / {dt:%y}"


def make_date_converter(
    parse: Callable[[str], datetime] = parse_rfc1123,
    render: Callable[[datetime], str] = format_iso,
) -> Callable[[str], str]:
    """Build a date string converter from a parser and a renderer."""
    return compose(parse, render)


def converted_dates(jobs: Iterable, converter: Callable[[str], str], limit: int = 5) -> List[str]:
    """Convert the date strings of the first `limit` jobs."""
    return [converter(job.date_string) for job in islice(jobs, limit)]
