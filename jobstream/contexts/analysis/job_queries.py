"""
Queries over job lists.

Every query is a pure function: it takes a sequence of Job records and
returns a new value without touching the input. Predicates are ordinary
Job -> bool callables and can be combined with all_of().

Usage:
    from jobstream.contexts.analysis.job_queries import (
        all_of, first_match, is_junior_job, located_in,
    )

    portland_junior = first_match(jobs, all_of(located_in("Portland", "OR"), is_junior_job))
"""

from itertools import islice
from typing import Callable, Iterable, List, Optional, Sequence

from jobstream.contexts.analysis.exceptions import JobNotFoundError
from jobstream.contexts.analysis.logger import log_notification, log_query_result
from jobstream.contexts.intake.job_data_structure import Job

JobPredicate = Callable[[Job], bool]

DEFAULT_JUNIOR_MARKERS = ("junior", "jr")


# =========================================================================
# PREDICATES
# =========================================================================


def is_junior_job(job: Job, markers: Sequence[str] = DEFAULT_JUNIOR_MARKERS) -> bool:
    """True if the lowercased title contains any junior marker."""
    title = job.title.lower()
    return any(marker in title for marker in markers)


def located_in(city: str, state: str) -> JobPredicate:
    """Predicate matching jobs in exactly this city and state."""
    return lambda job: job.state == state and job.city == city


def title_is(title: str) -> JobPredicate:
    """Predicate matching jobs whose title equals `title` exactly."""
    return lambda job: job.title == title


def all_of(*predicates: JobPredicate) -> JobPredicate:
    """Predicate that holds when every given predicate holds."""
    return lambda job: all(predicate(job) for predicate in predicates)


# =========================================================================
# QUERIES
# =========================================================================


def junior_jobs(
    jobs: Iterable[Job], limit: int = 3, markers: Sequence[str] = DEFAULT_JUNIOR_MARKERS
) -> List[Job]:
    """
    First `limit` junior jobs, in input order.

    Stops scanning once `limit` matches are found.
    """
    matches = list(islice((job for job in jobs if is_junior_job(job, markers)), limit))
    log_query_result("junior_jobs", len(matches))
    return matches


def junior_captions(
    jobs: Iterable[Job], limit: int = 3, markers: Sequence[str] = DEFAULT_JUNIOR_MARKERS
) -> List[str]:
    """Captions of the first `limit` junior jobs."""
    return [job.caption for job in junior_jobs(jobs, limit=limit, markers=markers)]


def jobs_in_location(jobs: Iterable[Job], city: str, state: str) -> List[Job]:
    """All jobs in the given city and state."""
    matches = list(filter(located_in(city, state), jobs))
    log_query_result(f"jobs_in_location({city}, {state})", len(matches))
    return matches


def lucky_search(jobs: Iterable[Job], title: str) -> Optional[Job]:
    """First job whose title equals `title`, or None."""
    return next(filter(title_is(title), jobs), None)


def first_match(jobs: Sequence[Job], predicate: JobPredicate) -> Job:
    """
    First job satisfying `predicate`.

    Raises:
        JobNotFoundError: If no job matches
    """
    match = next(filter(predicate, jobs), None)
    if match is None:
        raise JobNotFoundError("No job matched the given criteria", searched=len(jobs))
    return match


def longest_company_name(jobs: Iterable[Job]) -> Optional[str]:
    """Longest company name (earliest wins on ties), or None for no jobs."""
    return max((job.company for job in jobs), key=len, default=None)


def distinct_companies(jobs: Iterable[Job]) -> List[str]:
    """Unique company names, sorted case-insensitively."""
    return sorted({job.company for job in jobs}, key=lambda name: (name.lower(), name))


def company_menu(companies: Iterable[str], size: int = 20) -> List[str]:
    """
    Numbered menu lines for the first `size` companies.

    Example:
        >>> company_menu(["Acme", "Globex"])
        ['1. Acme', '2. Globex']
    """
    return [f"{number}. {name}" for number, name in enumerate(islice(companies, size), start=1)]


def notify_if_matches(job: Job, predicate: JobPredicate, sink) -> bool:
    """
    Emit a notification line to `sink` when `predicate` holds for `job`.

    Args:
        job: Job to check
        predicate: Job -> bool check
        sink: OutputSink receiving the notification

    Returns:
        True if a notification was emitted
    """
    if not predicate(job):
        return False
    sink.emit(f"I am sending an email about {job}")
    log_notification(job)
    return True
