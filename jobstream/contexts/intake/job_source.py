"""
Job sources for the Intake context.

A job source is anything that can hand back a list of Job records. Two are
provided: a JSON file on disk and an in-memory collection. Analysis code only
depends on the JobSource interface, so sample data and real data are
interchangeable.

Usage:
    from jobstream.contexts.intake.job_source import JsonFileJobSource

    jobs = JsonFileJobSource("data/jobs.json").load_jobs()
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

from jobstream.contexts.intake.exceptions import JobDataError
from jobstream.contexts.intake.job_data_structure import Job
from jobstream.contexts.intake.logger import log_jobs_loaded, log_load_failure

load_dotenv()
JOBS_PATH = Path(os.getenv("JOBS_PATH", "data/jobs.json"))


class JobSource(ABC):
    """Interface for anything that supplies job records."""

    @abstractmethod
    def load_jobs(self) -> List[Job]:
        """Return the jobs held by this source, in source order."""


class InMemoryJobSource(JobSource):
    """Job source backed by an existing collection of Job objects."""

    def __init__(self, jobs: Iterable[Job]):
        self._jobs = list(jobs)

    def load_jobs(self) -> List[Job]:
        jobs = list(self._jobs)
        log_jobs_loaded("memory", len(jobs))
        return jobs


class JsonFileJobSource(JobSource):
    """
    Job source reading a JSON file.

    The file holds either a list of job records or an object with a
    "results" list (the shape returned by the job board search API).
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load_jobs(self) -> List[Job]:
        """
        Read and validate every record in the file.

        Returns:
            List of Job instances in file order

        Raises:
            JobDataError: If the file is missing, is not valid JSON, or holds a malformed record
        """
        records = self._read_records()

        jobs = []
        for index, record in enumerate(records):
            try:
                jobs.append(Job.from_record(record))
            except JobDataError as e:
                raise JobDataError(e.message, path=self.path, record_index=index) from e

        log_jobs_loaded(str(self.path), len(jobs))
        return jobs

    def _read_records(self) -> list:
        if not self.path.exists():
            log_load_failure(self.path, "file not found")
            raise JobDataError("Jobs file not found", path=self.path)

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            log_load_failure(self.path, str(e))
            raise JobDataError(f"Invalid JSON: {e}", path=self.path) from e
        except OSError as e:
            log_load_failure(self.path, str(e))
            raise JobDataError(f"Cannot read jobs file: {e}", path=self.path) from e

        if isinstance(data, dict):
            data = data.get("results")

        if not isinstance(data, list):
            raise JobDataError(
                "Expected a list of job records or an object with a 'results' list",
                path=self.path,
            )

        return data


def default_job_source() -> JsonFileJobSource:
    """Return the JSON source at JOBS_PATH (from environment)."""
    return JsonFileJobSource(JOBS_PATH)
