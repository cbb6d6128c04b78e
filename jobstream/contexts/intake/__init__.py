"""
Intake Context

Responsibilities:
- Defines the Job record shared by all contexts
- Loads job records from local JSON files or in-memory collections
- Validates raw records and reports malformed data

Owns: Job record structure, job source implementations
Never: Analyzes, filters, or displays jobs
"""

from jobstream.contexts.intake.exceptions import JobDataError
from jobstream.contexts.intake.job_data_structure import Job
from jobstream.contexts.intake.job_source import (
    InMemoryJobSource,
    JobSource,
    JsonFileJobSource,
    default_job_source,
)

__all__ = [
    "InMemoryJobSource",
    "Job",
    "JobDataError",
    "JobSource",
    "JsonFileJobSource",
    "default_job_source",
]
