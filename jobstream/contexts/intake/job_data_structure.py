"""
Job record data structure for the Intake context.

Provides the Job class that every other context consumes. Records arrive
either in the job-board response shape (jobtitle, date, ...) or with the
field names used here; both are accepted by Job.from_record().
"""

from dataclasses import dataclass
from typing import Optional

from jobstream.contexts.intake.exceptions import JobDataError

# Job-board keys -> Job field names
FIELD_ALIASES = {
    "jobtitle": "title",
    "date": "date_string",
}

REQUIRED_FIELDS = ["title", "company", "city", "state", "snippet", "date_string"]


@dataclass(frozen=True)
class Job:
    """
    A single job listing.

    Frozen so that pipelines over job lists can share records freely.
    """

    title: str
    company: str
    city: str
    state: str
    snippet: str
    date_string: str
    url: Optional[str] = None

    @property
    def caption(self) -> str:
        """One-line human summary of the listing."""
        return f"{self.company} is looking for a {self.title} in {self.city}"

    def __str__(self) -> str:
        return f"{self.title} at {self.company} ({self.city}, {self.state})"

    @classmethod
    def from_record(cls, record: dict) -> "Job":
        """
        Build a Job from a raw dict record.

        Args:
            record: Mapping with job-board keys (jobtitle, date, ...) or Job field names

        Returns:
            Job instance

        Raises:
            JobDataError: If the record is not a dict or a required field is missing
        """
        if not isinstance(record, dict):
            raise JobDataError(f"Expected a job record object, got {type(record).__name__}")

        fields = {FIELD_ALIASES.get(key, key): value for key, value in record.items()}

        missing = [name for name in REQUIRED_FIELDS if fields.get(name) is None]
        if missing:
            raise JobDataError(f"Job record missing required fields: {', '.join(missing)}")

        return cls(
            title=str(fields["title"]),
            company=str(fields["company"]),
            city=str(fields["city"]),
            state=str(fields["state"]),
            snippet=str(fields["snippet"]),
            date_string=str(fields["date_string"]),
            url=fields.get("url"),
        )

    def to_record(self) -> dict:
        """Return the job as a plain dict using Job field names."""
        return {
            "title": self.title,
            "company": self.company,
            "city": self.city,
            "state": self.state,
            "snippet": self.snippet,
            "date_string": self.date_string,
            "url": self.url,
        }
