"""Shared fixtures for jobstream tests."""

import importlib.util
import json
from pathlib import Path

import pytest

from jobstream.contexts.intake.job_data_structure import Job

PROJECT_ROOT = Path(__file__).resolve().parent.parent
FIXTURES_PATH = Path(__file__).resolve().parent / "fixtures"
SCRIPTS_PATH = PROJECT_ROOT / "scripts"


@pytest.fixture
def make_job():
    """Factory building a Job with defaults for any field not given."""

    def _make(**overrides) -> Job:
        fields = {
            "title": "Python Developer",
            "company": "Acme Corp",
            "city": "Portland",
            "state": "OR",
            "snippet": "Write Python code.",
            "date_string": "Mon, 07 Mar 2016 15:20:00 GMT",
        }
        fields.update(overrides)
        return Job(**fields)

    return _make


@pytest.fixture
def jobs_file() -> Path:
    """Path to the sample job-board response."""
    return FIXTURES_PATH / "jobs.json"


@pytest.fixture
def sample_jobs() -> list:
    """Jobs from the sample job-board response, in file order."""
    data = json.loads((FIXTURES_PATH / "jobs.json").read_text(encoding="utf-8"))
    return [Job.from_record(record) for record in data["results"]]


@pytest.fixture
def load_script():
    """Import a module from scripts/ by file name."""

    def _load(name: str):
        spec = importlib.util.spec_from_file_location(name, SCRIPTS_PATH / f"{name}.py")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load
