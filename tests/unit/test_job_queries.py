"""Unit tests for job list queries."""

import pytest

from jobstream.contexts.analysis.exceptions import JobNotFoundError
from jobstream.contexts.analysis.job_queries import (
    all_of,
    company_menu,
    distinct_companies,
    first_match,
    is_junior_job,
    jobs_in_location,
    junior_captions,
    junior_jobs,
    located_in,
    longest_company_name,
    lucky_search,
    notify_if_matches,
    title_is,
)
from jobstream.contexts.reporting.sinks import CollectingSink


@pytest.mark.unit
@pytest.mark.parametrize(
    "title, expected",
    [
        ("Junior Developer", True),
        ("JUNIOR developer", True),
        ("Jr. Analyst", True),
        ("Senior Engineer", False),
        ("Staff Engineer", False),
    ],
)
def test_is_junior_job(make_job, title, expected):
    assert is_junior_job(make_job(title=title)) is expected


@pytest.mark.unit
def test_is_junior_job_custom_markers(make_job):
    assert is_junior_job(make_job(title="Entry Level Tester"), markers=["entry level"])
    assert not is_junior_job(make_job(title="Junior Tester"), markers=["entry level"])


@pytest.mark.unit
def test_junior_jobs_limit_and_order(sample_jobs):
    matches = junior_jobs(sample_jobs)
    assert [job.company for job in matches] == ["Acme Corp", "Initech", "Umbrella"]


@pytest.mark.unit
def test_junior_jobs_fewer_than_limit(make_job):
    jobs = [make_job(title="Junior Dev"), make_job(title="Lead Dev")]
    assert len(junior_jobs(jobs, limit=3)) == 1


@pytest.mark.unit
def test_junior_jobs_stops_after_limit(make_job):
    """Scanning is lazy: jobs past the limit are never checked."""
    checked = []

    def jobs():
        for i in range(10):
            job = make_job(title=f"Junior Dev {i}")
            checked.append(job)
            yield job

    junior_jobs(jobs(), limit=2)
    assert len(checked) == 2


@pytest.mark.unit
def test_junior_captions(sample_jobs):
    assert junior_captions(sample_jobs, limit=2) == [
        "Acme Corp is looking for a Junior Python Developer in Portland",
        "Initech is looking for a Jr. Data Analyst in Portland",
    ]


@pytest.mark.unit
def test_jobs_in_location(sample_jobs):
    matches = jobs_in_location(sample_jobs, "Portland", "OR")
    assert [job.company for job in matches] == ["Acme Corp", "Initech"]


@pytest.mark.unit
def test_jobs_in_location_requires_both_fields(sample_jobs):
    assert [job.company for job in jobs_in_location(sample_jobs, "Portland", "ME")] == ["Umbrella"]
    assert jobs_in_location(sample_jobs, "Portland", "CA") == []


@pytest.mark.unit
def test_lucky_search_returns_first(sample_jobs):
    match = lucky_search(sample_jobs, "Junior Python Developer")
    assert match.company == "Acme Corp"


@pytest.mark.unit
def test_lucky_search_no_match(sample_jobs):
    assert lucky_search(sample_jobs, "Astronaut") is None


@pytest.mark.unit
def test_first_match_with_combined_predicate(sample_jobs):
    match = first_match(sample_jobs, all_of(located_in("Portland", "OR"), is_junior_job))
    assert match.company == "Acme Corp"


@pytest.mark.unit
def test_first_match_raises_when_absent(sample_jobs):
    with pytest.raises(JobNotFoundError, match="searched 6 jobs"):
        first_match(sample_jobs, title_is("Astronaut"))


@pytest.mark.unit
def test_all_of_requires_every_predicate(make_job):
    check = all_of(located_in("Portland", "OR"), title_is("Python Developer"))
    assert check(make_job())
    assert not check(make_job(city="Salem"))
    assert all_of()(make_job())


@pytest.mark.unit
def test_longest_company_name(sample_jobs):
    assert longest_company_name(sample_jobs) == "Globex International Holdings"


@pytest.mark.unit
def test_longest_company_name_first_wins_ties(make_job):
    jobs = [make_job(company="Abc"), make_job(company="Xyz")]
    assert longest_company_name(jobs) == "Abc"


@pytest.mark.unit
def test_longest_company_name_empty():
    assert longest_company_name([]) is None


@pytest.mark.unit
def test_distinct_companies(make_job):
    jobs = [make_job(company="initech"), make_job(company="Acme"), make_job(company="Acme")]
    assert distinct_companies(jobs) == ["Acme", "initech"]


@pytest.mark.unit
def test_company_menu_numbering():
    assert company_menu(["Acme", "Globex"]) == ["1. Acme", "2. Globex"]


@pytest.mark.unit
def test_company_menu_size():
    companies = [f"Company {i}" for i in range(30)]
    menu = company_menu(companies)
    assert len(menu) == 20
    assert menu[-1] == "20. Company 19"
    assert company_menu(companies, size=3) == ["1. Company 0", "2. Company 1", "3. Company 2"]


@pytest.mark.unit
def test_notify_if_matches(make_job):
    sink = CollectingSink()
    job = make_job(title="Junior Developer")

    assert notify_if_matches(job, is_junior_job, sink) is True
    assert sink.lines == [f"I am sending an email about {job}"]


@pytest.mark.unit
def test_notify_if_matches_skips_non_matching(make_job):
    sink = CollectingSink()
    assert notify_if_matches(make_job(title="Lead"), is_junior_job, sink) is False
    assert sink.lines == []


@pytest.mark.unit
def test_queries_do_not_mutate_input(sample_jobs):
    before = list(sample_jobs)
    junior_jobs(sample_jobs)
    jobs_in_location(sample_jobs, "Portland", "OR")
    longest_company_name(sample_jobs)
    assert sample_jobs == before
