#!/usr/bin/env python3
"""
Explore a job listings file with small list-processing queries.

Usage:
    python scripts/explore_jobs.py junior data/jobs.json
    python scripts/explore_jobs.py captions data/jobs.json --limit 5
    python scripts/explore_jobs.py location Portland OR data/jobs.json
    python scripts/explore_jobs.py search "Junior Python Developer" data/jobs.json
    python scripts/explore_jobs.py longest-company data/jobs.json
    python scripts/explore_jobs.py menu data/jobs.json
    python scripts/explore_jobs.py dates data/jobs.json --site-format
"""

from pathlib import Path
from typing import List, Optional
from typing_extensions import Annotated

import typer

from jobstream.contexts.analysis.config import load_analysis_config
from jobstream.contexts.analysis.date_conversion import (
    converted_dates,
    format_iso,
    format_site_date,
    make_date_converter,
)
from jobstream.contexts.analysis.exceptions import DateConversionError
from jobstream.contexts.analysis.job_queries import (
    company_menu,
    distinct_companies,
    jobs_in_location,
    junior_captions,
    junior_jobs,
    longest_company_name,
    lucky_search,
)
from jobstream.contexts.intake.exceptions import JobDataError
from jobstream.contexts.intake.job_data_structure import Job
from jobstream.contexts.intake.job_source import JOBS_PATH, JsonFileJobSource
from jobstream.contexts.reporting.frequency_report import format_job_lines
from jobstream.contexts.reporting.sinks import ConsoleSink
from jobstream.utils.logger import setup_console_logger

app = typer.Typer(help="Explore job listings.", add_completion=False)

JobsFile = Annotated[Path, typer.Argument(help="JSON file of job records", dir_okay=False)]
Limit = Annotated[
    Optional[int], typer.Option("--limit", "-n", help="Maximum results (default from config)", min=1)
]


@app.callback()
def main():
    """Explore job listings."""
    setup_console_logger()


def _load(jobs_file: Path) -> List[Job]:
    """Load jobs or exit with an error message."""
    try:
        return JsonFileJobSource(jobs_file).load_jobs()
    except JobDataError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def junior(jobs_file: JobsFile = JOBS_PATH, limit: Limit = None):
    """List the first junior-level jobs."""
    queries = load_analysis_config()["queries"]
    matches = junior_jobs(
        _load(jobs_file),
        limit=limit or queries["result_limit"],
        markers=queries["junior_markers"],
    )
    ConsoleSink().emit_all(format_job_lines(matches))


@app.command()
def captions(jobs_file: JobsFile = JOBS_PATH, limit: Limit = None):
    """Show captions of the first junior-level jobs."""
    queries = load_analysis_config()["queries"]
    lines = junior_captions(
        _load(jobs_file),
        limit=limit or queries["result_limit"],
        markers=queries["junior_markers"],
    )
    ConsoleSink().emit_all(lines)


@app.command()
def location(
    city: Annotated[str, typer.Argument(help="City name (exact match)")],
    state: Annotated[str, typer.Argument(help="State code (exact match, e.g. OR)")],
    jobs_file: JobsFile = JOBS_PATH,
):
    """List every job in a city and state."""
    matches = jobs_in_location(_load(jobs_file), city, state)
    if not matches:
        typer.echo(f"No jobs found in {city}, {state}")
        return
    ConsoleSink().emit_all(format_job_lines(matches))


@app.command()
def search(
    title: Annotated[str, typer.Argument(help="Exact job title")],
    jobs_file: JobsFile = JOBS_PATH,
):
    """Show the first job with an exact title."""
    match = lucky_search(_load(jobs_file), title)
    if match is None:
        typer.echo(f"No job titled {title!r}", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(match))


@app.command("longest-company")
def longest_company(jobs_file: JobsFile = JOBS_PATH):
    """Show the longest company name."""
    name = longest_company_name(_load(jobs_file))
    if name is None:
        typer.echo("No jobs loaded", err=True)
        raise typer.Exit(code=1)
    typer.echo(name)


@app.command()
def menu(jobs_file: JobsFile = JOBS_PATH, limit: Limit = None):
    """Show a numbered menu of companies."""
    size = limit or load_analysis_config()["queries"]["menu_size"]
    ConsoleSink().emit_all(company_menu(distinct_companies(_load(jobs_file)), size=size))


@app.command()
def dates(
    jobs_file: JobsFile = JOBS_PATH,
    limit: Limit = None,
    site_format: Annotated[
        bool, typer.Option("--site-format", help='Render as "M / d / YY" instead of ISO 8601')
    ] = False,
):
    """Convert posting dates of the first jobs."""
    converter = make_date_converter(render=format_site_date if site_format else format_iso)
    limit = limit or load_analysis_config()["dates"]["limit"]

    try:
        lines = converted_dates(_load(jobs_file), converter, limit=limit)
    except DateConversionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    ConsoleSink().emit_all(lines)


if __name__ == "__main__":
    app()
