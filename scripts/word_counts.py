#!/usr/bin/env python3
"""
Report the most common words across job snippets.

Usage:
    # Print top 20 words for the default jobs file (JOBS_PATH)
    python scripts/word_counts.py

    # Top 10 words of a specific file, counting non-ASCII letters too
    python scripts/word_counts.py data/jobs.json --top 10 --unicode

    # Save report under LOGS_PATH
    python scripts/word_counts.py data/jobs.json -o word_counts.txt
"""

import os
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

import typer
from dotenv import load_dotenv

from jobstream.contexts.analysis.config import load_analysis_config
from jobstream.contexts.analysis.logger import setup_analysis_logger
from jobstream.contexts.analysis.word_frequency import (
    Tokenizer,
    WordFrequencyCounter,
    snippet_word_counts,
)
from jobstream.contexts.intake.exceptions import JobDataError
from jobstream.contexts.intake.job_source import JOBS_PATH, JsonFileJobSource
from jobstream.contexts.reporting.frequency_report import format_frequency_report
from jobstream.utils.logger import setup_console_logger
from jobstream.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
)


@app.command()
def main(
    jobs_file: Annotated[
        Path,
        typer.Argument(help="JSON file of job records", dir_okay=False),
    ] = JOBS_PATH,
    top: Annotated[
        Optional[int],
        typer.Option("--top", "-n", help="Number of words to list (default from config)", min=1),
    ] = None,
    unicode: Annotated[
        bool,
        typer.Option("--unicode", help="Treat any Unicode letter or digit as a word character"),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Save report to file (prints to stdout if not specified)",
            dir_okay=False,
        ),
    ] = None,
    log: Annotated[
        bool,
        typer.Option("--log", help="Write a session log under LOGS_PATH"),
    ] = False,
):
    """
    Count words across every job snippet and print a ranked report.
    """
    config = load_analysis_config()

    if log:
        setup_analysis_logger(LOGS_PATH / f"word_counts_{now()}", jobs_file=jobs_file)
    else:
        setup_console_logger()

    if unicode:
        counter = WordFrequencyCounter(Tokenizer(word_characters="unicode"))
    else:
        counter = WordFrequencyCounter.from_config(config)

    top_n = top if top is not None else config["word_frequency"]["top_n"]

    try:
        jobs = JsonFileJobSource(jobs_file).load_jobs()
    except JobDataError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    table = snippet_word_counts(jobs, counter=counter)
    report = format_frequency_report(table, top_n=top_n)

    if output:
        # Relative output paths land under LOGS_PATH
        if not output.is_absolute():
            output = LOGS_PATH / output

        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report)
        typer.echo(f"✓ Word frequency report saved to {output}")
    else:
        typer.echo(report)


if __name__ == "__main__":
    app()
