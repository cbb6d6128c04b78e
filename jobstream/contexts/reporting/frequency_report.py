"""
Text reports for word frequency tables and job lists.
"""

from typing import Iterable, List

from jobstream.utils.report_formatter import Column, TableFormatter, format_percentage

FREQUENCY_COLUMNS = [
    Column("Rank", 5, ">"),
    Column("Word", 24),
    Column("Count", 7, ">"),
    Column("Share", 7, ">"),
]


def format_frequency_report(table, top_n: int = 20, title: str = "Snippet word frequency") -> str:
    """
    Format the most common words of a FrequencyTable as a ranked text table.

    Args:
        table: FrequencyTable to report on
        top_n: Number of words to list (all words if None)
        title: Report heading

    Returns:
        Formatted report string
    """
    total = table.total()
    formatter = TableFormatter(FREQUENCY_COLUMNS)
    formatter.add_section_header(title)

    if not table:
        return formatter.add_summary("No words counted.").render()

    formatter.add_table_header().add_separator()
    for rank, (word, count) in enumerate(table.most_common(top_n), start=1):
        formatter.add_row([rank, word, count, format_percentage(count, total)])

    formatter.add_summary(f"{len(table)} distinct words, {total} tokens")
    return formatter.render()


def format_job_lines(jobs: Iterable) -> List[str]:
    """One display line per job."""
    return [str(job) for job in jobs]
