"""
Reporting Context

Responsibilities:
- Delivers display lines to interchangeable output sinks
- Formats word frequency tables and job lists as text

Owns: Sinks and report layout
Never: Loads jobs or computes analysis results
"""

from jobstream.contexts.reporting.frequency_report import format_frequency_report, format_job_lines
from jobstream.contexts.reporting.sinks import CollectingSink, ConsoleSink, LoggerSink, OutputSink

__all__ = [
    "CollectingSink",
    "ConsoleSink",
    "LoggerSink",
    "OutputSink",
    "format_frequency_report",
    "format_job_lines",
]
