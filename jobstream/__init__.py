"""
jobstream - Functional-style exploration of job listings

A small toolkit for loading job-listing records and running list-processing
pipelines over them, centered on word-frequency analysis of job snippets.

Architecture:
- Intake Context: Job records and the sources that load them
- Analysis Context: Word frequency counting, job queries, date conversion
- Reporting Context: Output sinks and text reports
"""

__version__ = "0.1.0"
