"""
Analysis Context

Responsibilities:
- Counts normalized words across job snippets (word frequency tables)
- Filters, searches and summarizes job lists with composable predicates
- Converts job date strings between formats

Owns: Tokenization, counting, query and conversion logic
Never: Reads job files or writes output directly
"""

from jobstream.contexts.analysis.word_frequency import (
    FrequencyTable,
    Tokenizer,
    WordFrequencyCounter,
    count_words,
    snippet_word_counts,
)

__all__ = [
    "FrequencyTable",
    "Tokenizer",
    "WordFrequencyCounter",
    "count_words",
    "snippet_word_counts",
]
