"""
Word frequency counting over free-text snippets.

Pipeline:
1. Tokenization (maximal runs of word characters; everything else delimits)
2. Lowercase
3. Counting across all snippets

Word characters default to ASCII letters, digits and underscore. Passing
word_characters="unicode" widens them to every Unicode letter and digit.

Usage:
    from jobstream.contexts.analysis.word_frequency import count_words

    table = count_words(["co-op/remote, remote!"])
    table["remote"]  # 2

    # Tables from disjoint inputs combine entry-wise
    combined = count_words(batch_a) + count_words(batch_b)
"""

import re
from collections import Counter
from collections.abc import Mapping
from typing import Iterable, Iterator, List, Optional, Tuple

from jobstream.contexts.analysis.logger import log_frequency_summary

WORD_PATTERNS = {
    "ascii": re.compile(r"[A-Za-z0-9_]+"),
    "unicode": re.compile(r"\w+"),
}


class Tokenizer:
    """
    Splits text into normalized word tokens.

    Callable, so it can be passed anywhere a str -> list[str] function is expected.
    """

    def __init__(self, word_characters: str = "ascii", lowercase: bool = True):
        """
        Args:
            word_characters: "ascii" ([A-Za-z0-9_]) or "unicode" (any \\w character)
            lowercase: Whether to lowercase tokens

        Raises:
            ValueError: If word_characters is not a known mode
        """
        if word_characters not in WORD_PATTERNS:
            raise ValueError(
                f"word_characters must be one of {sorted(WORD_PATTERNS)}, got: {word_characters!r}"
            )
        self.word_characters = word_characters
        self.lowercase = lowercase
        self._pattern = WORD_PATTERNS[word_characters]

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text.

        Runs of non-word characters act as delimiters, so leading, trailing and
        repeated delimiters never yield empty tokens.
        """
        tokens = self._pattern.findall(text)
        if self.lowercase:
            tokens = [t.lower() for t in tokens]
        return tokens

    def __call__(self, text: str) -> List[str]:
        return self.tokenize(text)

    def get_config_dict(self) -> dict:
        """Return tokenizer settings as a dictionary."""
        return {"word_characters": self.word_characters, "lowercase": self.lowercase}


class FrequencyTable(Mapping):
    """
    Read-only mapping from normalized word to occurrence count.

    Compares equal to any mapping with the same items, including a plain dict.
    Every key is a non-empty string and every count is a positive integer.
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: Optional[Mapping] = None):
        """
        Args:
            counts: Initial word -> count mapping

        Raises:
            ValueError: If a key is empty or a count is not a positive integer
        """
        counts = dict(counts or {})
        for word, count in counts.items():
            if not isinstance(word, str) or not word:
                raise ValueError(f"Frequency table keys must be non-empty strings, got: {word!r}")
            if not isinstance(count, int) or count <= 0:
                raise ValueError(f"Count for {word!r} must be a positive integer, got: {count!r}")
        self._counts = counts

    def __getitem__(self, word: str) -> int:
        return self._counts[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyTable({self._counts!r})"

    def __add__(self, other: "FrequencyTable") -> "FrequencyTable":
        """Entry-wise sum of two tables."""
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        combined = Counter(self._counts)
        combined.update(other._counts)
        return FrequencyTable(combined)

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        """
        Return (word, count) pairs ordered by count, highest first.

        Ties are ordered alphabetically so the result is stable across runs.

        Args:
            n: Maximum number of pairs to return (all pairs if None)
        """
        ranked = sorted(self._counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked if n is None else ranked[:n]

    def total(self) -> int:
        """Total number of tokens counted."""
        return sum(self._counts.values())

    def to_dict(self) -> dict:
        return dict(self._counts)


class WordFrequencyCounter:
    """
    Counts normalized words across a sequence of snippets.

    Stateless apart from its tokenizer: each call to count() builds a new table.
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self.tokenizer = tokenizer or Tokenizer()

    @classmethod
    def from_config(cls, config: dict) -> "WordFrequencyCounter":
        """
        Build a counter from the analysis config.

        Args:
            config: Dict as returned by load_analysis_config()
        """
        settings = config.get("word_frequency", {})
        return cls(Tokenizer(word_characters=settings.get("word_characters", "ascii")))

    def count(self, snippets: Iterable[str]) -> FrequencyTable:
        """
        Count every normalized token in every snippet.

        Args:
            snippets: Zero or more text snippets (not modified)

        Returns:
            FrequencyTable of word -> total occurrences
        """
        counts = Counter(
            token for snippet in snippets for token in self.tokenizer.tokenize(snippet)
        )
        return FrequencyTable(counts)


def count_words(snippets: Iterable[str], word_characters: str = "ascii") -> FrequencyTable:
    """Count words across snippets with a default tokenizer."""
    return WordFrequencyCounter(Tokenizer(word_characters=word_characters)).count(snippets)


def snippet_word_counts(jobs, counter: Optional[WordFrequencyCounter] = None) -> FrequencyTable:
    """
    Count words across the snippet of every job.

    Args:
        jobs: Iterable of Job records
        counter: Counter to use (defaults to ASCII word characters)

    Returns:
        FrequencyTable over all job snippets
    """
    counter = counter or WordFrequencyCounter()
    table = counter.count(job.snippet for job in jobs)
    log_frequency_summary(table)
    return table
