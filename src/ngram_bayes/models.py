"""Data models for n-gram Naive Bayes classification."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class ClassModel:
    """Frequency accumulator for a single class label.

    Attributes:
        document_count: Number of training sentences seen for this class.
        word_sequence: Every n-gram observed in this class, duplicates kept.
        word_frequency: Occurrence count of each distinct n-gram.
    """

    document_count: int = 0
    word_sequence: list[str] = field(default_factory=list)
    word_frequency: Counter[str] = field(default_factory=Counter)

    @property
    def word_count(self) -> int:
        """Total n-gram occurrences, including duplicates."""
        return len(self.word_sequence)

    def frequency(self, ngram: str) -> int:
        return self.word_frequency.get(ngram, 0)

    def add(self, ngrams: Iterable[str]) -> None:
        """Record one training document made of ``ngrams``."""
        self.document_count += 1
        for ngram in ngrams:
            self.word_sequence.append(ngram)
            self.word_frequency[ngram] += 1
