"""Shared test fixtures for ngram-bayes tests."""

from __future__ import annotations

import pytest

from ngram_bayes.classifier import NGramClassifier
from ngram_bayes.cli import DEMO_CORPUS


@pytest.fixture
def demo_corpus() -> dict[str, list[str]]:
    """The two-class Portuguese sentiment corpus used by the demo."""
    return DEMO_CORPUS


@pytest.fixture
def trained_classifier(demo_corpus: dict[str, list[str]]) -> NGramClassifier:
    """Unigram classifier trained on the demo corpus."""
    classifier = NGramClassifier(n_split=1)
    for label, sentences in demo_corpus.items():
        for sentence in sentences:
            classifier.train(label, sentence)
    return classifier


@pytest.fixture
def bigram_classifier() -> NGramClassifier:
    """Small bigram classifier with overlapping vocabulary between classes."""
    classifier = NGramClassifier(n_split=2)
    classifier.train("sports", "the team won the match")
    classifier.train("sports", "the team lost the match")
    classifier.train("weather", "the rain fell all day")
    return classifier
