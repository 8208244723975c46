"""Incremental n-gram Naive Bayes classifier with Laplace smoothing.

Sentences are tokenized into n-grams of a fixed window size and counted
per class. Classification multiplies the class prior by the add-one
smoothed likelihood of every distinct query n-gram:

    score(c) = P(c) * prod((count(g, c) + 1) / (|c| + |V|))

where ``|c|`` is the number of n-gram occurrences seen in class ``c`` and
``|V|`` is the number of distinct n-grams seen across all classes.

Scores are not normalized by ``P(sentence)``. They rank classes against
each other and must not be read as calibrated probabilities. Scoring is
done in linear space, so very long queries can underflow to zero.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Sequence

from .models import ClassModel
from .tokenizer import split_words

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class EmptyModelError(RuntimeError):
    """Raised when a prior or prediction is requested before any training."""


class UnknownClassError(ValueError):
    """Raised when a class label was never seen during training."""


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------

class NGramClassifier:
    """Multinomial Naive Bayes over space-delimited n-grams.

    The model is purely additive: every call to :meth:`train` adds counts,
    nothing is ever removed. :meth:`train` and :meth:`classify` may be
    interleaved freely, and each classification reflects all training done
    so far. Instances hold mutable state without locking; callers sharing
    one instance across threads must serialize access themselves.

    Example::

        classifier = NGramClassifier(n_split=1)
        classifier.train("bom", "eu te amo")
        classifier.train("ruim", "eu te odeio")

        scores = classifier.classify("eu amo bolo")
        print(classifier.predict("eu amo bolo"))  # "bom"

    Args:
        n_split: n-gram window size in tokens (must be at least 1).
    """

    def __init__(self, n_split: int = 1) -> None:
        if n_split < 1:
            raise ValueError(f"n_split must be at least 1, got {n_split}")
        self.n_split = n_split
        self.total_documents = 0
        self.classes: dict[str, ClassModel] = {}
        self.vocabulary: Counter[str] = Counter()

    def __repr__(self) -> str:
        return (
            f"NGramClassifier(n_split={self.n_split}, "
            f"classes={len(self.classes)}, documents={self.total_documents})"
        )

    @property
    def labels(self) -> list[str]:
        """Known class labels, in the order they were first trained."""
        return list(self.classes)

    @property
    def vocabulary_size(self) -> int:
        """Number of distinct n-grams seen across all classes."""
        return len(self.vocabulary)

    # -- training -----------------------------------------------------------

    def train(self, label: str, sentence: str) -> None:
        """Add one labeled sentence to the model.

        Args:
            label: Class label; a new label creates a new class.
            sentence: Raw training sentence.
        """
        self.total_documents += 1

        model = self.classes.get(label)
        if model is None:
            logger.debug("Creating class %r", label)
            model = self.classes[label] = ClassModel()

        ngrams = split_words(self.n_split, sentence)
        self.vocabulary.update(ngrams)
        model.add(ngrams)

        logger.debug(
            "Trained %r on %d n-gram(s); class now has %d document(s)",
            label, len(ngrams), model.document_count,
        )

    def train_batch(self, sentences: Sequence[str], labels: Sequence[str]) -> None:
        """Train on pairs of sentences and labels.

        Args:
            sentences: Raw training sentences.
            labels: Class label for each sentence.

        Raises:
            ValueError: If sentences and labels have different lengths.
        """
        if len(sentences) != len(labels):
            raise ValueError(
                f"sentences ({len(sentences)}) and labels ({len(labels)}) must have same length"
            )
        for sentence, label in zip(sentences, labels):
            self.train(label, sentence)

    # -- scoring ------------------------------------------------------------

    def get_prior(self, label: str) -> float:
        """Return the fraction of training documents labeled ``label``.

        Raises:
            EmptyModelError: If nothing has been trained yet.
            UnknownClassError: If ``label`` was never trained.
        """
        if self.total_documents == 0:
            raise EmptyModelError("Classifier has no training documents. Call train() first.")
        return self._get_class(label).document_count / self.total_documents

    def conditional_probability(self, ngram: str, label: str) -> float:
        """Return the add-one smoothed ``P(ngram | label)``.

        The result is always in ``(0, 1]``.

        Raises:
            UnknownClassError: If ``label`` was never trained.
        """
        return self._smoothed(self._get_class(label), ngram, self.vocabulary_size)

    def classify(self, sentence: str) -> dict[str, float]:
        """Score a sentence against every known class.

        Each distinct n-gram of the query contributes one factor to the
        score, however many times it repeats in the query.

        Args:
            sentence: Raw query sentence.

        Returns:
            Dict mapping each class label to its un-normalized score. Empty
            if no class has been trained.
        """
        vocab_size = self.vocabulary_size
        query = list(dict.fromkeys(split_words(self.n_split, sentence)))

        scores: dict[str, float] = {}
        for label, model in self.classes.items():
            score = self.get_prior(label)
            for ngram in query:
                score *= self._smoothed(model, ngram, vocab_size)
            scores[label] = score

        logger.debug("Scores for %r: %s", sentence, scores)
        return scores

    def predict(self, sentence: str) -> str:
        """Return the highest-scoring label for a sentence.

        Ties go to the class that was trained first.

        Raises:
            EmptyModelError: If nothing has been trained yet.
        """
        scores = self.classify(sentence)
        if not scores:
            raise EmptyModelError("Classifier has no classes. Call train() first.")
        return max(scores, key=scores.get)  # type: ignore[arg-type]

    def most_informative_ngrams(
        self,
        label: str,
        top_n: int = 20,
    ) -> list[tuple[str, float]]:
        """Return the n-grams that most favour ``label`` over other classes.

        Each n-gram is scored by the log of its smoothed probability under
        ``label`` minus the mean log probability under the other classes.
        With a single class the plain log probability is used.

        Args:
            label: Target class label.
            top_n: Number of n-grams to return.

        Returns:
            List of (ngram, score) tuples, most informative first.

        Raises:
            UnknownClassError: If ``label`` was never trained.
        """
        target = self._get_class(label)
        others = [m for name, m in self.classes.items() if name != label]
        vocab_size = self.vocabulary_size

        ranked: list[tuple[str, float]] = []
        for ngram in self.vocabulary:
            score = math.log(self._smoothed(target, ngram, vocab_size))
            if others:
                other_lps = [
                    math.log(self._smoothed(m, ngram, vocab_size)) for m in others
                ]
                score -= sum(other_lps) / len(other_lps)
            ranked.append((ngram, round(score, 4)))

        ranked.sort(key=lambda x: x[1], reverse=True)
        return ranked[:top_n]

    # -- helpers ------------------------------------------------------------

    def _get_class(self, label: str) -> ClassModel:
        try:
            return self.classes[label]
        except KeyError:
            raise UnknownClassError(
                f"Unknown class: {label!r}. Known: {self.labels}"
            ) from None

    @staticmethod
    def _smoothed(model: ClassModel, ngram: str, vocab_size: int) -> float:
        return (model.frequency(ngram) + 1) / (model.word_count + vocab_size)
