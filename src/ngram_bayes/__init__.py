"""ngram-bayes -- incremental n-gram Naive Bayes text classification."""

__version__ = "0.1.0"

from .classifier import EmptyModelError, NGramClassifier, UnknownClassError
from .models import ClassModel
from .tokenizer import split_words

__all__ = [
    # Core
    "NGramClassifier",
    "ClassModel",
    "split_words",
    # Errors
    "EmptyModelError",
    "UnknownClassError",
]
