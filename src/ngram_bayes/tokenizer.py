"""Space-delimited n-gram tokenizer.

Sentences are split on the single-space character only. Nothing is
trimmed, lowercased, or collapsed, so two consecutive spaces produce an
empty token and the empty string produces one empty token.
"""

from __future__ import annotations

_SEPARATOR = " "


def split_words(size: int, sentence: str) -> list[str]:
    """Split a sentence into overlapping n-grams of ``size`` tokens.

    Sentences with ``size`` tokens or fewer are not windowed: the whole
    sentence becomes a single gram.

    >>> split_words(1, "this outputs words")
    ['this', 'outputs', 'words']
    >>> split_words(2, "this outputs words")
    ['this outputs', 'outputs words']
    >>> split_words(5, "this outputs words")
    ['this outputs words']

    Args:
        size: Window width in tokens (must be at least 1).
        sentence: Raw sentence text.

    Returns:
        List of n-grams in left-to-right order.

    Raises:
        ValueError: If ``size`` is less than 1.
    """
    if size < 1:
        raise ValueError(f"size must be at least 1, got {size}")

    tokens = sentence.split(_SEPARATOR)
    if len(tokens) <= size:
        return [_SEPARATOR.join(tokens)]

    return [
        _SEPARATOR.join(tokens[i : i + size])
        for i in range(len(tokens) - size + 1)
    ]
