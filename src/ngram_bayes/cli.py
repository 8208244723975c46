"""Command-line demo for ngram-bayes.

Trains a small Portuguese sentiment corpus, classifies a fixed query and
prints the winning label (``bom`` or ``ruim``) without a trailing newline.

Usage::

    ngram-bayes
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from .classifier import NGramClassifier

N_SPLIT = 1

DEMO_CORPUS: dict[str, list[str]] = {
    "bom": [
        "eu te adoro",
        "eu te amo",
        "eu amo batatas fritas",
        "eu amo bolo",
        "voce é demais",
        "bolo que é demais",
    ],
    "ruim": [
        "peixe é ruim",
        "eu te odeio",
        "eu quero ver queimar",
        "eu quero é que se exploda",
        "eu acho que isso é muito ruim",
        "odeio ficar parado",
    ],
}

DEMO_QUERY = "nao achei o filme ruim"


def _configure_logging() -> None:
    """Send warnings to stderr so stdout only carries the result."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_demo_classifier() -> NGramClassifier:
    """Return a classifier trained on :data:`DEMO_CORPUS`."""
    classifier = NGramClassifier(n_split=N_SPLIT)
    for label, sentences in DEMO_CORPUS.items():
        for sentence in sentences:
            classifier.train(label, sentence)
    return classifier


@click.command()
def main() -> None:
    """Classify a fixed sentence as "bom" or "ruim" and print the label."""
    _configure_logging()

    scores = build_demo_classifier().classify(DEMO_QUERY)
    winner = "bom" if scores["bom"] > scores["ruim"] else "ruim"
    click.echo(winner, nl=False)


if __name__ == "__main__":
    main()
