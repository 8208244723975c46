"""Tests for the command-line demo."""

from __future__ import annotations

from click.testing import CliRunner

from ngram_bayes.cli import DEMO_CORPUS, DEMO_QUERY, build_demo_classifier, main


class TestDemo:
    """Tests for the demo command."""

    def test_prints_winning_label_without_newline(self):
        result = CliRunner().invoke(main, [])
        assert result.exit_code == 0
        assert result.output == "ruim"

    def test_rejects_unknown_options(self):
        result = CliRunner().invoke(main, ["--verbose"])
        assert result.exit_code != 0

    def test_demo_classifier_is_trained_on_corpus(self):
        classifier = build_demo_classifier()
        assert classifier.labels == ["bom", "ruim"]
        assert classifier.total_documents == sum(len(s) for s in DEMO_CORPUS.values())

    def test_demo_query_scores(self):
        scores = build_demo_classifier().classify(DEMO_QUERY)
        assert scores["ruim"] > scores["bom"]
