"""Tests for the per-class frequency model."""

from __future__ import annotations

from ngram_bayes.models import ClassModel


class TestClassModel:
    """Tests for ClassModel."""

    def test_defaults_are_empty(self):
        model = ClassModel()
        assert model.document_count == 0
        assert model.word_sequence == []
        assert model.word_count == 0
        assert not model.word_frequency

    def test_instances_do_not_share_state(self):
        a = ClassModel()
        b = ClassModel()
        a.add(["x"])
        assert b.word_sequence == []
        assert b.frequency("x") == 0

    def test_add_keeps_duplicates_in_sequence(self):
        model = ClassModel()
        model.add(["eu", "te", "eu"])
        assert model.word_sequence == ["eu", "te", "eu"]
        assert model.word_count == 3
        assert model.frequency("eu") == 2
        assert model.frequency("te") == 1

    def test_add_counts_one_document(self):
        model = ClassModel()
        model.add(["a", "b"])
        model.add(["c"])
        assert model.document_count == 2

    def test_add_with_no_ngrams_still_counts_document(self):
        model = ClassModel()
        model.add([])
        assert model.document_count == 1
        assert model.word_count == 0

    def test_unseen_frequency_is_zero(self):
        model = ClassModel()
        model.add(["a"])
        assert model.frequency("zzz") == 0
        assert "zzz" not in model.word_frequency

    def test_sequence_length_matches_frequency_total(self):
        model = ClassModel()
        for ngrams in (["a", "b", "a"], ["b"], ["c", "c", "c"]):
            model.add(ngrams)
        assert model.word_count == sum(model.word_frequency.values())
