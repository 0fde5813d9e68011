"""Tests for per-category multinomial scoring."""

from __future__ import annotations

import math

import pytest

from simple_bayes import Document, NormalizationMode
from simple_bayes.multinomial import likelihood, merge, normalize, score


@pytest.fixture
def view():
    return (
        ("x", {"a": 2}),
        ("y", {"a": 1, "b": 1}),
    )


class TestMerge:
    def test_category_weight_wins_for_shared_tokens(self):
        assert merge({"a": 2, "b": 1}, {"a": 1, "c": 3}) == {"a": 2, "c": 3}

    def test_unseen_tokens_fall_back_to_document_weight(self):
        assert merge({}, {"a": 1, "b": 2}) == {"a": 1, "b": 2}

    def test_category_only_tokens_are_dropped(self):
        assert merge({"a": 2, "z": 9}, {"a": 1}) == {"a": 2}

    def test_empty_document(self):
        assert merge({"a": 2}, {}) == {}


class TestNormalize:
    def test_minmax(self, view):
        values = normalize({"a": 2, "b": 1, "z": 5}, view, 3, NormalizationMode.MINMAX)
        assert values == pytest.approx([0.5, 1.0, 0.0])

    def test_tfidf(self, view):
        values = normalize({"a": 2, "z": 1}, view, 3, NormalizationMode.TFIDF)
        assert values == pytest.approx([
            2 * (math.log10(4 / 3) + 1),
            1 * (math.log10(4 / 1) + 1),
        ])

    def test_accepts_mode_string(self, view):
        assert normalize({"a": 2}, view, 3, "minmax") == pytest.approx([0.5])

    def test_custom_weighting(self, view):
        values = normalize({"a": 2, "b": 1}, view, 3, weighting=lambda w, n, df: w * df)
        assert values == [4, 1]


class TestLikelihood:
    def test_empty_document_is_zero(self, view):
        assert likelihood({"a": 2}, Document(tokens={}, trainings=3), view) == 0.0

    def test_unseen_tokens_in_minmax_mode_are_zero(self, view):
        doc = Document(tokens={"unicorn": 4}, trainings=3)
        assert likelihood({"a": 2}, doc, view, NormalizationMode.MINMAX) == 0.0

    def test_log_of_one_plus_sum(self, view):
        doc = Document(tokens={"a": 1, "b": 1}, trainings=3)
        # x: a -> (2 - 1) / 2, b falls back to 1 -> (1 - 0) / 1
        expected = math.log10(1 + 0.5 + 1.0)
        assert likelihood({"a": 2}, doc, view, NormalizationMode.MINMAX) == pytest.approx(expected)


class TestScore:
    def test_product_of_likelihood_and_prior(self, view):
        doc = Document(tokens={"a": 1, "b": 1}, trainings=3)
        # y: a -> 0, b -> 1; prior is 2 / (2 + 2)
        expected = math.log10(1 + 0.0 + 1.0) * 0.5
        assert score({"a": 1, "b": 1}, doc, view, NormalizationMode.MINMAX) == pytest.approx(expected)

    def test_prior_relative_to_document_mass(self, view):
        doc = Document(tokens={"a": 1}, trainings=3)
        category = {"a": 3}
        expected = likelihood(category, doc, view) * 0.75
        assert score(category, doc, view) == pytest.approx(expected)

    def test_tokens_outside_document_do_not_change_score(self, view):
        doc = Document(tokens={"a": 1}, trainings=3)
        assert score({"a": 1, "b": 3}, doc, view) == score({"a": 1}, doc, view)

    def test_zero_weight_category_scores_zero(self, view):
        doc = Document(tokens={"a": 1}, trainings=3)
        assert score({"a": 0.0}, doc, view) == 0.0
        assert score({"a": 0.0}, doc, view, NormalizationMode.MINMAX) == 0.0

    def test_no_shared_tokens_scores_zero(self, view):
        doc = Document(tokens={"unicorn": 1}, trainings=3)
        assert score({"a": 2}, doc, view) == 0.0

    def test_empty_category_participates(self, view):
        doc = Document(tokens={"a": 1}, trainings=3)
        assert score({}, doc, view) == 0.0

    def test_pluggable_prior(self, view):
        doc = Document(tokens={"a": 1, "z": 2}, trainings=3)
        assert score({"a": 2}, doc, view, prior=lambda m, t: 1.0) == pytest.approx(
            likelihood({"a": 2}, doc, view)
        )

    def test_does_not_mutate_inputs(self, view):
        category = {"a": 2}
        doc = Document(tokens={"a": 1, "z": 1}, trainings=3)
        score(category, doc, view)
        assert category == {"a": 2}
        assert doc.tokens == {"a": 1, "z": 1}
