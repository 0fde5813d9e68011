"""Multinomial scoring of one document against one category.

A category's score is ``likelihood * prior``:

- the likelihood is ``log10(1 + sum(normalized weights))`` over the
  document's tokens, where each token carries the category's weight if the
  category has seen it and the document's own weight otherwise;
- the prior is a ratio between the category's full frequency map and the
  document's tokens (see ``weighting.fraction``).

The result ranks categories against each other. It is not a probability.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping

from .accumulator import CorpusView, FrequencyMap, document_frequency, minmax_normalize
from .models import Document, NormalizationMode
from .weighting import fraction, tfidf

PriorFn = Callable[[FrequencyMap, FrequencyMap], float]
WeightingFn = Callable[[float, int, int], float]


def merge(category_tokens: FrequencyMap, document_tokens: FrequencyMap) -> dict[str, float]:
    """Pick a weight for every document token.

    Tokens the category has never seen keep the document's own weight
    instead of dropping to zero. Category tokens absent from the document
    are ignored.
    """
    merged: dict[str, float] = {}
    for token, document_weight in document_tokens.items():
        if token in category_tokens:
            merged[token] = category_tokens[token]
        else:
            merged[token] = document_weight
    return merged


def normalize(
    tokens: Mapping[str, float],
    view: CorpusView,
    trainings: int,
    mode: NormalizationMode = NormalizationMode.TFIDF,
    weighting: WeightingFn = tfidf,
) -> list[float]:
    """Scale each token weight according to ``mode``."""
    if mode == NormalizationMode.MINMAX:
        return [minmax_normalize(view, token, weight) for token, weight in tokens.items()]
    return [
        weighting(weight, trainings, document_frequency(view, token))
        for token, weight in tokens.items()
    ]


def likelihood(
    category_tokens: FrequencyMap,
    document: Document,
    view: CorpusView,
    mode: NormalizationMode = NormalizationMode.TFIDF,
    weighting: WeightingFn = tfidf,
) -> float:
    merged = merge(category_tokens, document.tokens)
    values = normalize(merged, view, document.trainings, mode, weighting)
    return math.log10(sum(values, 1))


def score(
    category_tokens: FrequencyMap,
    document: Document,
    view: CorpusView,
    mode: NormalizationMode = NormalizationMode.TFIDF,
    *,
    prior: PriorFn = fraction,
    weighting: WeightingFn = tfidf,
) -> float:
    """Score ``document`` against one category.

    Args:
        category_tokens: The category's full frequency map.
        document: Document under classification.
        view: Snapshot of every category, used for cross-category statistics.
        mode: Normalization applied to the merged token weights.
        prior: Ratio collaborator ``(frequency_map, document_tokens) -> float``.
        weighting: Frequency-weighting collaborator used in TF-IDF mode,
            ``(weight, trainings, document_frequency) -> float``.

    Returns:
        The category's score. Higher is better.
    """
    return (
        likelihood(category_tokens, document, view, mode, weighting)
        * prior(category_tokens, document.tokens)
    )
