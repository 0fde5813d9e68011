"""Aggregation primitives over weighted token-frequency maps.

Every function here is pure: inputs are read, never mutated. Functions that
take a ``view`` expect a corpus view, i.e. a sequence of
``(label, frequency_map)`` pairs as produced by ``Corpus.view()``.

An empty frequency map accumulates to ``1`` rather than ``0`` so that an
untrained category can be folded into sums and products downstream without
forcing the result to zero.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

FrequencyMap = Mapping[str, float]
CorpusView = Sequence[tuple[str, FrequencyMap]]


def sum_all(frequency_map: FrequencyMap) -> float:
    """Sum all weights in the map.

    Examples::

        >>> sum_all({"nice": 3, "cute": 1, "cat": 1, "dog": 2})
        7
        >>> sum_all({})
        1
    """
    if not frequency_map:
        return 1
    return sum(frequency_map.values())


def sum_only(frequency_map: FrequencyMap, keys: Iterable[str]) -> float:
    """Sum the weights of ``keys`` that are present in the map.

    Keys missing from the map contribute nothing. An empty map still
    accumulates to ``1``.

    Examples::

        >>> sum_only({"nice": 3, "cute": 1, "cat": 1, "dog": 2}, ["nice", "cute"])
        4
        >>> sum_only({"nice": 3}, ["dog"])
        0
    """
    if not frequency_map:
        return 1
    return sum(frequency_map[key] for key in set(keys) if key in frequency_map)


def document_frequency(view: CorpusView, token: str) -> int:
    """Count the categories whose map contains ``token``."""
    return sum(1 for _, frequency_map in view if token in frequency_map)


def max_weight(view: CorpusView, token: str) -> float:
    """Return the largest weight ``token`` has in any category.

    Returns 0 when no category contains the token, including on an empty view.
    """
    return max((frequency_map.get(token, 0) for _, frequency_map in view), default=0)


def min_weight(view: CorpusView, token: str) -> float:
    """Return the smallest weight ``token`` has across categories.

    A category lacking the token counts as 0, so the result is 0 as soon as
    one category has never seen it. An empty view has no categories to
    compare and also yields 0.
    """
    return min((frequency_map.get(token, 0) for _, frequency_map in view), default=0)


def minmax_normalize(view: CorpusView, token: str, weight: float) -> float:
    """Scale ``weight`` by the token's spread across the corpus.

    Computes ``(weight - min_weight) / max_weight``. Tokens no category has
    seen (``max_weight == 0``) normalize to exactly 0.
    """
    maximum = max_weight(view, token)
    if maximum == 0:
        return 0
    return (weight - min_weight(view, token)) / maximum
