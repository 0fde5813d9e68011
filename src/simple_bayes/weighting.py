"""Ratio and frequency-weighting collaborators used by the scoring model."""

from __future__ import annotations

import math

from .accumulator import FrequencyMap, sum_all, sum_only


def fraction(frequency_map: FrequencyMap, reference: FrequencyMap) -> float:
    """Weight the map puts on the ``reference`` tokens, relative to the reference.

    Computes ``shared / (shared + sum_all(reference))``, where ``shared`` is
    the map's weight on tokens that ``reference`` also holds. The result lies
    in ``[0, 1)`` and only grows as the map's weights grow; tokens outside
    ``reference`` do not affect it. Returns 0.0 when the two share no token
    or when every involved weight is zero.

    Examples::

        >>> fraction({"red": 1, "sweet": 1, "round": 2}, {"red": 1, "round": 1, "maybe": 2})
        0.42857142857142855
    """
    shared = reference.keys() & frequency_map.keys()
    if not shared:
        return 0.0
    weight = sum_only(frequency_map, shared)
    total = weight + sum_all(reference)
    if total == 0:
        return 0.0
    return weight / total


def tfidf(weight: float, trainings: int, document_frequency: int) -> float:
    """Down-weight ``weight`` for tokens that many categories share.

    Uses a smoothed inverse document frequency,
    ``log10((1 + trainings) / (1 + document_frequency)) + 1``, which stays
    positive because a token cannot appear in more categories than there
    were training calls.
    """
    idf = math.log10((1 + trainings) / (1 + document_frequency)) + 1
    return weight * idf
