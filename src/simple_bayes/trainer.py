"""Merge weighted training text into a corpus."""

from __future__ import annotations

import logging
import math
import numbers

from .exceptions import MalformedWeightError
from .models import Category, Corpus
from .tokenizer import count, tokenize

logger = logging.getLogger(__name__)


def increment(category: Category) -> Category:
    """Return ``category`` with its training counter bumped by one."""
    return Category(tokens=category.tokens, trainings=category.trainings + 1)


def validate_weight(weight: object) -> float:
    """Return ``weight`` as a float, rejecting anything but finite non-negative numbers."""
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise MalformedWeightError(f"Weight must be a number, got {weight!r}")
    value = float(weight)
    if math.isnan(value) or math.isinf(value):
        raise MalformedWeightError(f"Weight must be finite, got {value}")
    if value < 0:
        raise MalformedWeightError(f"Weight must be non-negative, got {value}")
    return value


def _merge(base: dict[str, float], extra: dict[str, float]) -> dict[str, float]:
    merged = dict(base)
    for token, weight in extra.items():
        merged[token] = merged.get(token, 0) + weight
    return merged


def train(corpus: Corpus, category: str, text: str, weight: float = 1.0) -> Corpus:
    """Train ``category`` on ``text`` and return the updated corpus.

    Each token occurrence adds ``weight`` to the category's map. The
    category's counter and the corpus counter go up by exactly one per call,
    whatever the weight. The input corpus is left untouched; maps of the
    other categories are shared with the result.

    Args:
        corpus: Corpus to train on top of.
        category: Label to train. Created on first use.
        text: Raw training text.
        weight: Multiplier applied to this call's token counts.

    Returns:
        A new Corpus.

    Raises:
        MalformedWeightError: If ``weight`` is negative, NaN, infinite or not a number.
    """
    weight = validate_weight(weight)
    new_tokens = count(tokenize(text), weight)

    current = corpus.categories.get(category, Category())
    updated = increment(Category(tokens=_merge(current.tokens, new_tokens),
                                 trainings=current.trainings))

    categories = dict(corpus.categories)
    categories[category] = updated

    logger.debug(
        "Trained %r on %d tokens (weight=%s, trainings=%d)",
        category, len(new_tokens), weight, updated.trainings,
    )

    return Corpus(
        categories=categories,
        trainings=corpus.trainings + 1,
        tokens=_merge(corpus.tokens, new_tokens),
    )
