"""Turn raw text into tokens and weighted frequency maps."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable

_WORD_RE = re.compile(r"\b[a-zA-Z][a-zA-Z'-]*[a-zA-Z]\b|\b[a-zA-Z]\b")


def tokenize(text: str) -> list[str]:
    """Extract lowercase word tokens from text, in order."""
    return [m.group().lower() for m in _WORD_RE.finditer(text)]


def count(tokens: Iterable[str], weight: float = 1.0) -> dict[str, float]:
    """Build a frequency map where each occurrence contributes ``weight``.

    Examples::

        >>> count(["red", "sweet", "red"], weight=0.5)
        {'red': 1.0, 'sweet': 0.5}
    """
    return {token: n * weight for token, n in Counter(tokens).items()}
