"""Data models for trained categories, corpora, and documents under classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Optional

from .accumulator import CorpusView
from .tokenizer import count, tokenize


class NormalizationMode(str, Enum):
    """How a document's token weights are scaled before summation."""

    TFIDF = "tfidf"
    MINMAX = "minmax"

    @classmethod
    def from_flag(cls, normalize: bool) -> "NormalizationMode":
        return cls.MINMAX if normalize else cls.TFIDF


@dataclass(frozen=True)
class Category:
    """A label's accumulated token weights and its training counter."""

    tokens: dict[str, float] = field(default_factory=dict)
    trainings: int = 0

    def to_dict(self) -> dict:
        return {"tokens": dict(self.tokens), "trainings": self.trainings}

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        return cls(
            tokens={k: float(v) for k, v in data["tokens"].items()},
            trainings=int(data["trainings"]),
        )


@dataclass(frozen=True)
class Corpus:
    """An immutable snapshot of every trained category.

    Training never edits a corpus in place; it returns a new one. A corpus
    can therefore be shared freely between threads that classify against it.

    Attributes:
        categories: Category per label, in first-trained order.
        trainings: Total number of training calls across all categories.
        tokens: Token weights summed over all categories.
    """

    categories: dict[str, Category] = field(default_factory=dict)
    trainings: int = 0
    tokens: dict[str, float] = field(default_factory=dict)

    @property
    def labels(self) -> list[str]:
        return list(self.categories)

    @property
    def tokens_per_training(self) -> float:
        """Mean token mass contributed by one training call."""
        if not self.trainings:
            return 0.0
        return sum(self.tokens.values()) / self.trainings

    def view(self) -> CorpusView:
        """Return read-only ``(label, frequency_map)`` pairs for every category."""
        return tuple(
            (label, MappingProxyType(category.tokens))
            for label, category in self.categories.items()
        )

    def to_dict(self) -> dict:
        return {
            "categories": {
                label: category.to_dict() for label, category in self.categories.items()
            },
            "trainings": self.trainings,
            "tokens": dict(self.tokens),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Corpus":
        return cls(
            categories={
                label: Category.from_dict(c) for label, c in data["categories"].items()
            },
            trainings=int(data["trainings"]),
            tokens={k: float(v) for k, v in data["tokens"].items()},
        )


@dataclass(frozen=True)
class Document:
    """A text to classify, with the corpus-level count the model needs.

    Per-token statistics across categories come from the corpus view passed
    to the scoring functions, not from the document.

    Attributes:
        tokens: Frequency map of the document's own tokens.
        trainings: Total training calls in the corpus it is scored against.
    """

    tokens: dict[str, float]
    trainings: int = 0

    @classmethod
    def from_text(cls, text: str, corpus: Optional[Corpus] = None) -> "Document":
        corpus = corpus or Corpus()
        return cls(
            tokens=count(tokenize(text)),
            trainings=corpus.trainings,
        )
