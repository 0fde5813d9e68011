"""Score documents against every trained category and pick the best one.

Provides functional helpers that work on an immutable ``Corpus`` snapshot,
plus ``SimpleBayes``, a small stateful wrapper with JSON persistence.

Example::

    bayes = SimpleBayes()
    bayes.train("apple", "red sweet")
    bayes.train("apple", "green", weight=0.5)
    bayes.train("banana", "yellow long", weight=2)

    bayes.classify("a sweet red thing")      # {"apple": 0.28, "banana": 0.0}
    bayes.classify_one("a sweet red thing")  # "apple"

    bayes.save("fruit.json")
    loaded = SimpleBayes.load("fruit.json")
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Optional, Union

from .config import ClassifierConfig
from .exceptions import SimpleBayesError, UnknownCategoryError
from .models import Corpus, Document, NormalizationMode
from .multinomial import score
from .trainer import train as train_corpus

logger = logging.getLogger(__name__)

TextOrDocument = Union[str, Document]

MODEL_VERSION = "1.0"


def _as_document(corpus: Corpus, text: TextOrDocument) -> Document:
    if isinstance(text, Document):
        return text
    return Document.from_text(text, corpus)


def classify(
    corpus: Corpus,
    text: TextOrDocument,
    mode: NormalizationMode = NormalizationMode.TFIDF,
) -> dict[str, float]:
    """Score a document against every category in the corpus.

    All categories are scored against the same document and the same corpus
    view, so their scores can be compared directly.

    Args:
        corpus: Trained corpus snapshot.
        text: Raw text, or a prepared Document.
        mode: Normalization mode for the token weights.

    Returns:
        Dict of {label: score}, in the corpus's category order.

    Raises:
        UnknownCategoryError: If the corpus has no categories.
    """
    if not corpus.categories:
        raise UnknownCategoryError("Corpus has no categories. Train it first.")

    mode = NormalizationMode(mode)
    document = _as_document(corpus, text)
    view = corpus.view()

    scores = {
        label: score(category.tokens, document, view, mode)
        for label, category in corpus.categories.items()
    }
    logger.debug("Scored %d categories (%s): %s", len(scores), mode.value, scores)
    return scores


def rank(scores: dict[str, float]) -> list[tuple[str, float]]:
    """Order scores from best to worst.

    Equal scores are ordered by label, so the ranking never depends on
    insertion order.
    """
    return sorted(scores.items(), key=lambda item: (-item[1], item[0]))


def classify_one(
    corpus: Corpus,
    text: TextOrDocument,
    mode: NormalizationMode = NormalizationMode.TFIDF,
) -> str:
    """Return the label of the best-scoring category.

    Raises:
        UnknownCategoryError: If the corpus has no categories.
    """
    label, _ = rank(classify(corpus, text, mode))[0]
    return label


class SimpleBayes:
    """Stateful classifier that trains and classifies raw text.

    Each training call swaps in a new immutable corpus under a lock, so
    concurrent ``train`` calls are serialized while ``classify`` calls read
    whichever snapshot is current without blocking.

    Args:
        config: Default options for training and classification.
        corpus: Start from an existing corpus instead of an empty one.
    """

    def __init__(
        self,
        config: Optional[ClassifierConfig] = None,
        corpus: Optional[Corpus] = None,
    ) -> None:
        self.config = config or ClassifierConfig()
        self._corpus = corpus or Corpus()
        self._lock = threading.Lock()

    @property
    def corpus(self) -> Corpus:
        """The current corpus snapshot."""
        return self._corpus

    @property
    def categories(self) -> list[str]:
        """Labels trained so far, in first-trained order."""
        return self._corpus.labels

    @property
    def is_trained(self) -> bool:
        return bool(self._corpus.categories)

    def train(self, category: str, text: str, weight: Optional[float] = None) -> "SimpleBayes":
        """Train ``category`` on ``text``.

        Args:
            category: Label to train.
            text: Raw training text.
            weight: Multiplier for this call's token counts. Defaults to
                ``config.default_weight``.

        Returns:
            Self (for method chaining).
        """
        if weight is None:
            weight = self.config.default_weight
        with self._lock:
            self._corpus = train_corpus(self._corpus, category, text, weight)
        return self

    def classify(
        self,
        text: str,
        normalize: Optional[bool] = None,
        top: Optional[int] = None,
    ) -> dict[str, float]:
        """Score ``text`` against every category, best first.

        Args:
            text: Raw document text.
            normalize: Use min-max normalization. Defaults to ``config.normalize``.
            top: Keep only the best ``top`` categories. Defaults to ``config.top``.

        Returns:
            Dict of {label: score} ordered by rank.
        """
        ranked = rank(classify(self._corpus, text, self._mode(normalize)))
        top = top if top is not None else self.config.top
        if top is not None:
            ranked = ranked[:top]
        return dict(ranked)

    def classify_one(self, text: str, normalize: Optional[bool] = None) -> str:
        """Return the best category for ``text``."""
        return classify_one(self._corpus, text, self._mode(normalize))

    def _mode(self, normalize: Optional[bool]) -> NormalizationMode:
        if normalize is None:
            return self.config.mode
        return NormalizationMode.from_flag(normalize)

    def save(self, path: str | Path) -> None:
        """Save the trained corpus and configuration to a JSON file."""
        model_data = {
            "version": MODEL_VERSION,
            "config": self.config.to_dict(),
            "corpus": self._corpus.to_dict(),
        }

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(model_data, f, indent=2)

    @classmethod
    def load(cls, path: str | Path, config: Optional[ClassifierConfig] = None) -> "SimpleBayes":
        """Load a model saved with ``save``.

        Args:
            path: Path to the saved model file.
            config: Overrides the configuration stored in the file.

        Raises:
            SimpleBayesError: If the file is not a saved model.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        try:
            corpus = Corpus.from_dict(data["corpus"])
        except (KeyError, TypeError, AttributeError) as e:
            raise SimpleBayesError(f"{path} is not a saved model: missing or malformed {e}") from e

        return cls(
            config=config or ClassifierConfig.from_dict(data.get("config", {})),
            corpus=corpus,
        )
