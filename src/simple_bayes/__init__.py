"""SimpleBayes -- weighted multinomial Naive-Bayes text classification."""

__version__ = "0.1.0"

from . import accumulator
from .classifier import SimpleBayes, rank
from .classifier import classify as _classify
from .classifier import classify_one as _classify_one
from .config import ClassifierConfig, load_config, save_config
from .exceptions import (
    ConfigError,
    MalformedWeightError,
    SimpleBayesError,
    UnknownCategoryError,
)
from .models import Category, Corpus, Document, NormalizationMode
from .trainer import train as _train


def init() -> Corpus:
    """Return an empty corpus."""
    return Corpus()


def train(corpus: Corpus, category: str, text: str, weight: float = 1.0) -> Corpus:
    """Train ``category`` on ``text`` and return the new corpus."""
    return _train(corpus, category, text, weight)


def classify(corpus: Corpus, text: str, normalize: bool = False) -> dict[str, float]:
    """Score ``text`` against every category of ``corpus``."""
    return _classify(corpus, text, NormalizationMode.from_flag(normalize))


def classify_one(corpus: Corpus, text: str, normalize: bool = False) -> str:
    """Return the best category of ``corpus`` for ``text``."""
    return _classify_one(corpus, text, NormalizationMode.from_flag(normalize))


__all__ = [
    # Functional API
    "init",
    "train",
    "classify",
    "classify_one",
    "rank",
    # Stateful API
    "SimpleBayes",
    "ClassifierConfig",
    "load_config",
    "save_config",
    # Models
    "Category",
    "Corpus",
    "Document",
    "NormalizationMode",
    "accumulator",
    # Errors
    "SimpleBayesError",
    "UnknownCategoryError",
    "MalformedWeightError",
    "ConfigError",
]
