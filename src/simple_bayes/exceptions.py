"""Error types raised by simple_bayes."""

from __future__ import annotations


class SimpleBayesError(Exception):
    """Base class for all simple_bayes errors."""


class UnknownCategoryError(SimpleBayesError, LookupError):
    """Raised when classifying against a corpus with no categories."""


class MalformedWeightError(SimpleBayesError, ValueError):
    """Raised when a training weight is negative or not a finite number."""


class ConfigError(SimpleBayesError, ValueError):
    """Raised when a configuration value or file is invalid."""
