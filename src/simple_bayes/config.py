"""Classifier configuration, loadable from YAML."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .exceptions import ConfigError
from .models import NormalizationMode

logger = logging.getLogger(__name__)


@dataclass
class ClassifierConfig:
    """Defaults applied by ``SimpleBayes`` when a call does not override them.

    Args:
        normalize: Use min-max normalization instead of TF-IDF weighting.
        default_weight: Weight applied to training calls that do not pass one.
        top: Keep only the best ``top`` categories in ``classify`` results.
    """

    normalize: bool = False
    default_weight: float = 1.0
    top: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.normalize, bool):
            raise ConfigError(f"normalize must be true or false, got {self.normalize!r}")
        if isinstance(self.default_weight, bool) or not isinstance(self.default_weight, (int, float)):
            raise ConfigError(f"default_weight must be a number, got {self.default_weight!r}")
        if not math.isfinite(self.default_weight) or self.default_weight < 0:
            raise ConfigError(
                f"default_weight must be finite and non-negative, got {self.default_weight}"
            )
        if self.top is not None and (isinstance(self.top, bool) or not isinstance(self.top, int) or self.top < 1):
            raise ConfigError(f"top must be a positive integer, got {self.top!r}")

    @property
    def mode(self) -> NormalizationMode:
        return NormalizationMode.from_flag(self.normalize)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "ClassifierConfig":
        data = data or {}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(config_path: str | Path) -> ClassifierConfig:
    """Load configuration from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file is not a YAML mapping of known keys.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            config_dict = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Cannot parse {config_path}: {exc}") from exc

    if config_dict is not None and not isinstance(config_dict, dict):
        raise ConfigError(f"{config_path} must contain a mapping, got {type(config_dict).__name__}")

    return ClassifierConfig.from_dict(config_dict)


def save_config(config: ClassifierConfig, config_path: str | Path) -> None:
    """Write configuration to a YAML file, creating parent directories."""
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    logger.info("Configuration saved to %s", path)
