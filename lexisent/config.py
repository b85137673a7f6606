"""Analyzer configuration.

Values come from the `sentiment:` section of a YAML file, then environment
variables (loaded from .env by the CLI) override them.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .lexicon.types import DEFAULT_LANGUAGE, LexiconType
from .sentiment.normalize import DEFAULT_ALPHA

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config.yaml"

ENV_OVERRIDES = {
    "LEXISENT_LANGUAGE": "language",
    "LEXISENT_TYPE": "lexicon_type",
    "LEXISENT_DATA_DIR": "data_dir",
    "LEXISENT_USE_STEMMER": "use_stemmer",
    "LEXISENT_LOG_LEVEL": "log_level",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class SentimentConfig:
    language: str = DEFAULT_LANGUAGE
    lexicon_type: Optional[LexiconType] = None  # None: per-language default
    use_stemmer: bool = True
    alpha: float = DEFAULT_ALPHA
    data_dir: Optional[str] = None
    vocabulary_override: Dict[str, float] = field(default_factory=dict)
    log_level: str = "INFO"


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value}")


def _parse_override(value: Any) -> Dict[str, float]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError("vocabulary_override must be a mapping of word -> weight")
    override = {}
    for word, weight in value.items():
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ValueError(f"Override weight for '{word}' must be a number, got {weight!r}")
        if not math.isfinite(weight):
            raise ValueError(f"Override weight for '{word}' must be finite, got {weight!r}")
        override[str(word).lower()] = float(weight)
    return override


def config_from_dict(raw: Dict[str, Any]) -> SentimentConfig:
    """Build a config from a plain mapping, validating every field."""
    config = SentimentConfig()
    values: Dict[str, Any] = {}

    if raw.get("language"):
        values["language"] = str(raw["language"]).strip().lower()
    if raw.get("lexicon_type"):
        values["lexicon_type"] = LexiconType.parse(raw["lexicon_type"])
    if raw.get("use_stemmer") is not None:
        values["use_stemmer"] = _parse_bool(raw["use_stemmer"], "use_stemmer")
    if raw.get("alpha") is not None:
        alpha = float(raw["alpha"])
        if not alpha > 0:
            raise ValueError(f"alpha must be positive, got {alpha}")
        values["alpha"] = alpha
    if raw.get("data_dir"):
        values["data_dir"] = str(raw["data_dir"])
    if "vocabulary_override" in raw:
        values["vocabulary_override"] = _parse_override(raw["vocabulary_override"])
    if raw.get("log_level"):
        level = str(raw["log_level"]).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {raw['log_level']}")
        values["log_level"] = level

    return replace(config, **values)


def load_config(path: Optional[str] = None) -> SentimentConfig:
    """
    Load analyzer configuration.

    Args:
        path: YAML file. If None, config.yaml is used when present and
            defaults otherwise.

    Returns:
        SentimentConfig with environment overrides applied
    """
    raw: Dict[str, Any] = {}
    config_path = Path(path or DEFAULT_CONFIG_PATH)

    if config_path.exists():
        with open(config_path, "r") as f:
            document = yaml.safe_load(f) or {}
        if not isinstance(document, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")
        raw = dict(document.get("sentiment") or {})
        logger.debug(f"Loaded config from {config_path}")
    elif path is not None:
        raise FileNotFoundError(f"Config file not found: {path}")

    for env_name, key in ENV_OVERRIDES.items():
        env_value = os.getenv(env_name)
        if env_value:
            raw[key] = env_value

    return config_from_dict(raw)
