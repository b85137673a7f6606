"""Lexicon types and the per-language default policy."""

from __future__ import annotations

from enum import Enum
from typing import Union


DEFAULT_LANGUAGE = "en"

# Languages whose best-covered lexicon is the Pattern one
PATTERN_LANGUAGES = {"it", "fr", "nl"}


class LexiconType(Enum):
    """Supported lexicon families."""
    AFINN = "afinn"
    SENTICON = "senticon"
    PATTERN = "pattern"

    @classmethod
    def parse(cls, value: Union[str, "LexiconType"]) -> "LexiconType":
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(
            f"Unknown lexicon type: {value}. Supported: {[m.value for m in cls]}"
        )


def default_lexicon_type(language: str) -> LexiconType:
    """Lexicon type used when the caller does not pick one."""
    if (language or "").lower() in PATTERN_LANGUAGES:
        return LexiconType.PATTERN
    return LexiconType.SENTICON
