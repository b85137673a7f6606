"""Stemmer capability.

The analyzer only needs `tokenize_and_stem(word) -> list of stems`; it uses
the result when exactly one stem comes back.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from nltk.stem.snowball import SnowballStemmer as _NltkSnowballStemmer

from .tokenizer import Tokenizer, get_tokenizer

logger = logging.getLogger(__name__)


# ISO 639-1 code -> nltk Snowball language name
SNOWBALL_LANGUAGES = {
    "ar": "arabic",
    "da": "danish",
    "de": "german",
    "en": "english",
    "es": "spanish",
    "fi": "finnish",
    "fr": "french",
    "hu": "hungarian",
    "it": "italian",
    "nl": "dutch",
    "no": "norwegian",
    "pt": "portuguese",
    "ro": "romanian",
    "ru": "russian",
    "sv": "swedish",
}


class Stemmer(Protocol):
    def tokenize_and_stem(self, word: str) -> List[str]:
        ...


class SnowballStemmer:
    """Tokenizes its input and stems every word token."""

    def __init__(self, language: str, tokenizer: Optional[Tokenizer] = None):
        if language not in SNOWBALL_LANGUAGES:
            raise ValueError(
                f"No Snowball stemmer for language: {language}. "
                f"Supported: {sorted(SNOWBALL_LANGUAGES)}"
            )
        self.language = language
        self.tokenizer = tokenizer or get_tokenizer(language)
        self._stemmer = _NltkSnowballStemmer(SNOWBALL_LANGUAGES[language])

    def stem(self, word: str) -> str:
        return self._stemmer.stem(word.lower())

    def tokenize_and_stem(self, word: str) -> List[str]:
        stems = []
        for token in self.tokenizer.tokenize(word):
            # Punctuation-only tokens have no stem
            if not any(ch.isalnum() for ch in token):
                continue
            stems.append(self.stem(token))
        return stems


def get_stemmer(language: str) -> Optional[Stemmer]:
    """Snowball stemmer for a language, or None if there is none."""
    if language not in SNOWBALL_LANGUAGES:
        logger.info(f"No stemmer available for '{language}', stemmed lookups disabled")
        return None
    return SnowballStemmer(language)
