"""Tokenizer capability.

Splits text into word units and single punctuation characters so that
negation-ending punctuation reaches the scorer as its own token.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from nltk.tokenize import RegexpTokenizer


# Words may carry inner apostrophes or hyphens ("don't", "well-known")
WORD_PATTERN = r"\w+(?:['\-]\w+)*|[^\w\s]"


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> List[str]:
        ...


class RegexTokenizer:
    """Deterministic word/punctuation tokenizer backed by nltk."""

    def __init__(self, pattern: str = WORD_PATTERN):
        self.pattern = pattern
        self._tokenizer = RegexpTokenizer(pattern)

    def tokenize(self, text: Optional[str]) -> List[str]:
        if not text:
            return []
        return self._tokenizer.tokenize(text)


def get_tokenizer(language: str) -> Tokenizer:
    """Tokenizer for a language. Every supported language uses the same rules."""
    return RegexTokenizer()
