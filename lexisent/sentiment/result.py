"""Sentiment result variants.

A scoring call returns either a ScoredResult (a vocabulary was available) or
an UnsupportedResult (no vocabulary for the language/type pair).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Tuple, Union


SentimentLabel = Literal["POSITIVE", "NEGATIVE", "NEUTRAL", "UNSUPPORTED"]


def classify_sentiment(
    value: float,
    pos_threshold: float = 0.05,
    neg_threshold: float = -0.05,
) -> SentimentLabel:
    """
    Label a normalized score.

    Args:
        value: Score in [-1, 1]
        pos_threshold: Lowest value labelled POSITIVE
        neg_threshold: Highest value labelled NEGATIVE

    Returns:
        POSITIVE, NEGATIVE or NEUTRAL
    """
    if value >= pos_threshold:
        return "POSITIVE"
    if value <= neg_threshold:
        return "NEGATIVE"
    return "NEUTRAL"


@dataclass(frozen=True)
class WordScore:
    """Contribution of one scored token."""
    word: str
    score: float

    def to_dict(self) -> dict:
        return {"word": self.word, "score": self.score}


@dataclass(frozen=True)
class ScoredResult:
    """Result of scoring an utterance against a loaded vocabulary."""
    score: float
    num_words: int
    num_hits: int
    comparative: float
    range: float
    type: str
    language: str
    word_scores: Tuple[WordScore, ...] = field(default_factory=tuple)

    @property
    def is_supported(self) -> bool:
        return True

    @property
    def label(self) -> SentimentLabel:
        return classify_sentiment(self.range)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "numWords": self.num_words,
            "numHits": self.num_hits,
            "range": self.range,
            "comparative": self.comparative,
            "type": self.type,
            "language": self.language,
            "wordScores": [ws.to_dict() for ws in self.word_scores],
        }


@dataclass(frozen=True)
class UnsupportedResult:
    """Result when no vocabulary exists for the requested language/type."""
    num_words: int
    type: str
    language: str
    score: float = 0.0
    num_hits: int = 0
    comparative: float = 0.0

    @property
    def is_supported(self) -> bool:
        return False

    @property
    def label(self) -> SentimentLabel:
        return "UNSUPPORTED"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "numWords": self.num_words,
            "numHits": self.num_hits,
            "comparative": self.comparative,
            "type": self.type,
            "language": self.language,
        }


SentimentResult = Union[ScoredResult, UnsupportedResult]
