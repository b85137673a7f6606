"""Sentiment scoring: analyzer, results, normalization and batch helpers."""

from .normalize import normalize, DEFAULT_ALPHA
from .result import (
    WordScore,
    ScoredResult,
    UnsupportedResult,
    SentimentResult,
    classify_sentiment,
)
from .analyzer import SentimentAnalyzer
from .batch import score_utterances, score_file, summarize_scores, format_summary

__all__ = [
    "normalize",
    "DEFAULT_ALPHA",
    "WordScore",
    "ScoredResult",
    "UnsupportedResult",
    "SentimentResult",
    "classify_sentiment",
    "SentimentAnalyzer",
    "score_utterances",
    "score_file",
    "summarize_scores",
    "format_summary",
]
