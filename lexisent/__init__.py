"""
lexisent
Lexicon-based sentiment scoring with negation handling and stemmed lookups.
"""

from .lexicon import LexiconType, LexiconSource, LoadRecord, NegationTables
from .sentiment import (
    SentimentAnalyzer,
    ScoredResult,
    UnsupportedResult,
    WordScore,
    normalize,
)
from .config import SentimentConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "LexiconType",
    "LexiconSource",
    "LoadRecord",
    "NegationTables",
    "SentimentAnalyzer",
    "ScoredResult",
    "UnsupportedResult",
    "WordScore",
    "normalize",
    "SentimentConfig",
    "load_config",
]
