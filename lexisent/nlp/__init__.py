"""Tokenizer and stemmer capabilities."""

from .tokenizer import Tokenizer, RegexTokenizer, get_tokenizer
from .stemmer import Stemmer, SnowballStemmer, get_stemmer

__all__ = [
    "Tokenizer",
    "RegexTokenizer",
    "get_tokenizer",
    "Stemmer",
    "SnowballStemmer",
    "get_stemmer",
]
