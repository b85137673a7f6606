"""
Sentiment Analyzer
Scores utterances against a polarity vocabulary with negation handling and
a stemmed fallback for inflected words.
"""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Sequence, Union

from ..lexicon import (
    DEFAULT_LANGUAGE,
    LexiconSource,
    LexiconType,
    NegationTables,
    build_stemmed_vocabulary,
    default_lexicon_type,
    merge_vocabulary,
)
from ..nlp import Stemmer, Tokenizer, get_stemmer, get_tokenizer
from .normalize import DEFAULT_ALPHA, normalize
from .result import ScoredResult, SentimentResult, UnsupportedResult, WordScore

if TYPE_CHECKING:
    from ..config import SentimentConfig

logger = logging.getLogger(__name__)


def _coerce_override(override: Optional[Mapping[str, float]]) -> Dict[str, float]:
    """Lowercase override keys and check every weight is a finite number."""
    coerced: Dict[str, float] = {}
    for word, weight in (override or {}).items():
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ValueError(f"Override weight for '{word}' must be a number, got {weight!r}")
        if not math.isfinite(weight):
            raise ValueError(f"Override weight for '{word}' must be finite, got {weight!r}")
        coerced[str(word).lower()] = float(weight)
    return coerced


class SentimentAnalyzer:
    """
    Lexicon-based sentiment scorer for one language and lexicon type.

    All tables are built in the constructor and never change afterwards, so
    one instance can serve concurrent get_sentiment() calls.
    """

    def __init__(
        self,
        language: Optional[str] = None,
        lexicon_type: Optional[Union[str, LexiconType]] = None,
        vocabulary_override: Optional[Mapping[str, float]] = None,
        use_stemmer: bool = True,
        tokenizer: Optional[Tokenizer] = None,
        stemmer: Optional[Stemmer] = None,
        source: Optional[LexiconSource] = None,
        alpha: float = DEFAULT_ALPHA,
    ):
        """
        Initialize the analyzer and load its tables.

        Args:
            language: ISO language code (default: en)
            lexicon_type: afinn | senticon | pattern (default: per language)
            vocabulary_override: Entries merged over the loaded vocabulary
            use_stemmer: Enable the stemmed fallback lookup
            tokenizer: Tokenizer for string utterances (default: per language)
            stemmer: Stemmer for the fallback (default: per language)
            source: Where tables are loaded from (default: bundled tables)
            alpha: Saturation constant for the normalized range
        """
        if not alpha > 0:
            raise ValueError(f"alpha must be positive, got {alpha}")

        self.language = (language or DEFAULT_LANGUAGE).lower()
        if lexicon_type is None:
            self.lexicon_type = default_lexicon_type(self.language)
        else:
            self.lexicon_type = LexiconType.parse(lexicon_type)
        self.alpha = alpha
        self.use_stemmer = use_stemmer

        self.tokenizer = tokenizer or get_tokenizer(self.language)
        self.stemmer: Optional[Stemmer] = None
        if use_stemmer:
            self.stemmer = stemmer or get_stemmer(self.language)

        self.source = source or LexiconSource()
        self._load_tables(_coerce_override(vocabulary_override))

    @classmethod
    def from_config(cls, config: "SentimentConfig", **overrides) -> "SentimentAnalyzer":
        """Build an analyzer from a SentimentConfig; keyword overrides win."""
        kwargs = {
            "language": config.language,
            "lexicon_type": config.lexicon_type,
            "vocabulary_override": config.vocabulary_override or None,
            "use_stemmer": config.use_stemmer,
            "alpha": config.alpha,
        }
        if "source" not in overrides:
            kwargs["source"] = LexiconSource(data_dir=config.data_dir)
        kwargs.update(overrides)
        return cls(**kwargs)

    def _load_tables(self, vocabulary_override: Optional[Mapping[str, float]]) -> None:
        vocabulary = self.source.load_vocabulary(self.language, self.lexicon_type)

        self._vocabulary: Optional[Mapping[str, float]] = None
        self._stemmed_vocabulary: Mapping[str, float] = MappingProxyType({})

        if vocabulary is None:
            logger.warning(
                f"No {self.lexicon_type.value} vocabulary for '{self.language}', "
                f"results will be unsupported"
            )
        else:
            # Overrides go in before stemming so stems see them
            if vocabulary_override:
                vocabulary = merge_vocabulary(vocabulary, vocabulary_override)
            self._vocabulary = MappingProxyType(vocabulary)
            if self.stemmer is not None:
                self._stemmed_vocabulary = MappingProxyType(
                    build_stemmed_vocabulary(vocabulary, self.stemmer)
                )

        self.negations: NegationTables = self.source.load_negations(self.language)

    @property
    def is_supported(self) -> bool:
        return self._vocabulary is not None

    @property
    def vocabulary(self) -> Optional[Mapping[str, float]]:
        return self._vocabulary

    @property
    def stemmed_vocabulary(self) -> Mapping[str, float]:
        return self._stemmed_vocabulary

    def _stem_single(self, token: str) -> Optional[str]:
        stems = self.stemmer.tokenize_and_stem(token)
        if len(stems) == 1:
            return stems[0]
        return None

    def get_sentiment(self, utterance: Union[str, Sequence[str]]) -> SentimentResult:
        """
        Score an utterance.

        Args:
            utterance: Raw text (tokenized here) or an already-tokenized sequence

        Returns:
            ScoredResult, or UnsupportedResult when no vocabulary is loaded
        """
        if isinstance(utterance, str):
            words: List[str] = self.tokenizer.tokenize(utterance)
        else:
            words = list(utterance)
        return self.score_utterance(words)

    def score_utterance(self, tokens: Sequence[str]) -> SentimentResult:
        """Score an already-tokenized utterance."""
        num_words = len(tokens)
        if self._vocabulary is None:
            return UnsupportedResult(
                num_words=num_words,
                type=self.lexicon_type.value,
                language=self.language,
            )

        score = 0.0
        negator = 1
        num_hits = 0
        word_scores: List[WordScore] = []

        for token in tokens:
            lower_cased = token.lower()

            if self.negations.is_negator(lower_cased):
                negator = -1
                num_hits += 1
            elif self.negations.is_terminator(lower_cased):
                negator = 1
            elif lower_cased in self._vocabulary:
                contribution = negator * self._vocabulary[lower_cased]
                score += contribution
                num_hits += 1
                word_scores.append(WordScore(word=lower_cased, score=contribution))
            elif self.stemmer is not None:
                stem = self._stem_single(lower_cased)
                if stem is not None and stem in self._stemmed_vocabulary:
                    contribution = negator * self._stemmed_vocabulary[stem]
                    score += contribution
                    num_hits += 1
                    word_scores.append(WordScore(word=lower_cased, score=contribution))

        return ScoredResult(
            score=score,
            num_words=num_words,
            num_hits=num_hits,
            comparative=score / num_words if num_words else 0.0,
            range=normalize(score, self.alpha),
            type=self.lexicon_type.value,
            language=self.language,
            word_scores=tuple(word_scores),
        )
