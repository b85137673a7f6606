"""Lexicon tables: types, loading, negations and vocabulary construction."""

from .types import LexiconType, DEFAULT_LANGUAGE, default_lexicon_type
from .tables import NegationTables
from .load_record import LoadRecord
from .loader import LexiconSource, resolve_data_dir
from .vocabulary import merge_vocabulary, build_stemmed_vocabulary

__all__ = [
    "LexiconType",
    "DEFAULT_LANGUAGE",
    "default_lexicon_type",
    "NegationTables",
    "LoadRecord",
    "LexiconSource",
    "resolve_data_dir",
    "merge_vocabulary",
    "build_stemmed_vocabulary",
]
