"""File-backed lexicon and negation source.

Layout under the data directory:
    <lang>/<type>_<lang>.json                  {"word": weight, ...}
    <lang>/negations_<lang>.json               {"words": [...]}
    <lang>/negationPunctuations_<lang>.json    {"punctuation": [...]}

A missing or malformed table is never an error: the vocabulary comes back
as None and negation tables come back empty.

The bundled tables under lexisent/data/languages are small samples (a few
dozen words per language) for demos and tests. Point LEXISENT_DATA_DIR (or
`data_dir` in config.yaml) at full AFINN / Senticon / Pattern tables in the
same layout for real text.
"""

from __future__ import annotations

import json
import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .load_record import LoadRecord
from .tables import NegationTables
from .types import LexiconType

logger = logging.getLogger(__name__)


DATA_DIR_ENV = "LEXISENT_DATA_DIR"
BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "data" / "languages"


def resolve_data_dir(data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Explicit dir, then LEXISENT_DATA_DIR, then the bundled tables."""
    if data_dir:
        return Path(data_dir)
    env_dir = os.getenv(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return BUNDLED_DATA_DIR


class LexiconSource:
    """Loads vocabularies and negation tables keyed by language and type."""

    def __init__(
        self,
        data_dir: Optional[Union[str, Path]] = None,
        load_record: Optional[LoadRecord] = None,
    ):
        """
        Args:
            data_dir: Root of the per-language table directories
            load_record: Shared diagnostics record (a fresh one if omitted)
        """
        self.data_dir = resolve_data_dir(data_dir)
        self.load_record = load_record if load_record is not None else LoadRecord()

    def vocabulary_path(self, language: str, lexicon_type: LexiconType) -> Path:
        return self.data_dir / language / f"{lexicon_type.value}_{language}.json"

    def negations_path(self, language: str) -> Path:
        return self.data_dir / language / f"negations_{language}.json"

    def negation_punctuations_path(self, language: str) -> Path:
        return self.data_dir / language / f"negationPunctuations_{language}.json"

    def _read_json(self, path: Path) -> Optional[Any]:
        table_id = f"{path.parent.name}/{path.name}"
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError:
            logger.debug(f"Table not found: {path}")
            self.load_record.record_missing(table_id)
            return None
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read table {path}: {e}")
            self.load_record.record_missing(table_id)
            return None

        self.load_record.record_loaded(table_id)
        return payload

    def load_vocabulary(
        self,
        language: str,
        lexicon_type: Union[str, LexiconType],
    ) -> Optional[Dict[str, float]]:
        """
        Load the word -> weight vocabulary for a language and lexicon type.

        Returns:
            Dict with lowercased keys, or None if the table is unavailable
        """
        lexicon_type = LexiconType.parse(lexicon_type)
        path = self.vocabulary_path(language, lexicon_type)
        payload = self._read_json(path)
        if payload is None:
            return None
        if not isinstance(payload, dict):
            logger.warning(f"Vocabulary {path} is not a JSON object, ignoring it")
            return None

        vocabulary: Dict[str, float] = {}
        for word, weight in payload.items():
            # bool is an int subclass but never a weight
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                logger.warning(f"Skipping non-numeric weight for '{word}' in {path.name}")
                continue
            if not math.isfinite(weight):
                logger.warning(f"Skipping non-finite weight for '{word}' in {path.name}")
                continue
            vocabulary[str(word).lower()] = float(weight)

        logger.info(f"Loaded {len(vocabulary)} entries from {path.name}")
        return vocabulary

    def _load_word_list(self, path: Path, key: str) -> List[str]:
        payload = self._read_json(path)
        if not isinstance(payload, dict):
            return []
        words = payload.get(key) or []
        if not isinstance(words, list):
            logger.warning(f"'{key}' in {path.name} is not a list, ignoring it")
            return []
        return [str(w) for w in words]

    def load_negations(self, language: str) -> NegationTables:
        """Negators and negation-ending punctuation for a language."""
        negators = self._load_word_list(self.negations_path(language), "words")
        punctuation = self._load_word_list(
            self.negation_punctuations_path(language), "punctuation"
        )
        return NegationTables.from_iterables(negators, punctuation)

    def available_languages(self) -> List[str]:
        if not self.data_dir.is_dir():
            return []
        return sorted(p.name for p in self.data_dir.iterdir() if p.is_dir())
