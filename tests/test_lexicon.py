"""Unit tests for lexicon types, loading, negation tables and vocabulary building."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from lexisent.lexicon import (
    LexiconSource,
    LexiconType,
    LoadRecord,
    NegationTables,
    build_stemmed_vocabulary,
    default_lexicon_type,
    merge_vocabulary,
    resolve_data_dir,
)
from lexisent.lexicon.loader import BUNDLED_DATA_DIR, DATA_DIR_ENV


class MapStemmer:
    """Stemmer returning canned stems."""

    def __init__(self, stems):
        self.stems = stems

    def tokenize_and_stem(self, word):
        return self.stems.get(word, [word])


# ============================================================================
# Lexicon Type Tests
# ============================================================================

class TestLexiconType:
    """Tests for lexicon type parsing and defaults."""

    def test_parse_strings(self):
        assert LexiconType.parse("afinn") is LexiconType.AFINN
        assert LexiconType.parse("Senticon") is LexiconType.SENTICON
        assert LexiconType.parse(" PATTERN ") is LexiconType.PATTERN

    def test_parse_member(self):
        assert LexiconType.parse(LexiconType.AFINN) is LexiconType.AFINN

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            LexiconType.parse("vader")

    def test_default_type_policy(self):
        assert default_lexicon_type("it") is LexiconType.PATTERN
        assert default_lexicon_type("fr") is LexiconType.PATTERN
        assert default_lexicon_type("nl") is LexiconType.PATTERN
        assert default_lexicon_type("en") is LexiconType.SENTICON
        assert default_lexicon_type("es") is LexiconType.SENTICON
        assert default_lexicon_type("xx") is LexiconType.SENTICON


# ============================================================================
# Vocabulary Tests
# ============================================================================

class TestMergeVocabulary:
    """Tests for override merging."""

    def test_override_wins(self):
        merged = merge_vocabulary({"good": 3, "bad": -3}, {"good": 1})
        assert merged == {"good": 1, "bad": -3}

    def test_new_keys_added(self):
        merged = merge_vocabulary({"good": 3}, {"meh": -1})
        assert merged == {"good": 3, "meh": -1}

    def test_base_not_mutated(self):
        base = {"good": 3}
        merge_vocabulary(base, {"good": 1, "meh": 0})
        assert base == {"good": 3}

    def test_no_override(self):
        base = {"good": 3}
        merged = merge_vocabulary(base, None)
        assert merged == base
        assert merged is not base


class TestStemmedVocabulary:
    """Tests for stemmed vocabulary derivation."""

    def test_single_stems_kept(self):
        stemmer = MapStemmer({"loving": ["love"], "happy": ["happi"]})
        stemmed = build_stemmed_vocabulary({"loving": 3, "happy": 2}, stemmer)
        assert stemmed == {"love": 3, "happi": 2}

    def test_ambiguous_stems_dropped(self):
        stemmer = MapStemmer({"well-made": ["well", "made"], "": []})
        stemmed = build_stemmed_vocabulary({"well-made": 1, "": 2, "good": 3}, stemmer)
        assert stemmed == {"good": 3}

    def test_shared_stem_last_wins(self):
        stemmer = MapStemmer({"loved": ["love"], "loving": ["love"]})
        stemmed = build_stemmed_vocabulary({"loved": 2, "loving": 3}, stemmer)
        assert stemmed == {"love": 3}


# ============================================================================
# Negation Table Tests
# ============================================================================

class TestNegationTables:
    def test_empty(self):
        tables = NegationTables.empty()
        assert not tables.is_negator("not")
        assert not tables.is_terminator(",")

    def test_from_iterables_lowercases(self):
        tables = NegationTables.from_iterables(["NOT", "Never"], [",", "BUT"])
        assert tables.is_negator("not")
        assert tables.is_negator("never")
        assert tables.is_terminator("but")
        assert tables.is_terminator(",")


# ============================================================================
# Loader Tests
# ============================================================================

def _write(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")


class TestLexiconSource:
    """Tests for the file-backed lexicon source."""

    def test_load_vocabulary(self, tmp_path):
        _write(tmp_path / "en" / "afinn_en.json", {"Good": 3, "bad": -2.5})
        source = LexiconSource(tmp_path)

        vocabulary = source.load_vocabulary("en", "afinn")

        assert vocabulary == {"good": 3.0, "bad": -2.5}
        assert source.load_record.is_loaded("en/afinn_en.json")

    def test_missing_vocabulary_returns_none(self, tmp_path):
        source = LexiconSource(tmp_path)

        assert source.load_vocabulary("en", LexiconType.SENTICON) is None
        assert "en/senticon_en.json" in source.load_record.missing

    def test_invalid_json_returns_none(self, tmp_path):
        _write(tmp_path / "en" / "afinn_en.json", "{broken")
        source = LexiconSource(tmp_path)

        assert source.load_vocabulary("en", "afinn") is None

    def test_non_object_returns_none(self, tmp_path):
        _write(tmp_path / "en" / "afinn_en.json", ["good", "bad"])
        source = LexiconSource(tmp_path)

        assert source.load_vocabulary("en", "afinn") is None

    def test_non_numeric_weights_skipped(self, tmp_path):
        _write(tmp_path / "en" / "afinn_en.json", {"good": 3, "odd": "x", "flag": True})
        source = LexiconSource(tmp_path)

        assert source.load_vocabulary("en", "afinn") == {"good": 3.0}

    def test_non_finite_weights_skipped(self, tmp_path):
        """NaN and Infinity literals are valid JSON but never valid weights."""
        _write(
            tmp_path / "en" / "afinn_en.json",
            '{"good": NaN, "great": Infinity, "awful": -Infinity, "bad": -2}',
        )
        source = LexiconSource(tmp_path)

        assert source.load_vocabulary("en", "afinn") == {"bad": -2.0}

    def test_load_negations(self, tmp_path):
        _write(tmp_path / "en" / "negations_en.json", {"words": ["not", "never"]})
        _write(tmp_path / "en" / "negationPunctuations_en.json", {"punctuation": [",", "."]})
        source = LexiconSource(tmp_path)

        tables = source.load_negations("en")

        assert tables.negators == frozenset({"not", "never"})
        assert tables.punctuation == frozenset({",", "."})

    def test_missing_negations_are_empty(self, tmp_path):
        source = LexiconSource(tmp_path)

        assert source.load_negations("en") == NegationTables.empty()

    def test_negations_with_bad_shape_are_empty(self, tmp_path):
        _write(tmp_path / "en" / "negations_en.json", {"words": "not"})
        source = LexiconSource(tmp_path)

        assert source.load_negations("en").negators == frozenset()

    def test_available_languages(self, tmp_path):
        _write(tmp_path / "en" / "afinn_en.json", {})
        _write(tmp_path / "es" / "senticon_es.json", {})
        source = LexiconSource(tmp_path)

        assert source.available_languages() == ["en", "es"]

    def test_shared_load_record(self, tmp_path):
        _write(tmp_path / "en" / "afinn_en.json", {"good": 3})
        record = LoadRecord()
        LexiconSource(tmp_path, load_record=record).load_vocabulary("en", "afinn")
        LexiconSource(tmp_path, load_record=record).load_vocabulary("en", "afinn")

        assert record.load_count == 2
        assert record.loaded == {"en/afinn_en.json"}

    def test_bundled_tables(self):
        source = LexiconSource(BUNDLED_DATA_DIR)

        assert source.load_vocabulary("en", "afinn")["good"] == 3.0
        assert source.load_vocabulary("en", "senticon") is not None
        assert "not" in source.load_negations("en").negators
        assert {"en", "es", "fr", "it"} <= set(source.available_languages())


class TestResolveDataDir:
    def test_explicit_dir(self, tmp_path):
        assert resolve_data_dir(tmp_path) == tmp_path

    def test_env_dir(self, tmp_path):
        with patch.dict("os.environ", {DATA_DIR_ENV: str(tmp_path)}):
            assert resolve_data_dir() == tmp_path

    def test_bundled_default(self):
        with patch.dict("os.environ", {}, clear=True):
            assert resolve_data_dir() == BUNDLED_DATA_DIR


# ============================================================================
# Load Record Tests
# ============================================================================

class TestLoadRecord:
    def test_loaded_clears_missing(self):
        record = LoadRecord()
        record.record_missing("en/afinn_en.json")
        record.record_loaded("en/afinn_en.json")

        assert record.is_loaded("en/afinn_en.json")
        assert record.missing == set()
        assert record.miss_count == 1

    def test_summary(self):
        record = LoadRecord()
        record.record_loaded("en/afinn_en.json")
        record.record_missing("xx/senticon_xx.json")

        summary = record.summary()

        assert summary["loaded"] == ["en/afinn_en.json"]
        assert summary["missing"] == ["xx/senticon_xx.json"]
        assert "en/afinn_en.json" in record.format_summary()
