"""Vocabulary construction.

Two steps happen once per analyzer, in this order:
- merge the caller's override entries into the loaded vocabulary
- derive the stemmed vocabulary from the merged one
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from ..nlp.stemmer import Stemmer

logger = logging.getLogger(__name__)


def merge_vocabulary(
    base: Mapping[str, float],
    override: Optional[Mapping[str, float]] = None,
) -> Dict[str, float]:
    """
    Overlay override entries on a base vocabulary.

    Args:
        base: Loaded word -> weight mapping
        override: Entries that replace or extend the base

    Returns:
        New dict; the base mapping is left untouched
    """
    merged = dict(base)
    if not override:
        return merged

    replaced = 0
    for word, weight in override.items():
        if word in merged:
            replaced += 1
        merged[word] = weight

    logger.debug(
        f"Merged {len(override)} override entries ({replaced} replaced, "
        f"{len(override) - replaced} added)"
    )
    return merged


def build_stemmed_vocabulary(
    vocabulary: Mapping[str, float],
    stemmer: Stemmer,
) -> Dict[str, float]:
    """
    Map the stem of every vocabulary word to its weight.

    Words that stem into zero or several tokens are skipped. When two words
    share a stem, the one iterated last keeps the slot.
    """
    stemmed: Dict[str, float] = {}
    skipped = 0
    for word, weight in vocabulary.items():
        stems = stemmer.tokenize_and_stem(word)
        if len(stems) == 1:
            stemmed[stems[0]] = weight
        else:
            skipped += 1

    logger.debug(f"Stemmed vocabulary: {len(stemmed)} stems, {skipped} words skipped")
    return stemmed
