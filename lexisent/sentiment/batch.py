"""Batch scoring.

Scores many utterances with one analyzer and collects the results into a
DataFrame, plus a small summary for reports.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Sequence, Union

import pandas as pd

from .analyzer import SentimentAnalyzer

logger = logging.getLogger(__name__)


BATCH_COLUMNS = [
    "utterance",
    "score",
    "comparative",
    "range",
    "num_words",
    "num_hits",
    "label",
]


def score_utterances(
    analyzer: SentimentAnalyzer,
    utterances: Iterable[Union[str, Sequence[str]]],
) -> pd.DataFrame:
    """
    Score every utterance and return one row per utterance.

    Token sequences are joined with spaces in the `utterance` column.
    `range` is NaN for unsupported results.
    """
    rows = []
    for utterance in utterances:
        result = analyzer.get_sentiment(utterance)
        text = utterance if isinstance(utterance, str) else " ".join(utterance)
        rows.append({
            "utterance": text,
            "score": result.score,
            "comparative": result.comparative,
            "range": result.range if result.is_supported else float("nan"),
            "num_words": result.num_words,
            "num_hits": result.num_hits,
            "label": result.label,
        })

    return pd.DataFrame(rows, columns=BATCH_COLUMNS)


def score_file(analyzer: SentimentAnalyzer, path: Union[str, Path]) -> pd.DataFrame:
    """Score a text file holding one utterance per line. Blank lines are skipped."""
    with open(path, "r", encoding="utf-8") as f:
        lines = [line.strip() for line in f]
    utterances = [line for line in lines if line]
    logger.info(f"Scoring {len(utterances)} utterances from {path}")
    return score_utterances(analyzer, utterances)


def summarize_scores(df: pd.DataFrame) -> Dict[str, Any]:
    """Aggregate a batch frame into counts and means."""
    if df.empty:
        return {
            "count": 0,
            "mean_score": 0.0,
            "mean_range": 0.0,
            "hit_rate": 0.0,
            "labels": {},
        }

    total_words = int(df["num_words"].sum())
    ranges = df["range"].dropna()
    return {
        "count": int(len(df)),
        "mean_score": float(df["score"].mean()),
        "mean_range": float(ranges.mean()) if not ranges.empty else 0.0,
        "hit_rate": float(df["num_hits"].sum() / total_words) if total_words else 0.0,
        "labels": {str(k): int(v) for k, v in df["label"].value_counts().items()},
    }


def format_summary(summary: Dict[str, Any]) -> str:
    lines = [
        f"Utterances: {summary['count']}",
        f"Mean score: {summary['mean_score']:.3f}",
        f"Mean range: {summary['mean_range']:.3f}",
        f"Hit rate:   {summary['hit_rate']:.1%}",
    ]
    for label, count in sorted(summary["labels"].items()):
        lines.append(f"  {label:<12} {count}")
    return "\n".join(lines)
