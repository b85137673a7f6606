"""Loaded-table bookkeeping.

Keeps track of which lexicon and negation tables a source has materialized.
Purely diagnostic: nothing in the scoring path reads it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Set

logger = logging.getLogger(__name__)


@dataclass
class LoadRecord:
    """Table identifiers loaded (or found missing) by a lexicon source."""

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    loaded: Set[str] = field(default_factory=set)
    missing: Set[str] = field(default_factory=set)

    load_count: int = 0
    miss_count: int = 0

    _lock: Lock = field(default_factory=Lock)

    def record_loaded(self, table_id: str) -> None:
        with self._lock:
            self.load_count += 1
            if table_id not in self.loaded:
                logger.debug(f"Table materialized: {table_id}")
            self.loaded.add(table_id)
            self.missing.discard(table_id)

    def record_missing(self, table_id: str) -> None:
        with self._lock:
            self.miss_count += 1
            self.missing.add(table_id)

    def is_loaded(self, table_id: str) -> bool:
        with self._lock:
            return table_id in self.loaded

    def summary(self) -> Dict[str, object]:
        with self._lock:
            return {
                "created_at": self.created_at.isoformat(),
                "loaded": sorted(self.loaded),
                "missing": sorted(self.missing),
                "load_count": self.load_count,
                "miss_count": self.miss_count,
            }

    def format_summary(self) -> str:
        s = self.summary()
        lines = [
            "Loaded tables",
            f"  Loaded:  {len(s['loaded'])} ({s['load_count']} loads)",
            f"  Missing: {len(s['missing'])} ({s['miss_count']} misses)",
        ]
        for table_id in s["loaded"]:
            lines.append(f"    + {table_id}")
        for table_id in s["missing"]:
            lines.append(f"    - {table_id}")
        return "\n".join(lines)
