"""Negation tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable


@dataclass(frozen=True)
class NegationTables:
    """Negator words and the punctuation tokens that end a negation."""
    negators: FrozenSet[str] = field(default_factory=frozenset)
    punctuation: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def empty(cls) -> "NegationTables":
        return cls()

    @classmethod
    def from_iterables(
        cls,
        negators: Iterable[str] = (),
        punctuation: Iterable[str] = (),
    ) -> "NegationTables":
        return cls(
            negators=frozenset(str(w).lower() for w in negators),
            punctuation=frozenset(str(p).lower() for p in punctuation),
        )

    def is_negator(self, token: str) -> bool:
        return token in self.negators

    def is_terminator(self, token: str) -> bool:
        return token in self.punctuation
