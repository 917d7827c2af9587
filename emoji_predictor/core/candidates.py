# candidates.py
# Per-query candidate pool. Strategies claim symbols in priority order; the
# first claim on a symbol wins and later claims are ignored. Ranking is a
# stable descending sort on score so equal scores keep claim order.

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Literal, Set

MatchKind = Literal["exact", "prefix", "fuzzy", "semantic"]


@dataclass(frozen=True)
class MatchCandidate:
    symbol: str
    score: float
    kind: MatchKind


class CandidatePool:
    """Deduplicating candidate collector for a single query (never shared)."""

    __slots__ = ("_claimed", "_candidates")

    def __init__(self) -> None:
        self._claimed: Set[str] = set()
        self._candidates: List[MatchCandidate] = []

    def claim(self, symbol: str, score: float, kind: MatchKind) -> bool:
        """Add `symbol` unless an earlier strategy already holds it."""
        if symbol in self._claimed:
            return False
        self._claimed.add(symbol)
        self._candidates.append(MatchCandidate(symbol, float(score), kind))
        return True

    def claim_all(self, symbols: Iterable[str], score: float, kind: MatchKind) -> None:
        for s in symbols:
            self.claim(s, score, kind)

    def is_claimed(self, symbol: str) -> bool:
        return symbol in self._claimed

    def ranked(self) -> List[MatchCandidate]:
        # sorted() is stable: ties stay in claim order
        return sorted(self._candidates, key=lambda c: -c.score)

    def top_symbols(self, limit: int) -> List[str]:
        if limit <= 0:
            return []
        return [c.symbol for c in self.ranked()[:limit]]

    def __len__(self) -> int:
        return len(self._candidates)
