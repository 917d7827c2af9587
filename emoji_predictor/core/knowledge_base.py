# knowledge_base.py
# Static emoji corpus plus a keyword -> symbols index.
# Records are loaded once (from the packaged JSON file or from literal data)
# and never mutated afterwards, so any number of readers can share one
# instance without locking.

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

from emoji_predictor.errors import KnowledgeBaseError

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")
DEFAULT_DB_PATH = os.path.join(DATA_DIR, "emoji_db.json")

Symbol = str
Keyword = str


@dataclass(frozen=True)
class SymbolRecord:
    """One emoji with the keywords that describe it and its category tag."""

    symbol: Symbol
    keywords: Tuple[Keyword, ...]
    category: str


def _record_from_mapping(raw: Any, position: int) -> SymbolRecord:
    """Validate one raw record (dict from JSON or literal data)."""
    if isinstance(raw, SymbolRecord):
        raw = {"symbol": raw.symbol, "keywords": list(raw.keywords), "category": raw.category}
    if not isinstance(raw, dict):
        raise KnowledgeBaseError(f"record #{position} is not an object: {raw!r}")

    symbol = raw.get("symbol")
    keywords = raw.get("keywords")
    category = raw.get("category")

    if not isinstance(symbol, str) or not symbol.strip():
        raise KnowledgeBaseError(f"record #{position} has no symbol")
    if not isinstance(category, str) or not category.strip():
        raise KnowledgeBaseError(f"record #{position} ({symbol}) has no category")
    if isinstance(keywords, str) or not isinstance(keywords, (list, tuple)) or not keywords:
        raise KnowledgeBaseError(f"record #{position} ({symbol}) needs a non-empty keyword list")

    cleaned: List[str] = []
    for kw in keywords:
        if not isinstance(kw, str) or not kw.strip():
            raise KnowledgeBaseError(f"record #{position} ({symbol}) has a blank or non-string keyword")
        cleaned.append(kw.strip())

    return SymbolRecord(symbol=symbol.strip(), keywords=tuple(cleaned), category=category.strip())


class KnowledgeBase:
    """
    Read-only emoji corpus.
     - records keep their declaration order (category listings rely on it)
     - the keyword index is derived once in __init__; keywords are lowercased,
       symbols inside an entry are deduplicated and keep first-seen order
    """

    def __init__(self, records: Iterable[SymbolRecord]) -> None:
        self._records: Tuple[SymbolRecord, ...] = tuple(records)
        self._index: Mapping[Keyword, Tuple[Symbol, ...]] = self._build_index(self._records)
        logger.debug(
            "knowledge base built: %d records, %d keywords",
            len(self._records),
            len(self._index),
        )

    # construction --------------------------------------------------------------
    @staticmethod
    def _build_index(records: Tuple[SymbolRecord, ...]) -> Mapping[Keyword, Tuple[Symbol, ...]]:
        # dict-of-dicts keeps insertion order and dedups symbols per keyword
        building: Dict[Keyword, Dict[Symbol, None]] = {}
        for rec in records:
            for kw in rec.keywords:
                building.setdefault(kw.lower(), {})[rec.symbol] = None
        return MappingProxyType({kw: tuple(syms) for kw, syms in building.items()})

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "KnowledgeBase":
        """Build from SymbolRecord objects or plain dicts, validating each one."""
        if records is None:
            raise KnowledgeBaseError("no records given")
        return cls(_record_from_mapping(raw, i) for i, raw in enumerate(records))

    @classmethod
    def from_json(cls, path: str) -> "KnowledgeBase":
        """
        Load a corpus file of the form {"version": 1, "records": [...]}.
        A bare list of records is accepted too.
        """
        try:
            with open(path, "r", encoding="utf-8") as fh:
                payload = json.load(fh)
        except OSError as e:
            raise KnowledgeBaseError(f"cannot read corpus file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise KnowledgeBaseError(f"corpus file {path} is not valid JSON: {e}") from e

        records = payload.get("records") if isinstance(payload, dict) else payload
        if not isinstance(records, list):
            raise KnowledgeBaseError(f"corpus file {path} has no record list")
        return cls.from_records(records)

    # lookups -------------------------------------------------------------------
    def lookup_exact(self, keyword: str) -> FrozenSet[Symbol]:
        """Symbols declaring `keyword` (case-insensitive); empty set when absent."""
        return frozenset(self.symbols_for(keyword))

    def symbols_for(self, keyword: str) -> Tuple[Symbol, ...]:
        """Ordered variant of lookup_exact, used where tie order matters."""
        if not keyword:
            return ()
        return self._index.get(keyword.lower(), ())

    def keywords(self) -> Iterator[Tuple[Keyword, Tuple[Symbol, ...]]]:
        """(keyword, symbols) pairs in index order."""
        return iter(self._index.items())

    def records_by_category(self, category: str, limit: int) -> List[Symbol]:
        """Symbols whose record category equals `category` exactly, in corpus order."""
        if limit is None or limit <= 0:
            return []
        return [r.symbol for r in self._records if r.category == category][:limit]

    def all_records(self) -> Tuple[SymbolRecord, ...]:
        return self._records

    def categories(self) -> List[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(r.category for r in self._records))

    @property
    def index(self) -> Mapping[Keyword, Tuple[Symbol, ...]]:
        return self._index

    # convenience ---------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and keyword.lower() in self._index


_default_kb: Optional[KnowledgeBase] = None
_default_lock = threading.Lock()


def default_knowledge_base() -> KnowledgeBase:
    """Packaged corpus, loaded once on first use (thread-safe)."""
    global _default_kb
    if _default_kb is None:
        with _default_lock:
            if _default_kb is None:
                _default_kb = KnowledgeBase.from_json(DEFAULT_DB_PATH)
    return _default_kb
