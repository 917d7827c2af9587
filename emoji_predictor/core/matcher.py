# emoji_predictor/core/matcher.py
"""
EmojiMatcher - ranks emoji for a word or a sentence.

Word prediction runs four strategies in fixed priority order against the
keyword index, all feeding one CandidatePool (first claim wins):
  1. exact     keyword == word                         score 100
  2. prefix    keyword starts with word, longer         90 - 2 * extra chars
  3. fuzzy     edit distance <= 2 (length diff <= 2)    80 - 10 * distance
  4. semantic  keyword contains word (word len >= 3)    70
Fuzzy and semantic only run while the pool holds fewer than max_results
candidates. Prefix always runs.

Sentence prediction claims each word's top word-level predictions at a flat
90, then scans every unclaimed record and scores it by the mean contribution
of its matching keywords (substring hit = 80, cosine > 0.3 = cosine * 60).

All queries are stateless; the knowledge base is read-only, so one matcher
can serve any number of threads.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from emoji_predictor.context import normalize_query, split_words
from emoji_predictor.core.candidates import CandidatePool
from emoji_predictor.core.knowledge_base import KnowledgeBase, default_knowledge_base
from emoji_predictor.core.text_metrics import cosine_similarity, levenshtein

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 2
SEMANTIC_MIN_LENGTH = 3
MAX_EDIT_DISTANCE = 2

EXACT_SCORE = 100.0
PREFIX_BASE = 90.0
PREFIX_PENALTY = 2.0
FUZZY_BASE = 80.0
FUZZY_PENALTY = 10.0
SUBSTRING_SCORE = 70.0

PER_WORD_CAP = 3
SENTENCE_WORD_SCORE = 90.0
KEYWORD_IN_SENTENCE_SCORE = 80.0
COSINE_THRESHOLD = 0.3
COSINE_WEIGHT = 60.0

POPULAR_SYMBOLS = (
    "😀", "😂", "🥰", "😍", "🤩", "😎", "🥳", "😭", "😤", "🥺",
    "👍", "👏", "🙏", "💪", "✨", "🎉", "🔥", "❤️", "💯", "✅",
)


class EmojiMatcher:
    """Query front-end bound to one KnowledgeBase."""

    def __init__(self, kb: KnowledgeBase) -> None:
        self.kb = kb

    # -------------------------
    # word level
    # -------------------------
    def predict_for_word(self, word: str, max_results: int = 5) -> List[str]:
        """Up to max_results emoji for a (possibly partial) word, best first."""
        if not isinstance(word, str):
            return []
        q = normalize_query(word)
        if len(q) < MIN_WORD_LENGTH:
            return []

        pool = CandidatePool()
        self._exact(q, pool)
        self._prefix(q, pool)
        if len(pool) < max_results:
            self._fuzzy(q, pool)
        if len(pool) < max_results and len(q) >= SEMANTIC_MIN_LENGTH:
            self._substring(q, pool)

        logger.debug("word query %r: %d candidates", q, len(pool))
        return pool.top_symbols(max_results)

    def _exact(self, q: str, pool: CandidatePool) -> None:
        pool.claim_all(self.kb.symbols_for(q), EXACT_SCORE, "exact")

    def _prefix(self, q: str, pool: CandidatePool) -> None:
        for kw, symbols in self.kb.keywords():
            if kw != q and kw.startswith(q):
                score = PREFIX_BASE - PREFIX_PENALTY * (len(kw) - len(q))
                pool.claim_all(symbols, score, "prefix")

    def _fuzzy(self, q: str, pool: CandidatePool) -> None:
        for kw, symbols in self.kb.keywords():
            if abs(len(kw) - len(q)) > MAX_EDIT_DISTANCE:
                continue
            d = levenshtein(q, kw, MAX_EDIT_DISTANCE)
            if d <= MAX_EDIT_DISTANCE:
                pool.claim_all(symbols, FUZZY_BASE - FUZZY_PENALTY * d, "fuzzy")

    def _substring(self, q: str, pool: CandidatePool) -> None:
        for kw, symbols in self.kb.keywords():
            if kw != q and q in kw:
                pool.claim_all(symbols, SUBSTRING_SCORE, "semantic")

    # -------------------------
    # sentence level
    # -------------------------
    def predict_for_sentence(self, sentence: str, max_results: int = 10) -> List[str]:
        """Up to max_results emoji for a whole sentence, best first."""
        if not isinstance(sentence, str):
            return []
        text = normalize_query(sentence)
        if not text:
            return []

        pool = CandidatePool()

        # per-word predictions, in sentence order
        for w in split_words(text):
            pool.claim_all(self.predict_for_word(w, PER_WORD_CAP), SENTENCE_WORD_SCORE, "exact")

        # whole-record scan
        for rec in self.kb.all_records():
            if pool.is_claimed(rec.symbol):
                continue
            score = self._record_score(text, rec.keywords)
            if score is not None:
                pool.claim(rec.symbol, score, "semantic")

        logger.debug("sentence query %r: %d candidates", text, len(pool))
        return pool.top_symbols(max_results)

    @staticmethod
    def _record_score(text: str, keywords) -> Optional[float]:
        """Mean contribution of the keywords that match `text`; None if none do."""
        total = 0.0
        matched = 0
        for kw in keywords:
            kw = kw.lower()
            if kw in text:
                total += KEYWORD_IN_SENTENCE_SCORE
                matched += 1
                continue
            sim = cosine_similarity(text, kw)
            if sim > COSINE_THRESHOLD:
                total += sim * COSINE_WEIGHT
                matched += 1
        if not matched:
            return None
        return total / matched

    # -------------------------
    # accessors
    # -------------------------
    def by_category(self, category: str, limit: int = 10) -> List[str]:
        return self.kb.records_by_category(category, limit)

    @staticmethod
    def popular_symbols() -> List[str]:
        return list(POPULAR_SYMBOLS)


_default_matcher: Optional[EmojiMatcher] = None
_matcher_lock = threading.Lock()


def default_matcher() -> EmojiMatcher:
    """Matcher over the packaged corpus, created on first use."""
    global _default_matcher
    if _default_matcher is None:
        with _matcher_lock:
            if _default_matcher is None:
                _default_matcher = EmojiMatcher(default_knowledge_base())
    return _default_matcher


def predict_for_word(word: str, max_results: int = 5) -> List[str]:
    return default_matcher().predict_for_word(word, max_results)


def predict_for_sentence(sentence: str, max_results: int = 10) -> List[str]:
    return default_matcher().predict_for_sentence(sentence, max_results)


def by_category(category: str, limit: int = 10) -> List[str]:
    return default_matcher().by_category(category, limit)


def popular_symbols() -> List[str]:
    return list(POPULAR_SYMBOLS)
