"""
emoji_predictor.core

The prediction engine:
 - static emoji corpus and keyword index (KnowledgeBase)
 - string similarity measures (levenshtein, cosine_similarity)
 - per-query candidate pool with first-claim-wins dedup (CandidatePool)
 - word and sentence matching (EmojiMatcher)
"""

from .knowledge_base import KnowledgeBase, SymbolRecord, default_knowledge_base
from .text_metrics import levenshtein, cosine_similarity
from .candidates import CandidatePool, MatchCandidate
from .matcher import EmojiMatcher, default_matcher

__all__ = [
    "KnowledgeBase",
    "SymbolRecord",
    "default_knowledge_base",
    "levenshtein",
    "cosine_similarity",
    "CandidatePool",
    "MatchCandidate",
    "EmojiMatcher",
    "default_matcher",
]
