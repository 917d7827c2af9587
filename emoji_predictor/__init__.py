"""
emoji_predictor

Ranks emoji for a partial word or a full sentence against a static keyword
corpus. The four query functions below use the packaged corpus; build an
EmojiMatcher around your own KnowledgeBase to query other data.
"""

from .core.knowledge_base import KnowledgeBase, SymbolRecord
from .core.matcher import (
    EmojiMatcher,
    by_category,
    popular_symbols,
    predict_for_sentence,
    predict_for_word,
)
from .errors import ConfigError, EmojiPredictorError, KnowledgeBaseError

__all__ = [
    "predict_for_word",
    "predict_for_sentence",
    "by_category",
    "popular_symbols",
    "EmojiMatcher",
    "KnowledgeBase",
    "SymbolRecord",
    "EmojiPredictorError",
    "KnowledgeBaseError",
    "ConfigError",
]

__version__ = "0.1.0"
