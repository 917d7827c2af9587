# emoji_predictor/context/__init__.py
# text helpers shared by the matcher and the typing shell

from .normalizer import normalize_query  # lowercase + trim
from .tokenizer import split_words, current_word  # whitespace tokens, word under cursor

__all__ = [
    "normalize_query",
    "split_words",
    "current_word",
]
