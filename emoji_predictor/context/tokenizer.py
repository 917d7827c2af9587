# emoji_predictor/context/tokenizer.py
# whitespace tokenizer plus the "word under the cursor" helper used by the shell

import re
from typing import List, Optional

_ws_re = re.compile(r"\s+")


def split_words(s: str) -> List[str]:
    """Split on runs of whitespace, dropping empty pieces."""
    if not s:
        return []
    return s.split()


def current_word(text: str, cursor: Optional[int] = None) -> str:
    """
    Word being typed: the last whitespace-separated piece of the text before
    the cursor (end of text by default). Returns "" right after a space.
    """
    if not text:
        return ""
    if cursor is None or cursor > len(text):
        cursor = len(text)
    before = text[:max(0, cursor)]
    return _ws_re.split(before)[-1]
