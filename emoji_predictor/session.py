# session.py
# Typing-session state for an interactive front-end. Mirrors what a UI does
# around the engine: word suggestions while typing, sentence suggestions once
# the text has settled, and picked emoji appended to the text. Deciding when
# typing has paused belongs to the caller, which then calls settle().

from __future__ import annotations

from typing import List, Optional

from emoji_predictor.context import current_word
from emoji_predictor.core.matcher import EmojiMatcher, default_matcher


class TypingSession:
    def __init__(
        self,
        matcher: Optional[EmojiMatcher] = None,
        word_results: int = 6,
        sentence_results: int = 12,
    ) -> None:
        self.matcher = matcher or default_matcher()
        self.word_results = word_results
        self.sentence_results = sentence_results
        self.text = ""
        self.word_suggestions: List[str] = []
        self.sentence_suggestions: List[str] = []
        self.picked: List[str] = []
        self.settled = False

    def update(self, text: str, cursor: Optional[int] = None) -> List[str]:
        """New text from the user; returns suggestions for the word being typed."""
        self.text = text or ""
        self.settled = False
        if not self.text.strip():
            self.word_suggestions = []
            return []

        word = current_word(self.text, cursor)
        if len(word) >= 2:
            self.word_suggestions = self.matcher.predict_for_word(word, self.word_results)
        else:
            self.word_suggestions = []
        return self.word_suggestions

    def settle(self) -> List[str]:
        """Typing paused: compute sentence suggestions for the whole text."""
        if not self.text.strip():
            return []
        self.sentence_suggestions = self.matcher.predict_for_sentence(self.text, self.sentence_results)
        self.word_suggestions = []
        self.settled = True
        return self.sentence_suggestions

    def pick(self, symbol: str) -> str:
        """Append a chosen emoji to the text; returns the new text."""
        self.picked.append(symbol)
        self.text += symbol
        return self.text

    def clear(self) -> None:
        self.text = ""
        self.word_suggestions = []
        self.sentence_suggestions = []
        self.picked = []
        self.settled = False
