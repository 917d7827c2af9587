# tests/test_session.py
import pytest

from emoji_predictor.context import current_word
from emoji_predictor.core.knowledge_base import KnowledgeBase
from emoji_predictor.core.matcher import EmojiMatcher
from emoji_predictor.session import TypingSession

RECORDS = [
    {"symbol": "😀", "keywords": ["happy", "smile"], "category": "emotions"},
    {"symbol": "🍦", "keywords": ["ice cream", "dessert"], "category": "food"},
    {"symbol": "🌧️", "keywords": ["rain", "storm"], "category": "weather"},
]


@pytest.fixture
def session():
    return TypingSession(EmojiMatcher(KnowledgeBase.from_records(RECORDS)), word_results=6, sentence_results=12)


@pytest.mark.parametrize(
    "text,cursor,expected",
    [
        ("i am happ", None, "happ"),
        ("i am happy ", None, ""),
        ("i am happy today", 10, "happy"),
        ("i am happy today", 4, "am"),
        ("", None, ""),
        ("rain", 99, "rain"),
        ("one\ttwo", None, "two"),
    ],
)
def test_current_word(text, cursor, expected):
    assert current_word(text, cursor) == expected


def test_update_suggests_for_current_word(session):
    assert session.update("it is happ") == ["😀"]
    assert session.word_suggestions == ["😀"]
    assert not session.settled


def test_update_short_word_gives_nothing(session):
    assert session.update("it is h") == []


def test_update_blank_clears(session):
    session.update("happ")
    assert session.update("   ") == []
    assert session.word_suggestions == []


def test_settle_runs_sentence_prediction(session):
    session.update("rain and ice cream")
    assert session.settle() == ["🌧️", "🍦"]
    assert session.settled
    assert session.word_suggestions == []
    # typing again leaves the settled state
    session.update("rain and ice cream sm")
    assert not session.settled


def test_settle_on_blank_text(session):
    assert session.settle() == []
    assert not session.settled


def test_pick_and_clear(session):
    session.update("so happy")
    assert session.pick("😀") == "so happy😀"
    assert session.picked == ["😀"]
    session.clear()
    assert session.text == ""
    assert session.picked == []
    assert session.sentence_suggestions == []
