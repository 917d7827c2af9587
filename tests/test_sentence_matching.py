# tests/test_sentence_matching.py
import math

import pytest

from emoji_predictor.core.knowledge_base import KnowledgeBase
from emoji_predictor.core.matcher import EmojiMatcher, predict_for_sentence

RECORDS = [
    {"symbol": "🍦", "keywords": ["ice cream", "dessert"], "category": "food"},
    {"symbol": "👍", "keywords": ["thumbs up", "approve"], "category": "gestures"},
    {"symbol": "🌧️", "keywords": ["rain", "storm"], "category": "weather"},
    {"symbol": "☕", "keywords": ["coffee", "morning"], "category": "food"},
]


@pytest.fixture
def matcher():
    return EmojiMatcher(KnowledgeBase.from_records(RECORDS))


def test_keyword_substring_across_words(matcher):
    # no single word matches, but "ice cream" is inside "nice creamy"
    assert matcher.predict_for_sentence("so nice creamy", 10) == ["🍦"]


def test_cosine_match_on_partial_phrase(matcher):
    # {cheer, up} vs {thumbs, up}: cosine 0.5 > 0.3
    assert matcher.predict_for_sentence("cheer up", 10) == ["👍"]


def test_word_hits_rank_above_record_scan(matcher):
    # 🌧️ via the word "rain" (90); 👍 via cosine 1/sqrt(6) * 60 ~ 24.5
    assert matcher.predict_for_sentence("rain cheer up", 10) == ["🌧️", "👍"]


def test_word_hits_keep_sentence_order(matcher):
    assert matcher.predict_for_sentence("rain and ice cream", 10) == ["🌧️", "🍦"]
    assert matcher.predict_for_sentence("ice cream and rain", 10) == ["🍦", "🌧️"]


def test_record_score_is_mean_of_matched_keywords():
    # two substring hits average to 80, they do not add up
    assert EmojiMatcher._record_score("ice cream and thumbs up", ("ice cream", "thumbs up")) == pytest.approx(80.0)
    # substring hit (80) + cosine hit (60 / sqrt(6)) averaged over two
    expected = (80 + 60 / math.sqrt(6)) / 2
    assert EmojiMatcher._record_score("ice cream up", ("ice cream", "thumbs up")) == pytest.approx(expected)
    assert EmojiMatcher._record_score("cheer up", ("thumbs up", "approve")) == pytest.approx(30.0)
    assert EmojiMatcher._record_score("nothing here", ("thumbs up", "approve")) is None


def test_cap_truncates(matcher):
    assert matcher.predict_for_sentence("rain cheer up", 1) == ["🌧️"]
    assert matcher.predict_for_sentence("rain cheer up", 0) == []
    assert matcher.predict_for_sentence("rain cheer up", -2) == []


@pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
def test_blank_sentence_rejected(matcher, text):
    assert matcher.predict_for_sentence(text, 10) == []


def test_duplicate_words_do_not_duplicate_symbols(matcher):
    assert matcher.predict_for_sentence("rain rain rain", 10) == ["🌧️"]


def test_case_and_whitespace_normalised(matcher):
    assert matcher.predict_for_sentence("  RAIN   and\tICE CREAM ", 10) == ["🌧️", "🍦"]


# packaged corpus ---------------------------------------------------------------

SENTENCES = [
    "happy birthday to you",
    "i love pizza and coffee in the morning",
    "so tired after the gym today",
    "!!! ??? ...",
    "12345 67890",
    "happy happy happy happy",
    "a",
]


@pytest.mark.parametrize("text", SENTENCES)
@pytest.mark.parametrize("n", [0, 1, 5, 12])
def test_cap_dedup_idempotent_on_default_corpus(text, n):
    first = predict_for_sentence(text, n)
    assert len(first) <= n
    assert len(first) == len(set(first))
    assert predict_for_sentence(text, n) == first


def test_default_corpus_sentence():
    out = predict_for_sentence("happy birthday party", 10)
    assert out[0] == "😀"
    assert "🥳" in out and "🎂" in out
    assert predict_for_sentence("   ", 10) == []


def test_long_sentence_is_handled():
    out = predict_for_sentence("the weather is nice today " * 40, 12)
    assert len(out) <= 12
    assert len(out) == len(set(out))
