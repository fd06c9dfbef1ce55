"""Tests for buddy emotion classification.

**Feature: post-trade-therapy**
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from tradetherapy.buddy import EMOTION_KEYWORDS, classify_emotion


class TestEmotionClassification:
    """
    *For any* message, the classifier returns the first category (in
    table order) with a keyword substring hit, or None.
    """

    def test_fear(self):
        assert classify_emotion("I feel scared about this entry") == "fear"

    def test_no_keyword_returns_none(self):
        assert classify_emotion("Looking at the daily chart") is None

    def test_empty_message(self):
        assert classify_emotion("") is None

    def test_case_insensitive(self):
        assert classify_emotion("This is a SURE THING") == "overconfident"

    def test_phrases(self):
        assert classify_emotion("I need to make it back today") == "revenge"
        assert classify_emotion("afraid of missing out") == "fear"
        assert classify_emotion("I'm going all in") == "greed"
        assert classify_emotion("everyone is buying") == "fomo"

    def test_precedence_follows_table_order(self):
        # anger precedes revenge
        assert classify_emotion("so angry, I want revenge") == "anger"
        # fomo precedes greed
        assert classify_emotion("chasing more gains") == "fomo"

    def test_substring_matching_inside_words(self):
        # "mad" inside "made"
        assert classify_emotion("I made a plan") == "anger"

    @given(
        emotion=st.sampled_from(list(EMOTION_KEYWORDS)),
        data=st.data(),
    )
    @settings(max_examples=100)
    def test_every_keyword_classifies(self, emotion, data):
        keyword = data.draw(st.sampled_from(EMOTION_KEYWORDS[emotion]))
        order = list(EMOTION_KEYWORDS)

        result = classify_emotion(f"well {keyword} then")

        assert result is not None
        assert order.index(result) <= order.index(emotion)

    @given(text=st.text(alphabet="xyzqjkw ", max_size=50))
    @settings(max_examples=50)
    def test_text_without_keywords(self, text: str):
        assert classify_emotion(text) is None
