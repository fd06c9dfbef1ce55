"""Data models for Post-Trade Therapy."""

from tradetherapy.models.chat import ChatMessage
from tradetherapy.models.insight import Insight, PatternRule, Stats
from tradetherapy.models.questions import (
    QUESTIONS,
    Question,
    QuestionId,
    get_questions,
)
from tradetherapy.models.trade import Responses, Trade, parse_int

__all__ = [
    "ChatMessage",
    "Insight",
    "PatternRule",
    "Stats",
    "QUESTIONS",
    "Question",
    "QuestionId",
    "get_questions",
    "Responses",
    "Trade",
    "parse_int",
]
