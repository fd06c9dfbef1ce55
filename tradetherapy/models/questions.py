"""Post-trade questionnaire definitions."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class QuestionId(str, Enum):
    """Identifiers of every questionnaire answer a trade can carry."""

    CONFIDENCE = "confidence"
    PLAN = "plan"
    EMOTION = "emotion"
    SIZE = "size"
    IMPULSE = "impulse"
    REVENGE = "revenge"
    STOPLOSS = "stoploss"
    FOMO = "fomo"


QuestionType = Literal["scale", "yesno", "text", "number"]


class Question(BaseModel):
    """A single questionnaire prompt."""

    id: QuestionId = Field(..., description="Answer key")
    prompt: str = Field(..., description="Question shown to the trader")
    type: QuestionType = Field(..., description="Expected answer type")

    model_config = {"frozen": True}


QUESTIONS: dict[str, tuple[Question, ...]] = {
    "win": (
        Question(
            id=QuestionId.CONFIDENCE,
            prompt="On a scale of 1-10, how confident were you entering this trade?",
            type="scale",
        ),
        Question(
            id=QuestionId.PLAN,
            prompt="Did you follow your trading plan exactly?",
            type="yesno",
        ),
        Question(
            id=QuestionId.EMOTION,
            prompt="What was your dominant emotion during the trade?",
            type="text",
        ),
        Question(
            id=QuestionId.SIZE,
            prompt="Was your position size larger than usual?",
            type="yesno",
        ),
        Question(
            id=QuestionId.IMPULSE,
            prompt="How long did you wait before entering? (minutes)",
            type="number",
        ),
    ),
    "loss": (
        Question(
            id=QuestionId.REVENGE,
            prompt="Were you trying to recover losses from a previous trade?",
            type="yesno",
        ),
        Question(
            id=QuestionId.STOPLOSS,
            prompt="Did you move your stop loss during the trade?",
            type="yesno",
        ),
        Question(
            id=QuestionId.EMOTION,
            prompt="What was your dominant emotion during the trade?",
            type="text",
        ),
        Question(
            id=QuestionId.PLAN,
            prompt="Did you follow your trading plan exactly?",
            type="yesno",
        ),
        Question(
            id=QuestionId.FOMO,
            prompt="Did you enter because you feared missing out?",
            type="yesno",
        ),
    ),
}


def get_questions(outcome: str) -> tuple[Question, ...]:
    """Get the questionnaire for a trade outcome.

    Args:
        outcome: Trade outcome ("win" or "loss").

    Returns:
        Questions to ask, in display order. Unknown outcomes get none.
    """
    return QUESTIONS.get(outcome, ())
