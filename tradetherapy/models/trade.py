"""Trade data model."""

import math
import re
from datetime import datetime
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from tradetherapy.models.questions import QuestionId

YesNo = Literal["yes", "no"]
NumericAnswer = Union[int, float, str]

LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: Any) -> Optional[int]:
    """Parse a questionnaire answer as an integer.

    Args:
        value: Raw answer (int, float or numeric string).

    Returns:
        The leading integer of the answer (4 for "4.5"), or None
        when the answer does not start with a number.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


class Responses(BaseModel):
    """Answers to the post-trade questionnaire, one field per question."""

    confidence: Optional[NumericAnswer] = Field(default=None, description="Entry confidence, 1-10")
    plan: Optional[YesNo] = Field(default=None, description="Followed the trading plan")
    emotion: Optional[str] = Field(default=None, description="Dominant emotion")
    size: Optional[YesNo] = Field(default=None, description="Position larger than usual")
    impulse: Optional[NumericAnswer] = Field(default=None, description="Minutes waited before entry")
    revenge: Optional[YesNo] = Field(default=None, description="Trying to recover earlier losses")
    stoploss: Optional[YesNo] = Field(default=None, description="Moved the stop loss")
    fomo: Optional[YesNo] = Field(default=None, description="Entered out of fear of missing out")

    model_config = {"frozen": True}

    def get(self, question_id: QuestionId) -> Any:
        """Get the answer for a question id."""
        return getattr(self, question_id.value)

    @property
    def confidence_value(self) -> Optional[int]:
        """Confidence parsed as an integer, if possible."""
        return parse_int(self.confidence)

    @property
    def impulse_minutes(self) -> Optional[int]:
        """Minutes waited before entry parsed as an integer, if possible."""
        return parse_int(self.impulse)


class Trade(BaseModel):
    """Represents one logged trade outcome."""

    id: int = Field(..., description="Unique, increasing trade ID")
    symbol: str = Field(..., min_length=1, description="Trading symbol")
    outcome: Literal["win", "loss"] = Field(..., description="Trade outcome")
    profit: Optional[float] = Field(default=None, description="Profit in percent")
    timestamp: datetime = Field(..., description="When the trade was logged")
    notes: str = Field(default="", description="Trade notes")
    post_trade_thoughts: str = Field(
        default="",
        alias="postTradeThoughts",
        description="Thoughts written after the trade",
    )
    responses: Optional[Responses] = Field(
        default=None,
        description="Questionnaire answers, None until completed",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("symbol", mode="before")
    @classmethod
    def _normalize_symbol(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("notes", "post_trade_thoughts", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_completed(self) -> bool:
        """Whether the psychological questionnaire has been answered."""
        return self.responses is not None

    @property
    def is_loss(self) -> bool:
        return self.outcome == "loss"

    @property
    def is_win(self) -> bool:
        return self.outcome == "win"
