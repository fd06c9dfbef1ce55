"""Insight and Stats data models."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class PatternRule(str, Enum):
    """Behavioral patterns the detector knows about, in evaluation order."""

    REVENGE = "revenge_trading"
    FOMO = "fomo_entries"
    STOP_LOSS = "stop_loss_issues"
    OVERCONFIDENCE = "overconfidence_risk"
    PLAN = "plan_deviations"
    IMPULSE = "impulsive_entries"


class Insight(BaseModel):
    """A behavioral pattern found in the trade history."""

    rule: PatternRule = Field(..., description="Rule that produced the insight")
    type: Literal["warning", "info"] = Field(..., description="Severity")
    title: str = Field(..., description="Short headline")
    description: str = Field(..., description="Human-readable explanation")
    count: int = Field(..., ge=0, description="Number of matching trades")

    model_config = {"frozen": True}


class Stats(BaseModel):
    """Summary metrics over the whole journal."""

    total_trades: int = Field(default=0, ge=0, description="Number of trades")
    win_rate: float = Field(default=0.0, ge=0, le=100, description="Win rate percentage")
    avg_profit: float = Field(default=0.0, description="Average profit percentage")
    total_pnl: float = Field(default=0.0, description="Sum of profit percentages")

    model_config = {"frozen": True}
