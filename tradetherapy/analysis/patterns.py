"""Behavioral pattern detection.

Each rule is a predicate over completed trades (trades whose
questionnaire has been answered) plus a minimum number of matches
before the pattern is reported.
"""

from typing import Callable, Literal, NamedTuple

from tradetherapy.models import Insight, PatternRule, Trade


class RuleSpec(NamedTuple):
    """Definition of a single pattern rule."""

    rule: PatternRule
    predicate: Callable[[Trade], bool]
    min_count: int
    severity: Literal["warning", "info"]
    title: str
    description: str


def _revenge_loss(trade: Trade) -> bool:
    return trade.is_loss and trade.responses.revenge == "yes"


def _fomo_loss(trade: Trade) -> bool:
    return trade.is_loss and trade.responses.fomo == "yes"


def _moved_stop_loss(trade: Trade) -> bool:
    return trade.is_loss and trade.responses.stoploss == "yes"


def _confident_win(trade: Trade) -> bool:
    confidence = trade.responses.confidence_value
    return trade.is_win and confidence is not None and confidence >= 8


def _broke_plan(trade: Trade) -> bool:
    return trade.responses.plan == "no"


def _impulsive_entry(trade: Trade) -> bool:
    minutes = trade.responses.impulse_minutes
    return minutes is not None and minutes < 5


PATTERN_RULES: tuple[RuleSpec, ...] = (
    RuleSpec(
        rule=PatternRule.REVENGE,
        predicate=_revenge_loss,
        min_count=2,
        severity="warning",
        title="Revenge Trading Pattern",
        description="{count} trades show revenge trading behavior. Take a break after losses.",
    ),
    RuleSpec(
        rule=PatternRule.FOMO,
        predicate=_fomo_loss,
        min_count=2,
        severity="warning",
        title="FOMO Pattern Detected",
        description="{count} losing trades entered due to FOMO. Wait for your setup.",
    ),
    RuleSpec(
        rule=PatternRule.STOP_LOSS,
        predicate=_moved_stop_loss,
        min_count=2,
        severity="warning",
        title="Stop Loss Discipline Issue",
        description="You've moved stops on {count} losing trades. Honor your risk management.",
    ),
    RuleSpec(
        rule=PatternRule.OVERCONFIDENCE,
        predicate=_confident_win,
        min_count=3,
        severity="info",
        title="High Confidence Streak",
        description="{count} trades with 8+ confidence. Watch for overconfidence bias.",
    ),
    RuleSpec(
        rule=PatternRule.PLAN,
        predicate=_broke_plan,
        min_count=3,
        severity="warning",
        title="Plan Discipline Breakdown",
        description="{count} trades deviated from your plan. Review your rules.",
    ),
    RuleSpec(
        rule=PatternRule.IMPULSE,
        predicate=_impulsive_entry,
        min_count=3,
        severity="warning",
        title="Impulsive Entry Pattern",
        description="{count} trades entered within 5 minutes. Slow down and confirm your setup.",
    ),
)


def detect_patterns(trades: list[Trade]) -> list[Insight]:
    """Scan completed trades for recurring behavioral patterns.

    Args:
        trades: Full trade journal.

    Returns:
        Insights for every rule that reached its minimum count,
        in rule order.
    """
    completed = [trade for trade in trades if trade.is_completed]
    insights: list[Insight] = []

    for spec in PATTERN_RULES:
        count = sum(1 for trade in completed if spec.predicate(trade))
        if count >= spec.min_count:
            insights.append(Insight(
                rule=spec.rule,
                type=spec.severity,
                title=spec.title,
                description=spec.description.format(count=count),
                count=count,
            ))

    return insights
