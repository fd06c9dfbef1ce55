"""Reply synthesis for the trading buddy.

Replies to a classified emotion are fixed templates filled in with
counters taken from the trader's own journal. Messages with no
recognizable emotion get a generic prompt picked at random.
"""

import random
import re
from typing import Callable, NamedTuple, Optional, Protocol, Sequence, TypeVar

from tradetherapy.buddy.emotions import Emotion
from tradetherapy.models import Trade

T = TypeVar("T")

SYMBOL_PATTERN = re.compile(r"\b([A-Z]{2,6})\b")


class RandomSource(Protocol):
    """The subset of ``random.Random`` the buddy relies on."""

    def choice(self, seq: Sequence[T]) -> T: ...

    def uniform(self, a: float, b: float) -> float: ...


def extract_symbol(message: str) -> Optional[str]:
    """Extract a ticker-like token from a message.

    Args:
        message: Free-text chat message.

    Returns:
        The first 2-6 letter word of the upper-cased message, or None.
    """
    match = SYMBOL_PATTERN.search(message.upper())
    return match.group(1) if match else None


def loss_streak(trades: list[Trade]) -> int:
    """Count consecutive losses at the end of the journal.

    Args:
        trades: Trades in journal order, oldest first.

    Returns:
        Number of trailing losing trades.
    """
    streak = 0
    for trade in reversed(trades):
        if not trade.is_loss:
            break
        streak += 1
    return streak


def _count_revenge(trades: list[Trade]) -> int:
    return sum(
        1 for t in trades
        if t.responses is not None and t.responses.revenge == "yes"
    )


def _count_confident_losses(trades: list[Trade]) -> int:
    count = 0
    for t in trades:
        if not t.is_loss or t.responses is None:
            continue
        confidence = t.responses.confidence_value
        if confidence is not None and confidence >= 8:
            count += 1
    return count


def _count_angry_losses(trades: list[Trade]) -> int:
    count = 0
    for t in trades:
        if not t.is_loss or t.responses is None or not t.responses.emotion:
            continue
        emotion = t.responses.emotion.lower()
        if "annoy" in emotion or "angry" in emotion:
            count += 1
    return count


# Emotions missing here have no journal counter and report 0.
CONTEXT_COUNTERS: dict[Emotion, Callable[[list[Trade]], int]] = {
    "revenge": _count_revenge,
    "overconfident": _count_confident_losses,
    "anger": _count_angry_losses,
}


EMOTION_TEMPLATES: dict[Emotion, str] = {
    "anger": (
        "Take a breath. Anger is doing the talking right now{on_symbol}. "
        "You've logged {count} losing trades while annoyed or angry. "
        "{streak_note}Nothing good gets clicked in this state, so step away "
        "until the heat passes."
    ),
    "fear": (
        "Feeling nervous is information, not a verdict. {streak_note}"
        "If {subject} fits your plan, cut the size until the fear fits too. "
        "If it doesn't fit the plan, the fear is right and you can pass."
    ),
    "fomo": (
        "The move you're watching{on_symbol} has already happened without you. "
        "Chasing is how FOMO losses start. {streak_note}"
        "Wait for your setup to come to you; there is always another trade."
    ),
    "overconfident": (
        "Nothing in this market is guaranteed. You've logged {count} losing "
        "trades that you entered with 8+ confidence. {streak_note}"
        "Size {subject} like you could be wrong, because you could be."
    ),
    "revenge": (
        "That sounds like revenge trading{on_symbol}. Your journal shows "
        "{count} trades where you were trying to win back earlier losses. "
        "{streak_note}Close the chart for 15 minutes before you decide anything."
    ),
    "greed": (
        "Wanting more is normal; sizing up on a feeling isn't. {streak_note}"
        "Keep your normal size on {subject} and let your edge play out over "
        "many trades, not this one."
    ),
}


class GenericTemplate(NamedTuple):
    """A fallback reply and the context it needs to make sense."""

    text: str
    needs_symbol: bool = False
    needs_streak: bool = False


GENERIC_TEMPLATES: tuple[GenericTemplate, ...] = (
    GenericTemplate("Tell me more. What's the setup, and does it match your plan?"),
    GenericTemplate(
        "How are you feeling right now, honestly? Calm, rushed, or somewhere in between?"
    ),
    GenericTemplate(
        "Before any trade, name three things: entry, stop and target. "
        "Which of those are you least sure about?"
    ),
    GenericTemplate(
        "What's your invalidation level on {symbol}? If you can't name it, "
        "you're not ready to enter.",
        needs_symbol=True,
    ),
    GenericTemplate(
        "Before you take {symbol}, write down your entry, stop and target, "
        "then check them against your rules.",
        needs_symbol=True,
    ),
    GenericTemplate(
        "You're {streak} losses deep right now. This might be a day for "
        "reviewing, not trading.",
        needs_streak=True,
    ),
)

_default_rng = random.Random()


def _streak_note(streak: int) -> str:
    if streak == 0:
        return ""
    if streak == 1:
        return "Your last trade was a loss, so be honest about where your head is. "
    return f"You're on a {streak}-trade losing streak. "


def synthesize_response(
    emotion: Optional[Emotion],
    trades: list[Trade],
    message: str,
    rng: Optional[RandomSource] = None,
) -> str:
    """Build the buddy's reply to a message.

    Args:
        emotion: Classified emotion, or None if nothing matched.
        trades: Full trade journal, oldest first.
        message: The raw message text.
        rng: Random source used to pick a generic reply.

    Returns:
        Reply text.
    """
    symbol = extract_symbol(message)
    streak = loss_streak(trades)

    if emotion is not None:
        counter = CONTEXT_COUNTERS.get(emotion)
        count = counter(trades) if counter else 0
        return EMOTION_TEMPLATES[emotion].format(
            count=count,
            streak_note=_streak_note(streak),
            on_symbol=f" on {symbol}" if symbol else "",
            subject=symbol or "this trade",
        )

    eligible = [
        template for template in GENERIC_TEMPLATES
        if (symbol or not template.needs_symbol)
        and (streak >= 2 or not template.needs_streak)
    ]
    template = (rng or _default_rng).choice(eligible)
    return template.text.format(symbol=symbol, streak=streak)
