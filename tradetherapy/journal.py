"""Trade journal session.

The Journal owns the mutable state of a journaling session: the
canonical trade list (mirrored to the data store after every change)
and the statistics and insights recomputed from it.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Literal, Mapping, NamedTuple, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from tradetherapy.analysis import calculate_stats, detect_patterns
from tradetherapy.db.codec import dump_trades, parse_trades
from tradetherapy.db.store import DataStore
from tradetherapy.models import (
    Insight,
    Question,
    QuestionId,
    Responses,
    Stats,
    Trade,
    get_questions,
    parse_int,
)

logger = logging.getLogger(__name__)

Answers = Mapping[Union[QuestionId, str], Any]


class TradeDraft(BaseModel):
    """A trade being entered, before it is saved to the journal."""

    symbol: str = Field(default="", description="Trading symbol")
    outcome: Literal["win", "loss"] = Field(default="win", description="Trade outcome")
    profit: float = Field(default=0.0, description="Profit in percent")
    notes: str = Field(default="", description="Trade notes")
    post_trade_thoughts: str = Field(default="", description="Thoughts after the trade")

    def questions(self) -> tuple[Question, ...]:
        """Questionnaire for the draft's outcome."""
        return get_questions(self.outcome)

    @property
    def has_symbol(self) -> bool:
        return bool(self.symbol.strip())


class JournalView(NamedTuple):
    """Read-only projection of the journal for display."""

    trades: tuple[Trade, ...]
    stats: Stats
    insights: tuple[Insight, ...]


def build_responses(outcome: str, answers: Answers) -> Optional[Responses]:
    """Turn questionnaire answers into Responses.

    Args:
        outcome: Trade outcome the questionnaire belongs to.
        answers: Answers keyed by question id.

    Returns:
        Responses covering every question for the outcome, or None if
        an answer is missing or invalid.
    """
    normalized: dict[str, Any] = {}
    for key, value in answers.items():
        try:
            normalized[QuestionId(key).value] = value
        except ValueError:
            logger.debug("Ignoring answer for unknown question %r", key)

    values: dict[str, Any] = {}

    for question in get_questions(outcome):
        value = normalized.get(question.id.value)
        if value is None or (isinstance(value, str) and not value.strip()):
            logger.warning("Missing answer for %r", question.id.value)
            return None
        if question.type == "scale":
            score = parse_int(value)
            if score is None or not 1 <= score <= 10:
                logger.warning("Answer for %r must be 1-10, got %r", question.id.value, value)
                return None
        elif question.type == "number" and parse_int(value) is None:
            logger.warning("Answer for %r must be a whole number, got %r", question.id.value, value)
            return None
        values[question.id.value] = value

    try:
        return Responses(**values)
    except ValidationError as e:
        logger.warning("Invalid questionnaire answers: %s", e)
        return None


class Journal:
    """Trade journal backed by a DataStore."""

    def __init__(self, store: DataStore, clock: Callable[[], datetime] = datetime.now):
        """Load the journal from the store.

        Args:
            store: Data store holding the trade sequence.
            clock: Source of the current time for new trades.
        """
        self.store = store
        self._clock = clock
        self._trades: list[Trade] = store.load_trades()
        self._stats = Stats()
        self._insights: list[Insight] = []
        self._refresh()

    @property
    def trades(self) -> tuple[Trade, ...]:
        return tuple(self._trades)

    @property
    def stats(self) -> Stats:
        return self._stats

    @property
    def insights(self) -> tuple[Insight, ...]:
        return tuple(self._insights)

    def view(self) -> JournalView:
        """Current trades with their derived statistics and insights."""
        return JournalView(self.trades, self._stats, self.insights)

    def snapshot(self) -> list[Trade]:
        """Copy of the trade list, oldest first."""
        return list(self._trades)

    def _refresh(self) -> None:
        self._stats = calculate_stats(self._trades)
        self._insights = detect_patterns(self._trades)

    def _commit(self, trades: list[Trade]) -> None:
        self._trades = trades
        self.store.save_trades(trades)
        self._refresh()

    def _next_id(self, now: datetime) -> int:
        candidate = int(now.timestamp() * 1000)
        if self._trades:
            candidate = max(candidate, max(t.id for t in self._trades) + 1)
        return candidate

    # ==================== Entry ====================

    def new_draft(self, **fields: Any) -> TradeDraft:
        """Start a new trade entry."""
        return TradeDraft(**fields)

    def save_draft(
        self, draft: TradeDraft, answers: Optional[Answers] = None
    ) -> Optional[Trade]:
        """Save a drafted trade to the journal.

        Args:
            draft: The trade being entered.
            answers: Questionnaire answers, or None to save the trade
                without psychological responses.

        Returns:
            The saved trade, or None if the draft has no symbol or the
            answers do not complete the questionnaire.
        """
        if not draft.has_symbol:
            logger.warning("Trade not saved: symbol is required")
            return None

        responses = None
        if answers is not None:
            responses = build_responses(draft.outcome, answers)
            if responses is None:
                logger.warning("Trade not saved: questionnaire incomplete")
                return None

        now = self._clock()
        trade = Trade(
            id=self._next_id(now),
            symbol=draft.symbol,
            outcome=draft.outcome,
            profit=draft.profit,
            timestamp=now,
            notes=draft.notes,
            post_trade_thoughts=draft.post_trade_thoughts,
            responses=responses,
        )
        self._commit(self._trades + [trade])
        logger.info("Saved %s %s trade %d", trade.symbol, trade.outcome, trade.id)
        return trade

    # ==================== Lookup / removal ====================

    def get(self, trade_id: int) -> Optional[Trade]:
        """Find a trade by ID."""
        for trade in self._trades:
            if trade.id == trade_id:
                return trade
        return None

    def delete(self, trade_id: int) -> bool:
        """Delete a trade by ID.

        Returns:
            True if a trade was removed.
        """
        remaining = [t for t in self._trades if t.id != trade_id]
        if len(remaining) == len(self._trades):
            return False
        self._commit(remaining)
        logger.info("Deleted trade %d", trade_id)
        return True

    # ==================== Import / export ====================

    def import_payload(self, text: str) -> bool:
        """Replace the journal with trades from a JSON export.

        Args:
            text: JSON text, expected to be an array of trades.

        Returns:
            True if the journal was replaced; False leaves it untouched.
        """
        trades = parse_trades(text)
        if trades is None:
            return False
        self._commit(trades)
        logger.info("Imported %d trades", len(trades))
        return True

    def export_payload(self) -> str:
        """Serialize the journal as indented JSON."""
        return dump_trades(self._trades, indent=2)


def export_filename(day: Optional[datetime] = None) -> str:
    """Default file name for a journal export."""
    day = day or datetime.now()
    return f"trading-journal-{day.strftime('%Y-%m-%d')}.json"
