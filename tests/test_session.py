"""Tests for the buddy conversation session.

**Feature: post-trade-therapy**
"""

import asyncio

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tests.strategies import make_trade
from tradetherapy.buddy import ConversationSession, SessionState


class StubRandom:
    """Random source with fixed jitter that picks the first option."""

    def __init__(self, jitter_value: float = 0.25):
        self.jitter_value = jitter_value
        self.uniform_calls: list[tuple[float, float]] = []

    def choice(self, seq):
        return seq[0]

    def uniform(self, a, b):
        self.uniform_calls.append((a, b))
        return self.jitter_value


class RecordingSleep:
    """Sleep replacement that records delays instead of waiting."""

    def __init__(self):
        self.delays: list[float] = []
        self.during = None

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        if self.during is not None:
            await self.during()


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def trades():
    return [make_trade("loss", revenge="yes"), make_trade("loss", revenge="yes")]


@pytest.fixture
def session(sleep, trades):
    return ConversationSession(
        trades=lambda: trades,
        rng=StubRandom(),
        sleep=sleep,
        base_delay=1.0,
        jitter=1.0,
    )


class TestBlankInput:
    """
    *For any* whitespace-only input, no message is appended and the
    session stays idle.
    """

    @given(text=st.text(alphabet=" \t\n\r", max_size=10))
    @settings(max_examples=30)
    def test_blank_input_is_ignored(self, text: str):
        sleeper = RecordingSleep()
        session = ConversationSession(trades=list, rng=StubRandom(), sleep=sleeper)

        reply = asyncio.run(session.send(text))

        assert reply is None
        assert session.messages == ()
        assert session.state is SessionState.IDLE
        assert sleeper.delays == []

    def test_empty_string(self, session):
        assert asyncio.run(session.send("")) is None
        assert asyncio.run(session.send("   ")) is None
        assert session.messages == ()


class TestTurn:
    """A submitted message is followed by one ai reply after the typing delay."""

    def test_revenge_message(self, session, sleep):
        reply = asyncio.run(session.send("I want to revenge trade EURUSD"))

        messages = session.messages
        assert [m.role for m in messages] == ["user", "ai"]
        assert messages[0].text == "I want to revenge trade EURUSD"
        assert messages[1] == reply
        assert "revenge" in reply.text
        assert "2 trades" in reply.text
        assert sleep.delays == [1.25]
        assert session.state is SessionState.IDLE

    def test_user_text_is_trimmed(self, session):
        asyncio.run(session.send("  hello there  "))

        assert session.messages[0].text == "hello there"

    def test_delay_uses_base_plus_jitter(self, sleep):
        rng = StubRandom(jitter_value=0.4)
        session = ConversationSession(trades=list, rng=rng, sleep=sleep, base_delay=0.5, jitter=2.0)

        asyncio.run(session.send("hi"))

        assert rng.uniform_calls == [(0, 2.0)]
        assert sleep.delays == [pytest.approx(0.9)]

    def test_composing_state_during_delay(self, session, sleep):
        seen = []

        async def observe():
            seen.append((session.state, len(session.messages)))

        sleep.during = observe
        asyncio.run(session.send("hello"))

        assert seen == [(SessionState.COMPOSING, 1)]

    def test_second_message_while_composing_is_refused(self, session, sleep):
        results = []

        async def interrupt():
            results.append(await session.send("another one"))

        sleep.during = interrupt
        asyncio.run(session.send("first"))

        assert results == [None]
        assert [m.text for m in session.messages if m.role == "user"] == ["first"]
        assert len(session.messages) == 2

    def test_reply_uses_latest_trades(self, sleep, trades):
        session = ConversationSession(trades=lambda: trades, rng=StubRandom(), sleep=sleep)

        trades.append(make_trade("loss", revenge="yes"))
        reply = asyncio.run(session.send("revenge time"))

        assert "3 trades" in reply.text

    def test_messages_accumulate_in_order(self, session):
        for text in ("one", "two", "three"):
            asyncio.run(session.send(text))

        assert [m.text for m in session.messages if m.role == "user"] == ["one", "two", "three"]
        assert [m.role for m in session.messages] == ["user", "ai"] * 3

    def test_messages_projection_is_read_only(self, session):
        asyncio.run(session.send("hello"))

        snapshot = session.messages
        assert isinstance(snapshot, tuple)
        asyncio.run(session.send("again"))
        assert len(snapshot) == 2
