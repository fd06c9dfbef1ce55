"""Conversation session for the trading buddy."""

import asyncio
import logging
import random
from enum import Enum
from typing import Awaitable, Callable, Optional

from tradetherapy.buddy.emotions import classify_emotion
from tradetherapy.buddy.responses import RandomSource, synthesize_response
from tradetherapy.models import ChatMessage, Trade

logger = logging.getLogger(__name__)

DEFAULT_BASE_DELAY = 1.0
DEFAULT_JITTER = 1.0


class SessionState(str, Enum):
    """Turn state of a conversation."""

    IDLE = "idle"
    COMPOSING = "composing"


class ConversationSession:
    """Holds one chat with the buddy and runs it a turn at a time.

    Each accepted message moves the session to ``composing`` for a
    short simulated typing delay, after which the reply is appended
    and the session returns to ``idle``.
    """

    def __init__(
        self,
        trades: Callable[[], list[Trade]],
        rng: Optional[RandomSource] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        base_delay: float = DEFAULT_BASE_DELAY,
        jitter: float = DEFAULT_JITTER,
    ):
        """Initialize the session.

        Args:
            trades: Returns the current trade journal snapshot.
            rng: Random source for reply selection and typing jitter.
            sleep: Coroutine used to wait out the typing delay.
            base_delay: Fixed part of the typing delay, in seconds.
            jitter: Upper bound of the random extra delay, in seconds.
        """
        self._trades = trades
        self._rng = rng or random.Random()
        self._sleep = sleep
        self.base_delay = base_delay
        self.jitter = jitter
        self._messages: list[ChatMessage] = []
        self._state = SessionState.IDLE

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        """Messages so far, oldest first."""
        return tuple(self._messages)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_composing(self) -> bool:
        return self._state is SessionState.COMPOSING

    def next_delay(self) -> float:
        """Draw the typing delay for the next reply."""
        return self.base_delay + self._rng.uniform(0, self.jitter)

    async def send(self, text: str) -> Optional[ChatMessage]:
        """Submit a user message and wait for the buddy's reply.

        Args:
            text: Message typed by the trader.

        Returns:
            The appended reply, or None if the message was not accepted
            (blank input, or a reply is still being composed).
        """
        message = text.strip()
        if not message:
            return None
        if self.is_composing:
            logger.warning("Ignoring message while a reply is being composed")
            return None

        self._messages.append(ChatMessage(role="user", text=message))
        self._state = SessionState.COMPOSING
        try:
            delay = self.next_delay()
            logger.debug("Composing reply in %.2fs", delay)
            await self._sleep(delay)

            emotion = classify_emotion(message)
            reply_text = synthesize_response(emotion, self._trades(), message, self._rng)
            reply = ChatMessage(role="ai", text=reply_text)
            self._messages.append(reply)
            return reply
        finally:
            self._state = SessionState.IDLE
