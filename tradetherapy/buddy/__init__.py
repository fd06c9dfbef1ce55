"""Trading buddy: keyword-driven conversational support."""

from tradetherapy.buddy.emotions import EMOTION_KEYWORDS, Emotion, classify_emotion
from tradetherapy.buddy.responses import (
    extract_symbol,
    loss_streak,
    synthesize_response,
)
from tradetherapy.buddy.session import ConversationSession, SessionState

__all__ = [
    "EMOTION_KEYWORDS",
    "Emotion",
    "classify_emotion",
    "extract_symbol",
    "loss_streak",
    "synthesize_response",
    "ConversationSession",
    "SessionState",
]
