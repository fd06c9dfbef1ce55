"""Keyword-based emotion classification for buddy messages."""

from typing import Literal, Optional

Emotion = Literal["anger", "fear", "fomo", "overconfident", "revenge", "greed"]


# Checked in insertion order; the first category with a hit wins.
# Matching is by substring, so "mad" also matches "made".
EMOTION_KEYWORDS: dict[Emotion, tuple[str, ...]] = {
    "anger": (
        "annoyed", "angry", "furious", "frustrated", "pissed", "mad", "rage",
    ),
    "fear": (
        "scared", "afraid", "nervous", "anxious", "worried", "fearful", "unsure",
    ),
    "fomo": (
        "missing out", "everyone", "fomo", "too late", "late", "chase", "chasing",
    ),
    "overconfident": (
        "easy", "guaranteed", "cant lose", "sure thing", "obvious", "definitely", "100%",
    ),
    "revenge": (
        "get it back", "recover", "make it back", "lost earlier", "revenge", "recoup",
    ),
    "greed": (
        "more", "bigger", "double", "increase size", "load up", "all in",
    ),
}


def classify_emotion(message: str) -> Optional[Emotion]:
    """Classify the emotion expressed in a message.

    Args:
        message: Free-text chat message.

    Returns:
        The first emotion category whose keywords appear in the
        message, or None if nothing matches.
    """
    message_lower = message.lower()

    for emotion, keywords in EMOTION_KEYWORDS.items():
        if any(kw in message_lower for kw in keywords):
            return emotion

    return None
