"""ChatMessage data model."""

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A single turn in a buddy conversation."""

    role: Literal["ai", "user"] = Field(..., description="Who wrote the message")
    text: str = Field(..., description="Message text")

    model_config = {"frozen": True}
