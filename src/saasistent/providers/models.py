"""
Provider data models for SaaSistent.

Defines the message and response types exchanged with the model provider.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Message:
    """Conversation message."""

    role: str  # "user" | "assistant"
    content: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to LiteLLM-compatible dict."""
        return {"role": self.role, "content": self.content}

    @classmethod
    def user(cls, content: str) -> "Message":
        """Create a user message."""
        return cls(role="user", content=content)


@dataclass
class TokenUsage:
    """Token usage statistics."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self) -> None:
        if self.total_tokens == 0:
            self.total_tokens = self.input_tokens + self.output_tokens


@dataclass
class CompletionResponse:
    """Unified completion response from any provider."""

    content: str
    model: str
    provider: str
    usage: TokenUsage
    finish_reason: str
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def truncated(self) -> bool:
        """Whether generation stopped at the output ceiling."""
        return self.finish_reason == "length"
