"""
Data models for the inbound chat request and the upstream completion call
"""

from pydantic import BaseModel, ConfigDict
from typing import Any, List

UPSTREAM_MODEL = "gpt-4o"
MAX_TOKENS = 800
TEMPERATURE = 0.5
FREQUENCY_PENALTY = 0.8


class Message(BaseModel):
    """One conversation entry; unknown keys are kept and forwarded"""
    model_config = ConfigDict(extra="allow")

    role: str
    content: Any = None

    def to_payload(self) -> dict:
        data = self.model_dump()
        if "content" not in self.model_fields_set:
            del data["content"]
        return data


class ParsedChatRequest(BaseModel):
    """Validated inbound body. Anything besides messages is dropped."""
    model_config = ConfigDict(extra="ignore")

    messages: List[Message]


class UpstreamRequest(BaseModel):
    """Body sent to the completion endpoint"""
    model: str = UPSTREAM_MODEL
    messages: List[Message]
    max_tokens: int = MAX_TOKENS
    temperature: float = TEMPERATURE
    frequency_penalty: float = FREQUENCY_PENALTY

    @classmethod
    def from_parsed(cls, parsed: ParsedChatRequest) -> "UpstreamRequest":
        return cls(messages=parsed.messages)

    def to_payload(self) -> dict:
        payload = self.model_dump()
        payload["messages"] = [m.to_payload() for m in self.messages]
        return payload
