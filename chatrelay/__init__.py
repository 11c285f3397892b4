"""
chatrelay: credential-isolating chat completion relay

Forwards browser chat requests to the completion endpoint with the API key
injected server-side and permissive CORS headers on every answer.
"""

__version__ = "1.0.0"
__author__ = "chatrelay Contributors"

from .config import RelaySettings
from .exceptions import (
    RelayError,
    InvalidInboundPayload,
    UpstreamUnreachable,
    UpstreamInvalidResponse,
)
from .models import Message, ParsedChatRequest, UpstreamRequest

__all__ = [
    "RelaySettings",
    "RelayError",
    "InvalidInboundPayload",
    "UpstreamUnreachable",
    "UpstreamInvalidResponse",
    "Message",
    "ParsedChatRequest",
    "UpstreamRequest",
    "__version__",
]
