"""
Relay failure types
"""


class RelayError(Exception):
    """Base class for failures on the relay path"""

    kind = "relay_error"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.kind}: {detail}")


class InvalidInboundPayload(RelayError):
    """Raised when the caller's body is not JSON or has no usable messages"""

    kind = "invalid_inbound_payload"


class UpstreamUnreachable(RelayError):
    """Raised when the completion endpoint cannot be contacted"""

    kind = "upstream_unreachable"


class UpstreamInvalidResponse(RelayError):
    """Raised when the completion endpoint answers with something other than JSON"""

    kind = "upstream_invalid_response"
