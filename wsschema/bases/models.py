from __future__ import annotations

from enum import Enum
from typing import Any, Awaitable, Callable, Protocol, TypeAlias, runtime_checkable

from pydantic import BaseModel, ConfigDict


class ReceiveOutcome(str, Enum):
    DISPATCHED = "dispatched"
    IGNORED = "ignored"
    NON_JSON_PAYLOAD = "non_json_payload"
    MALFORMED_ENVELOPE = "malformed_envelope"
    UNRECOGNISED_EVENT = "unrecognised_event"
    INVALID_PAYLOAD = "invalid_payload"

    @property
    def ok(self) -> bool:
        """True when the message was well formed and known, handled or not."""
        return self in (ReceiveOutcome.DISPATCHED, ReceiveOutcome.IGNORED)


class Envelope(BaseModel):
    """One message instance as it travels on the wire: `{"event": ..., "data": ...}`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    event: str
    data: Any


@runtime_checkable
class Endpoint(Protocol):
    """Synchronous, fire-and-forget transport endpoint."""

    def send(self, text: str) -> Any: ...


@runtime_checkable
class AsyncEndpoint(Protocol):
    """Asynchronous transport endpoint, e.g. a FastAPI `WebSocket`."""

    def send_text(self, text: str) -> Awaitable[Any]: ...


WsHandler: TypeAlias = Callable[[Any], Any]
NonJsonPayloadHook: TypeAlias = Callable[[str], Any]
MalformedEnvelopeHook: TypeAlias = Callable[[Any], Any]
UnrecognisedEventHook: TypeAlias = Callable[[str], Any]
InvalidPayloadHook: TypeAlias = Callable[[str, Any], Any]
