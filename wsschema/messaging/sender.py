# wsschema/messaging/sender.py

"""
Staged builders for outbound messages.

Each stage is a small frozen value exposing only what is legal next:

    schema.send(event)          -> EventSelection
        .data(payload)          -> OutboundMessage (.object / .envelope / .stringify)
        .to(*endpoints)         -> Dispatch
        .emit() / .emit_async()

Payloads are not validated on the way out; validation guards inbound traffic only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from wsschema.bases.models import Envelope
from wsschema.logger import get_logger

log = get_logger(__name__)


def _unique_endpoints(endpoints: Iterable[Any]) -> tuple[Any, ...]:
    """
    Flatten list/tuple/set arguments and drop repeated endpoints by identity,
    keeping first-seen order.
    """
    unique: list[Any] = []
    seen: set[int] = set()
    for endpoint in endpoints:
        if isinstance(endpoint, (list, tuple, set, frozenset)):
            candidates = endpoint
        else:
            candidates = (endpoint,)
        for candidate in candidates:
            if id(candidate) not in seen:
                seen.add(id(candidate))
                unique.append(candidate)
    return tuple(unique)


@dataclass(frozen=True)
class EventSelection:
    """An event has been chosen; the payload comes next."""

    event: str

    def data(self, payload: Any) -> OutboundMessage:
        return OutboundMessage(event=self.event, payload=payload)


@dataclass(frozen=True)
class OutboundMessage:
    """A complete message, ready to be serialized or addressed."""

    event: str
    payload: Any

    def object(self) -> dict[str, Any]:
        """Return the envelope as a plain dict."""
        return {"event": self.event, "data": self.payload}

    def envelope(self) -> Envelope:
        return Envelope(event=self.event, data=self.payload)

    def stringify(self) -> str:
        """
        Return the compact JSON text of the envelope.

        Raises whatever pydantic raises for data it cannot encode
        (cyclic structures, unknown object types).
        """
        return self.envelope().model_dump_json()

    def to(self, *endpoints: Any) -> Dispatch:
        """Address the message to zero or more endpoints, deduplicated by identity."""
        return Dispatch(message=self, endpoints=_unique_endpoints(endpoints))


@dataclass(frozen=True)
class Dispatch:
    """A message bound to its destination endpoints."""

    message: OutboundMessage
    endpoints: tuple[Any, ...]

    def emit(self) -> None:
        """
        Hand the serialized message to `send(text)` of every endpoint.
        Endpoint errors propagate to the caller.
        """
        if not self.endpoints:
            return
        text = self.message.stringify()
        for endpoint in self.endpoints:
            endpoint.send(text)
        log.debug(
            f"Emitted '{self.message.event}' to {len(self.endpoints)} endpoint(s)"
        )

    async def emit_async(self) -> None:
        """
        Await `send_text(text)` on every endpoint in turn (FastAPI / Starlette
        WebSockets). Endpoint errors propagate to the caller.
        """
        if not self.endpoints:
            return
        text = self.message.stringify()
        for endpoint in self.endpoints:
            await endpoint.send_text(text)
        log.debug(
            f"Emitted '{self.message.event}' to {len(self.endpoints)} endpoint(s) (async)"
        )
