"""
wsschema: typed event schemas for WebSocket messaging.

Declare the events two peers exchange once, then build outbound envelopes and
validate inbound ones against the same registry.
"""

from wsschema.bases import (
    AsyncEndpoint,
    Endpoint,
    Envelope,
    HandlerRegistrationError,
    InvalidSchemaError,
    ReceiveOutcome,
    UnknownEventError,
    WsSchemaError,
)
from wsschema.messaging import (
    Dispatch,
    EventSelection,
    HandlerTable,
    OutboundMessage,
    PayloadValidator,
    Receiver,
    ReceiverHooks,
    WsSchema,
    pump,
)

__version__ = "0.1.0"

__all__ = (
    "AsyncEndpoint",
    "Dispatch",
    "Endpoint",
    "Envelope",
    "EventSelection",
    "HandlerRegistrationError",
    "HandlerTable",
    "InvalidSchemaError",
    "OutboundMessage",
    "PayloadValidator",
    "ReceiveOutcome",
    "Receiver",
    "ReceiverHooks",
    "UnknownEventError",
    "WsSchema",
    "WsSchemaError",
    "pump",
)
