from wsschema.bases.exceptions import (
    HandlerRegistrationError,
    InvalidSchemaError,
    UnknownEventError,
    WsSchemaError,
)
from wsschema.bases.models import (
    AsyncEndpoint,
    Endpoint,
    Envelope,
    ReceiveOutcome,
    WsHandler,
)

__all__ = (
    "AsyncEndpoint",
    "Endpoint",
    "Envelope",
    "HandlerRegistrationError",
    "InvalidSchemaError",
    "ReceiveOutcome",
    "UnknownEventError",
    "WsHandler",
    "WsSchemaError",
)
