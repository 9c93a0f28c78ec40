# wsschema/messaging/receiver.py

"""
Inbound side: parse, check, validate and dispatch one message string per call.

Pipeline (each failing stage is terminal for that message):
    1. decode JSON              -> NON_JSON_PAYLOAD
    2. check {event, data}      -> MALFORMED_ENVELOPE
    3. look up the event        -> UNRECOGNISED_EVENT
    4. look up a handler        -> IGNORED (not an error)
    5. validate the payload     -> INVALID_PAYLOAD
    6. call the handler         -> DISPATCHED

Failures in stages 1-5 are reported only through the optional hooks and the
returned `ReceiveOutcome`. Exceptions raised by hooks or handlers propagate.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Mapping

from pydantic import ValidationError

from wsschema.bases.exceptions import HandlerRegistrationError
from wsschema.bases.models import (
    InvalidPayloadHook,
    MalformedEnvelopeHook,
    NonJsonPayloadHook,
    ReceiveOutcome,
    UnrecognisedEventHook,
    WsHandler,
)
from wsschema.constants import ENVELOPE_DATA_FIELD, ENVELOPE_EVENT_FIELD
from wsschema.logger import get_logger

if TYPE_CHECKING:
    from wsschema.messaging.schema import PayloadValidator

log = get_logger(__name__)


def _reject_constant(name: str) -> None:
    # NaN and Infinity are accepted by the json module but are not JSON
    raise ValueError(f"non-standard JSON constant: {name}")


@dataclass(frozen=True)
class ReceiverHooks:
    """
    Optional callbacks, one per failure category. A missing hook means the
    failure is dropped silently.
    """

    on_non_json_payload: NonJsonPayloadHook | None = None
    on_malformed_envelope: MalformedEnvelopeHook | None = None
    on_unrecognised_event: UnrecognisedEventHook | None = None
    on_invalid_payload: InvalidPayloadHook | None = None

    def merged(self, override: ReceiverHooks | None) -> ReceiverHooks:
        """Return a copy where every hook set on `override` replaces ours."""
        if override is None:
            return self
        changes = {
            hook.name: getattr(override, hook.name)
            for hook in fields(override)
            if getattr(override, hook.name) is not None
        }
        return replace(self, **changes)


class HandlerTable:
    """
    Builder for a receiver's event handlers.

    Usage example:

        handlers = schema.handlers()

        @handlers.on("message")
        def on_message(text: str) -> None:
            ...

        receive = schema.receiver(handlers)
    """

    def __init__(self, events: Iterable[str]) -> None:
        self._events = frozenset(events)
        self._handlers: dict[str, WsHandler] = {}

    def add(self, event: str, handler_function: WsHandler) -> None:
        """
        Register `handler_function` for `event`, replacing any earlier one.

        Raises:
            HandlerRegistrationError: if the event is undeclared or the
                handler is not callable.
        """
        if event not in self._events:
            raise HandlerRegistrationError(event, "event is not declared in the schema")
        if not callable(handler_function):
            raise HandlerRegistrationError(
                event, f"handler must be callable, got {type(handler_function)}"
            )
        self._handlers[event] = handler_function

    def on(self, event: str):
        """Decorator form of `add`."""

        def _decorator(function: WsHandler) -> WsHandler:
            self.add(event, function)
            return function

        return _decorator

    def freeze(self) -> Mapping[str, WsHandler]:
        """Return a read-only snapshot of the registered handlers."""
        return MappingProxyType(dict(self._handlers))

    def __contains__(self, event: object) -> bool:
        return event in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


class Receiver:
    """
    Callable that handles one inbound message string per invocation.

    Built by `WsSchema.receiver(...)`; holds only read-only state, so one
    instance can serve many connections.
    """

    def __init__(
        self,
        *,
        validators: Mapping[str, PayloadValidator],
        handlers: Mapping[str, WsHandler],
        hooks: ReceiverHooks,
    ) -> None:
        self._validators = validators
        self._handlers = handlers
        self._hooks = hooks

    @property
    def hooks(self) -> ReceiverHooks:
        return self._hooks

    @property
    def handled_events(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def __call__(self, message: str | bytes | bytearray) -> ReceiveOutcome:
        # 1. decode
        try:
            if isinstance(message, (bytes, bytearray)):
                message = message.decode("utf-8")
            decoded = json.loads(message, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            log.debug(f"Dropping non-JSON message: {message!r:.200}")
            if self._hooks.on_non_json_payload is not None:
                self._hooks.on_non_json_payload(message)
            return ReceiveOutcome.NON_JSON_PAYLOAD

        # 2. envelope shape; presence is checked, not truthiness
        if (
            not isinstance(decoded, dict)
            or ENVELOPE_EVENT_FIELD not in decoded
            or ENVELOPE_DATA_FIELD not in decoded
            or not isinstance(decoded[ENVELOPE_EVENT_FIELD], str)
        ):
            log.debug(f"Dropping malformed envelope: {decoded!r:.200}")
            if self._hooks.on_malformed_envelope is not None:
                self._hooks.on_malformed_envelope(decoded)
            return ReceiveOutcome.MALFORMED_ENVELOPE

        event: str = decoded[ENVELOPE_EVENT_FIELD]
        payload = decoded[ENVELOPE_DATA_FIELD]

        # 3. event recognition
        payload_validator = self._validators.get(event)
        if payload_validator is None:
            log.debug(f"Dropping unrecognised event '{event}'")
            if self._hooks.on_unrecognised_event is not None:
                self._hooks.on_unrecognised_event(event)
            return ReceiveOutcome.UNRECOGNISED_EVENT

        # 4. handler presence
        handler_function = self._handlers.get(event)
        if handler_function is None:
            return ReceiveOutcome.IGNORED

        # 5. payload validation
        try:
            typed_payload = payload_validator.validate(payload)
        except (ValidationError, RecursionError) as e:
            if isinstance(e, ValidationError):
                detail = f"{e.error_count()} error(s)"
            else:
                detail = "nested too deeply"
            log.debug(f"Dropping invalid payload for '{event}': {detail}")
            if self._hooks.on_invalid_payload is not None:
                self._hooks.on_invalid_payload(event, payload)
            return ReceiveOutcome.INVALID_PAYLOAD

        # 6. dispatch
        handler_function(typed_payload)
        return ReceiveOutcome.DISPATCHED
