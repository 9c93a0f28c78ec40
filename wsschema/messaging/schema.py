# wsschema/messaging/schema.py

"""
Schema registry: the immutable mapping from event name to payload validator.

A `WsSchema` is built once from a mapping of event names to payload shapes and
is then shared read-only by every sender and receiver derived from it:

    chat = WsSchema({"message": str, "join": JoinPayload})

    text = chat.send("message").data("hi").stringify()
    receive = chat.receiver(message=print)
    receive(text)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping

from pydantic import TypeAdapter

from wsschema.bases.exceptions import InvalidSchemaError, UnknownEventError
from wsschema.config import wsschema_config
from wsschema.logger import get_logger
from wsschema.messaging.receiver import HandlerTable, Receiver, ReceiverHooks
from wsschema.messaging.sender import EventSelection

log = get_logger(__name__)


class PayloadValidator:
    """
    Validation capability for one event's payload.

    Wraps any type pydantic can validate (builtins, typing constructs,
    BaseModel subclasses, dataclasses, TypedDicts) in a `TypeAdapter`.
    """

    def __init__(self, shape: Any, *, strict: bool = False) -> None:
        self.shape = shape
        self.strict = strict
        self._adapter = TypeAdapter(shape)

    @classmethod
    def from_adapter(
        cls, adapter: TypeAdapter, shape: Any, *, strict: bool = False
    ) -> PayloadValidator:
        """
        Reuse an existing `TypeAdapter`. `shape` is the type the adapter was
        built for; it becomes the declared shape.
        """
        payload_validator = cls.__new__(cls)
        payload_validator.shape = shape
        payload_validator.strict = strict
        payload_validator._adapter = adapter
        return payload_validator

    def validate(self, candidate: Any) -> Any:
        """
        Return the typed payload, or raise `pydantic.ValidationError`.
        """
        return self._adapter.validate_python(candidate, strict=self.strict)

    def __repr__(self) -> str:
        shape_name = getattr(self.shape, "__name__", repr(self.shape))
        return f"PayloadValidator({shape_name}, strict={self.strict})"


class WsSchema:
    """
    Immutable registry of events and their payload validators.

    Args:
        validators: event name → payload shape (or a ready `PayloadValidator`).
        hooks:      default error hooks for every receiver built from this schema.
        strict:     strict validation for shapes wrapped here; `None` defers
                    to `validation.strict` in the configuration.

    Raises:
        InvalidSchemaError: if an event name is not a non-empty string.
    """

    def __init__(
        self,
        validators: Mapping[str, Any],
        *,
        hooks: ReceiverHooks | None = None,
        strict: bool | None = None,
    ) -> None:
        if strict is None:
            strict = wsschema_config.validation.strict

        registry: dict[str, PayloadValidator] = {}
        for event, shape in validators.items():
            if not isinstance(event, str) or not event:
                raise InvalidSchemaError(
                    f"event names must be non-empty strings, got {event!r}"
                )
            if isinstance(shape, TypeAdapter):
                raise InvalidSchemaError(
                    f"event '{event}': wrap TypeAdapter instances with "
                    "PayloadValidator.from_adapter(adapter, shape)"
                )
            if isinstance(shape, PayloadValidator):
                registry[event] = shape
            else:
                registry[event] = PayloadValidator(shape, strict=strict)

        self._validators: Mapping[str, PayloadValidator] = MappingProxyType(registry)
        self._hooks = hooks if hooks is not None else ReceiverHooks()
        log.debug(f"Schema created with events: {', '.join(registry) or '<none>'}")

    ########### LOOKUP ###########

    @property
    def events(self) -> tuple[str, ...]:
        """Known event names, in declaration order."""
        return tuple(self._validators)

    @property
    def hooks(self) -> ReceiverHooks:
        return self._hooks

    def validator(self, event: str) -> PayloadValidator | None:
        """Return the validator for `event`, or None if the event is not declared."""
        return self._validators.get(event)

    def payload_type(self, event: str) -> Any:
        """
        Return the declared payload shape for `event`, e.g. for annotations.

        Raises:
            UnknownEventError: if `event` is not declared.
        """
        payload_validator = self.validator(event)
        if payload_validator is None:
            raise UnknownEventError(event)
        return payload_validator.shape

    def __contains__(self, event: object) -> bool:
        return event in self._validators

    def __iter__(self) -> Iterator[str]:
        return iter(self._validators)

    def __len__(self) -> int:
        return len(self._validators)

    def __repr__(self) -> str:
        return f"WsSchema(events={list(self._validators)!r})"

    ########### SEND / RECEIVE ###########

    def send(self, event: str) -> EventSelection:
        """
        Start building an outbound message for `event`.

        Raises:
            UnknownEventError: if `event` is not declared.
        """
        if event not in self._validators:
            raise UnknownEventError(event)
        return EventSelection(event=event)

    def handlers(self) -> HandlerTable:
        """Return an empty handler table bound to this schema's events."""
        return HandlerTable(self.events)

    def receiver(
        self,
        handlers: Mapping[str, Any] | HandlerTable | None = None,
        *,
        hooks: ReceiverHooks | None = None,
        **handler_kwargs: Any,
    ) -> Receiver:
        """
        Build a receiver callable for inbound message strings.

        Handlers may come from a mapping, a `HandlerTable`, keyword arguments,
        or a mix; keyword arguments win on conflicts. Receiver-level hooks
        override the schema's default hooks slot by slot.

        Raises:
            HandlerRegistrationError: for handlers naming undeclared events
                or handlers that are not callable.
        """
        table = HandlerTable(self.events)
        if isinstance(handlers, HandlerTable):
            handlers = handlers.freeze()
        for event, handler_function in {**(handlers or {}), **handler_kwargs}.items():
            table.add(event, handler_function)

        return Receiver(
            validators=self._validators,
            handlers=table.freeze(),
            hooks=self._hooks.merged(hooks),
        )
