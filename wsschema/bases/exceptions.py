class WsSchemaError(Exception):
    """Base exception for wsschema."""

    pass


class InvalidSchemaError(WsSchemaError, ValueError):
    """Raised when a schema definition cannot be turned into a registry."""

    pass


class UnknownEventError(WsSchemaError, KeyError):
    """Raised when code asks for an event the schema does not declare."""

    def __init__(self, event: object):
        self.event = event
        super().__init__(f"Event '{event}' is not declared in this schema.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class HandlerRegistrationError(WsSchemaError, ValueError):
    """Raised when a receiver is given a handler it cannot use."""

    def __init__(self, event: str, reason: str):
        self.event = event
        self.reason = reason
        super().__init__(f"Cannot register handler for '{event}': {reason}")
