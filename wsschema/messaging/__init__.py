from wsschema.messaging.receiver import HandlerTable, Receiver, ReceiverHooks
from wsschema.messaging.schema import PayloadValidator, WsSchema
from wsschema.messaging.sender import Dispatch, EventSelection, OutboundMessage
from wsschema.messaging.transport import pump

__all__ = (
    "Dispatch",
    "EventSelection",
    "HandlerTable",
    "OutboundMessage",
    "PayloadValidator",
    "Receiver",
    "ReceiverHooks",
    "WsSchema",
    "pump",
)
