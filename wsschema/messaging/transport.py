# wsschema/messaging/transport.py

"""
Glue between a FastAPI WebSocket and a `Receiver`.

Accepting, closing and reconnecting the socket stay with the application.
"""

from typing import Callable

from fastapi import WebSocket, WebSocketDisconnect

from wsschema.bases.models import ReceiveOutcome
from wsschema.logger import get_logger

log = get_logger(__name__)


async def pump(
    ws: WebSocket, receiver: Callable[[str], ReceiveOutcome]
) -> int:
    """
    Feed every text frame from an accepted WebSocket into `receiver` until the
    peer disconnects.

    Args:
        ws:       an accepted FastAPI WebSocket
        receiver: usually a `Receiver` built by `WsSchema.receiver(...)`

    Returns:
        The number of frames handed to the receiver.
    """
    frames = 0
    try:
        async for text in ws.iter_text():
            frames += 1
            outcome = receiver(text)
            if not outcome.ok:
                log.debug(f"Frame {frames} not dispatched: {outcome.value}")
    except WebSocketDisconnect:
        pass
    log.debug(f"WebSocket pump finished after {frames} frame(s)")
    return frames
