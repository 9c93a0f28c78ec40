import pytest
from pydantic import BaseModel

from wsschema import WsSchema


class JoinPayload(BaseModel):
    name: str
    room: int


@pytest.fixture
def chat_schema() -> WsSchema:
    """A small chat vocabulary used across the messaging tests."""
    return WsSchema(
        {
            "message": str,
            "join": JoinPayload,
            "heartbeat": int | bool,
            "typing": bool,
        },
        strict=False,
    )
