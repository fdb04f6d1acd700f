"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass
class IncomingMessage:
    """Discord/CLI-agnostic message representation."""

    content: str
    channel_id: int
    author_id: int
    author_name: str = ""


@runtime_checkable
class InboundHandler(Protocol):
    """Callback registered against an inbound event source."""

    async def handle(self, msg: IncomingMessage) -> Any: ...
