"""Port interfaces (Hexagonal Architecture)."""

from clip_relay.ports.inbound import InboundHandler, IncomingMessage
from clip_relay.ports.outbound import (
    ClipResolverPort,
    PayloadFetcherPort,
    PostResult,
    TextPublisherPort,
    VideoPublisherPort,
)

__all__ = [
    "InboundHandler",
    "IncomingMessage",
    "ClipResolverPort",
    "PayloadFetcherPort",
    "PostResult",
    "TextPublisherPort",
    "VideoPublisherPort",
]
