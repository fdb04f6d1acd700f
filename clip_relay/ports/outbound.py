"""Outbound ports — interfaces for external system adapters."""

from dataclasses import dataclass
from typing import AsyncContextManager, Optional, Protocol, runtime_checkable

from clip_relay.domain.models import ResolvedClip, TemporaryPayload


@dataclass
class PostResult:
    """Unified result type for outbound chat posts."""

    success: bool
    post_id: Optional[str] = None
    chat_id: Optional[str] = None
    permalink: Optional[str] = None
    text: Optional[str] = None
    error: Optional[str] = None


@runtime_checkable
class ClipResolverPort(Protocol):
    """Turns a clip page URL into a direct download URL plus metadata."""

    async def resolve(self, url: str) -> ResolvedClip: ...


@runtime_checkable
class PayloadFetcherPort(Protocol):
    """Downloads a video into a scoped temporary file."""

    def fetch(self, url: str) -> AsyncContextManager[TemporaryPayload]: ...


@runtime_checkable
class VideoPublisherPort(Protocol):
    """Uploads a video file with a caption."""

    async def send_video(
        self,
        payload: TemporaryPayload,
        filename: str,
        caption: str,
        channel_id: Optional[int] = None,
    ) -> PostResult: ...


@runtime_checkable
class TextPublisherPort(Protocol):
    """Sends a plain text message to a channel."""

    async def send_text(self, channel_id: int, text: str) -> PostResult: ...
