"""Clip Relay — re-posts Twitch clips from Discord commands to Telegram or Discord."""

from clip_relay.config import AppConfig, __version__
from clip_relay.domain.errors import (
    ConfigError,
    FetchError,
    PublishError,
    RelayError,
    ResolutionError,
)
from clip_relay.ports.inbound import IncomingMessage
from clip_relay.relay import ClipRelay

__all__ = [
    "__version__",
    "AppConfig",
    "ClipRelay",
    "ConfigError",
    "FetchError",
    "IncomingMessage",
    "PublishError",
    "RelayError",
    "ResolutionError",
]
