"""Domain layer — pure Python, no framework dependencies."""

from clip_relay.domain.caption import (
    CAPTION_LIMIT,
    build_caption,
    build_filename,
    build_link_message,
    string_limit,
)
from clip_relay.domain.errors import (
    ConfigError,
    FetchError,
    PublishError,
    RelayError,
    ResolutionError,
)
from clip_relay.domain.models import RelayOutcome, ResolvedClip, TemporaryPayload
from clip_relay.domain.relay_filter import is_command, should_relay
from clip_relay.domain.url_parser import (
    extract_urls,
    filter_clip_urls,
    find_clip_urls,
    iter_urls,
)

__all__ = [
    "CAPTION_LIMIT",
    "build_caption",
    "build_filename",
    "build_link_message",
    "string_limit",
    "ConfigError",
    "FetchError",
    "PublishError",
    "RelayError",
    "ResolutionError",
    "RelayOutcome",
    "ResolvedClip",
    "TemporaryPayload",
    "is_command",
    "should_relay",
    "extract_urls",
    "filter_clip_urls",
    "find_clip_urls",
    "iter_urls",
]
