"""Infrastructure — process-wide session state."""

from clip_relay.infrastructure.context import RelayContext

__all__ = ["RelayContext"]
