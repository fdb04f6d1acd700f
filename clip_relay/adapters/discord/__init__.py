"""Discord inbound adapter and publishers."""

from clip_relay.adapters.discord.adapter import ClipRelayBot, to_incoming
from clip_relay.adapters.discord.publisher import DiscordPublisher, message_link

__all__ = ["ClipRelayBot", "DiscordPublisher", "message_link", "to_incoming"]
