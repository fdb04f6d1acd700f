"""Discord adapter — bridges discord.Client to the relay handler.

Converts discord.Message -> IncomingMessage and hands it to whatever
InboundHandler is registered. The handler never sees discord types.
"""

import sys
from typing import Optional

import discord

from clip_relay.ports.inbound import InboundHandler, IncomingMessage


def _log(msg: str):
    print(msg, file=sys.stderr)


def to_incoming(message: discord.Message) -> IncomingMessage:
    """Convert a Discord message to platform-agnostic IncomingMessage."""
    return IncomingMessage(
        content=message.content,
        channel_id=message.channel.id,
        author_id=message.author.id,
        author_name=message.author.name,
    )


class ClipRelayBot(discord.Client):
    """Inbound event source: one handler call per message-create event."""

    def __init__(self, handler: Optional[InboundHandler] = None, **discord_kwargs):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents, **discord_kwargs)
        self._handler = handler

    def register(self, handler: InboundHandler) -> None:
        self._handler = handler

    @property
    def self_id(self) -> Optional[int]:
        return self.user.id if self.user else None

    async def on_ready(self):
        _log(f"[clip-relay] discord logged in as {self.user}")

    async def on_message(self, message: discord.Message):
        # Ignore own messages
        if not self.user or message.author == self.user:
            return
        if self._handler is None:
            return

        try:
            await self._handler.handle(to_incoming(message))
        except Exception as e:
            _log(f"[clip-relay] handler error in ch={message.channel.id}: {e!r}")
