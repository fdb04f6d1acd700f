"""Discord publishers — text link-back and same-platform video upload."""

from typing import Optional

import discord

from clip_relay.domain.models import TemporaryPayload
from clip_relay.ports.outbound import PostResult

DISCORD_LINK_BASE = "https://discord.com/channels"


def message_link(guild_id: Optional[int], channel_id: int, message_id: int) -> str:
    """Jump link to a message. DMs have no guild and use "@me"."""
    return f"{DISCORD_LINK_BASE}/{guild_id or '@me'}/{channel_id}/{message_id}"


class DiscordPublisher:
    """TextPublisherPort and VideoPublisherPort on top of a discord.Client."""

    def __init__(self, client: discord.Client):
        self._client = client

    async def _channel(self, channel_id: int):
        channel = self._client.get_channel(channel_id)
        if channel is None:
            channel = await self._client.fetch_channel(channel_id)
        return channel

    def _result(self, message: discord.Message, channel_id: int, text: str) -> PostResult:
        guild_id = message.guild.id if message.guild else None
        return PostResult(
            success=True,
            post_id=str(message.id),
            chat_id=str(channel_id),
            permalink=message_link(guild_id, channel_id, message.id),
            text=text,
        )

    async def send_text(self, channel_id: int, text: str) -> PostResult:
        try:
            channel = await self._channel(channel_id)
            message = await channel.send(content=text)
        except discord.DiscordException as e:
            return PostResult(success=False, chat_id=str(channel_id), text=text, error=str(e))
        return self._result(message, channel_id, text)

    async def send_video(
        self,
        payload: TemporaryPayload,
        filename: str,
        caption: str,
        channel_id: Optional[int] = None,
    ) -> PostResult:
        if channel_id is None:
            return PostResult(success=False, text=caption, error="no destination channel")
        try:
            channel = await self._channel(channel_id)
            message = await channel.send(
                content=caption,
                file=discord.File(payload.path, filename=filename),
            )
        except (discord.DiscordException, OSError) as e:
            return PostResult(success=False, chat_id=str(channel_id), text=caption, error=str(e))
        return self._result(message, channel_id, caption)
