"""RelayContext — process-wide session handles with an explicit lifecycle.

start() before serving, close() on shutdown. Also an async context manager.
"""

import sys
from typing import Optional

import aiohttp
from telegram import Bot

from clip_relay.adapters.clipr import CliprResolver
from clip_relay.adapters.discord import ClipRelayBot, DiscordPublisher
from clip_relay.adapters.http_fetcher import PayloadFetcher
from clip_relay.adapters.telegram_publisher import TelegramVideoPublisher
from clip_relay.config import AppConfig
from clip_relay.relay import ClipRelay


def _log(msg: str):
    print(msg, file=sys.stderr)


class RelayContext:
    """Owns the aiohttp session, the Telegram bot and the Discord client."""

    def __init__(self, config: AppConfig, discord_client: Optional[ClipRelayBot] = None):
        self.config = config
        self.discord = discord_client or ClipRelayBot()
        self.http: Optional[aiohttp.ClientSession] = None
        self.telegram: Optional[Bot] = None
        self.relay: Optional[ClipRelay] = None

    async def start(self) -> ClipRelay:
        self.http = aiohttp.ClientSession()
        if self.config.cross_post:
            self.telegram = Bot(self.config.telegram.token)
            await self.telegram.initialize()
            _log(f"[clip-relay] telegram connected as @{self.telegram.username}")

        self.relay = self.build_relay()
        self.discord.register(self.relay)
        return self.relay

    def build_relay(self) -> ClipRelay:
        relay_cfg = self.config.relay
        discord_publisher = DiscordPublisher(self.discord)
        if self.config.cross_post:
            video_publisher = TelegramVideoPublisher(self.telegram, self.config.telegram.chat_id)
        else:
            video_publisher = discord_publisher

        return ClipRelay(
            resolver=CliprResolver(relay_cfg.resolver_url, session=self.http),
            fetcher=PayloadFetcher(session=self.http),
            video_publisher=video_publisher,
            text_publisher=discord_publisher,
            command_prefix=relay_cfg.command_prefix,
            clip_domain=relay_cfg.clip_domain,
            caption_limit=relay_cfg.caption_limit,
            cross_post=self.config.cross_post,
            self_id=lambda: self.discord.self_id,
        )

    async def close(self) -> None:
        if not self.discord.is_closed():
            await self.discord.close()
        if self.telegram is not None:
            await self.telegram.shutdown()
            self.telegram = None
        if self.http is not None and not self.http.closed:
            await self.http.close()
        self.http = None

    async def __aenter__(self) -> "RelayContext":
        try:
            await self.start()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()
