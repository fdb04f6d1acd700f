"""Tests for the launcher — config failures and shutdown."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from clip_relay import launcher
from clip_relay.config import AppConfig


class TestMain:
    def test_config_error_exits_nonzero(self, monkeypatch, capsys):
        monkeypatch.delenv("DISCORD_TOKEN", raising=False)
        with patch("clip_relay.launcher.asyncio.run") as run:
            assert launcher.main() == 1
        run.assert_not_called()
        assert "DISCORD_TOKEN" in capsys.readouterr().err


class FakeContext:
    def __init__(self, config):
        self.config = config
        self.discord = MagicMock()
        self.started = asyncio.Event()
        self.stopped = asyncio.Event()

        async def start(token):
            self.started.set()
            await self.stopped.wait()

        async def close():
            self.stopped.set()

        self.discord.start = start
        self.discord.close = AsyncMock(side_effect=close)
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.closed = True


class TestServe:
    @pytest.mark.asyncio
    async def test_stops_on_signal(self):
        config = AppConfig.from_env({"DISCORD_TOKEN": "t", "RELAY_MODE": "discord"})
        stop = asyncio.Event()
        contexts = []

        def make_context(cfg):
            ctx = FakeContext(cfg)
            contexts.append(ctx)
            return ctx

        with patch("clip_relay.launcher.RelayContext", make_context):
            task = asyncio.create_task(launcher.serve(config, stop=stop))
            await asyncio.sleep(0)
            await contexts[0].started.wait()
            stop.set()
            code = await task

        assert code == 0
        contexts[0].discord.close.assert_awaited()
        assert contexts[0].closed is True

    @pytest.mark.asyncio
    async def test_discord_crash(self):
        config = AppConfig.from_env({"DISCORD_TOKEN": "t", "RELAY_MODE": "discord"})

        def make_context(cfg):
            ctx = FakeContext(cfg)

            async def start(token):
                raise RuntimeError("Improper token has been passed.")

            ctx.discord.start = start
            return ctx

        with patch("clip_relay.launcher.RelayContext", make_context):
            code = await launcher.serve(config, stop=asyncio.Event())

        assert code == 1
