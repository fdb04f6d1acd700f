"""Tests for the typed AppConfig dataclass."""

import pytest

from clip_relay.config import (
    DEFAULT_CAPTION_LIMIT,
    DEFAULT_CLIP_DOMAIN,
    DEFAULT_COMMAND_PREFIX,
    DEFAULT_RESOLVER_URL,
    AppConfig,
    DiscordConfig,
    RelayConfig,
    TelegramConfig,
)
from clip_relay.domain.errors import ConfigError

FULL_ENV = {
    "DISCORD_TOKEN": "discord-tok",
    "TELEGRAM_TOKEN": "123:telegram-tok",
    "TELEGRAM_CHAT": "-1001234567890",
}


class TestRelayConfig:
    def test_defaults(self):
        c = RelayConfig()
        assert c.command_prefix == "-archive"
        assert c.clip_domain == "twitch.tv"
        assert c.resolver_url == "https://clipr.xyz/api/grabclip"
        assert c.caption_limit == 1024


class TestAppConfig:
    def test_defaults(self):
        c = AppConfig()
        assert c.mode == "telegram"
        assert c.cross_post is True
        assert isinstance(c.discord, DiscordConfig)
        assert isinstance(c.telegram, TelegramConfig)
        assert isinstance(c.relay, RelayConfig)

    def test_from_env_full(self):
        c = AppConfig.from_env(FULL_ENV)
        assert c.discord.token == "discord-tok"
        assert c.telegram.token == "123:telegram-tok"
        assert c.telegram.chat_id == -1001234567890
        assert c.relay.command_prefix == DEFAULT_COMMAND_PREFIX
        assert c.relay.clip_domain == DEFAULT_CLIP_DOMAIN
        assert c.relay.resolver_url == DEFAULT_RESOLVER_URL
        assert c.relay.caption_limit == DEFAULT_CAPTION_LIMIT

    @pytest.mark.parametrize("missing", ["DISCORD_TOKEN", "TELEGRAM_TOKEN", "TELEGRAM_CHAT"])
    def test_missing_required(self, missing):
        env = {k: v for k, v in FULL_ENV.items() if k != missing}
        with pytest.raises(ConfigError, match=missing):
            AppConfig.from_env(env)

    def test_blank_counts_as_missing(self):
        with pytest.raises(ConfigError, match="DISCORD_TOKEN"):
            AppConfig.from_env({**FULL_ENV, "DISCORD_TOKEN": "   "})

    def test_chat_not_integer(self):
        with pytest.raises(ConfigError, match="TELEGRAM_CHAT"):
            AppConfig.from_env({**FULL_ENV, "TELEGRAM_CHAT": "@clipchan"})

    def test_discord_mode_needs_no_telegram(self):
        c = AppConfig.from_env({"DISCORD_TOKEN": "tok", "RELAY_MODE": "Discord"})
        assert c.mode == "discord"
        assert c.cross_post is False
        assert c.telegram.token == ""

    def test_unknown_mode(self):
        with pytest.raises(ConfigError, match="RELAY_MODE"):
            AppConfig.from_env({**FULL_ENV, "RELAY_MODE": "slack"})

    def test_overrides(self):
        c = AppConfig.from_env({
            **FULL_ENV,
            "COMMAND_PREFIX": "!clip",
            "CLIP_DOMAIN": "clips.twitch.tv",
            "CLIP_RESOLVER_URL": "https://resolver.example/api",
            "CAPTION_LIMIT": "200",
        })
        assert c.relay.command_prefix == "!clip"
        assert c.relay.clip_domain == "clips.twitch.tv"
        assert c.relay.resolver_url == "https://resolver.example/api"
        assert c.relay.caption_limit == 200

    @pytest.mark.parametrize("value", ["0", "-5", "lots"])
    def test_bad_caption_limit(self, value):
        with pytest.raises(ConfigError, match="CAPTION_LIMIT"):
            AppConfig.from_env({**FULL_ENV, "CAPTION_LIMIT": value})

    def test_reads_os_environ(self, monkeypatch):
        for key, value in FULL_ENV.items():
            monkeypatch.setenv(key, value)
        monkeypatch.delenv("RELAY_MODE", raising=False)
        c = AppConfig.from_env()
        assert c.discord.token == "discord-tok"
