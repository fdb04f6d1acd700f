"""Configuration loaded from the environment (and .env)."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from clip_relay.domain.errors import ConfigError

load_dotenv()

SUPPORTED_RELAY_MODES = ("telegram", "discord")

DEFAULT_COMMAND_PREFIX = "-archive"
DEFAULT_CLIP_DOMAIN = "twitch.tv"
DEFAULT_RESOLVER_URL = "https://clipr.xyz/api/grabclip"
DEFAULT_CAPTION_LIMIT = 1024


@dataclass
class DiscordConfig:
    token: str = ""


@dataclass
class TelegramConfig:
    token: str = ""
    chat_id: int = 0


@dataclass
class RelayConfig:
    command_prefix: str = DEFAULT_COMMAND_PREFIX
    clip_domain: str = DEFAULT_CLIP_DOMAIN
    resolver_url: str = DEFAULT_RESOLVER_URL
    caption_limit: int = DEFAULT_CAPTION_LIMIT


@dataclass
class AppConfig:
    """Typed configuration for the relay process."""

    mode: str = "telegram"
    discord: DiscordConfig = field(default_factory=DiscordConfig)
    telegram: TelegramConfig = field(default_factory=TelegramConfig)
    relay: RelayConfig = field(default_factory=RelayConfig)

    @property
    def cross_post(self) -> bool:
        return self.mode == "telegram"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Create AppConfig from environment variables.

        Raises ConfigError naming the first missing or malformed variable.
        """
        if env is None:
            env = os.environ

        mode = env.get("RELAY_MODE", "telegram").strip().lower() or "telegram"
        if mode not in SUPPORTED_RELAY_MODES:
            raise ConfigError(
                f"RELAY_MODE={mode!r} is not one of {', '.join(SUPPORTED_RELAY_MODES)}"
            )

        discord = DiscordConfig(token=_require(env, "DISCORD_TOKEN"))

        telegram = TelegramConfig()
        if mode == "telegram":
            telegram = TelegramConfig(
                token=_require(env, "TELEGRAM_TOKEN"),
                chat_id=_require_int(env, "TELEGRAM_CHAT"),
            )

        caption_limit = DEFAULT_CAPTION_LIMIT
        if env.get("CAPTION_LIMIT", "").strip():
            caption_limit = _require_int(env, "CAPTION_LIMIT")
            if caption_limit <= 0:
                raise ConfigError(f"CAPTION_LIMIT must be positive, got {caption_limit}")

        relay = RelayConfig(
            command_prefix=env.get("COMMAND_PREFIX", "").strip() or DEFAULT_COMMAND_PREFIX,
            clip_domain=env.get("CLIP_DOMAIN", "").strip() or DEFAULT_CLIP_DOMAIN,
            resolver_url=env.get("CLIP_RESOLVER_URL", "").strip() or DEFAULT_RESOLVER_URL,
            caption_limit=caption_limit,
        )
        return cls(mode=mode, discord=discord, telegram=telegram, relay=relay)


def _require(env: Mapping[str, str], key: str) -> str:
    value = env.get(key, "").strip()
    if not value:
        raise ConfigError(f"no env {key!r} specified")
    return value


def _require_int(env: Mapping[str, str], key: str) -> int:
    value = _require(env, key)
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"env {key!r} must be an integer, got {value!r}") from None
