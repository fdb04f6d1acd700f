"""Launcher for the clip relay bot."""

import asyncio
import signal
import sys
from typing import Optional

from clip_relay.config import AppConfig
from clip_relay.domain.errors import ConfigError
from clip_relay.infrastructure.context import RelayContext

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _log(msg: str):
    print(msg, file=sys.stderr)


def _install_signal_handlers(stop: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in SHUTDOWN_SIGNALS:
        try:
            loop.add_signal_handler(sig, stop.set)
        except NotImplementedError:
            # Windows event loops have no add_signal_handler
            signal.signal(sig, lambda *_: loop.call_soon_threadsafe(stop.set))


async def serve(config: AppConfig, stop: Optional[asyncio.Event] = None) -> int:
    """Run until a shutdown signal arrives or the Discord client dies."""
    if stop is None:
        stop = asyncio.Event()
        _install_signal_handlers(stop)

    async with RelayContext(config) as ctx:
        _log(f"[clip-relay] relaying in {config.mode} mode, prefix {config.relay.command_prefix!r}")
        bot_task = asyncio.create_task(ctx.discord.start(config.discord.token))
        stop_task = asyncio.create_task(stop.wait())
        done, _ = await asyncio.wait(
            {bot_task, stop_task}, return_when=asyncio.FIRST_COMPLETED
        )

        if stop_task in done:
            _log("[clip-relay] shutdown signal received")
            await ctx.discord.close()
            await asyncio.gather(bot_task, return_exceptions=True)
            return 0

        stop_task.cancel()
        exc = bot_task.exception()
        if exc is not None:
            _log(f"[clip-relay] discord client crashed: {exc!r}")
            return 1
        return 0


def main() -> int:
    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        _log(f"[clip-relay] config error: {e}")
        return 1
    try:
        return asyncio.run(serve(config))
    except Exception as e:
        _log(f"[clip-relay] startup failed: {e!r}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
