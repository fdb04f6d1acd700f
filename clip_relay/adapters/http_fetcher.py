"""Payload fetcher — streams a video into a scoped temporary file."""

import asyncio
import os
import sys
import tempfile
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import aiohttp

from clip_relay.adapters.http_session import session_scope
from clip_relay.domain.errors import FetchError
from clip_relay.domain.models import TemporaryPayload

TEMP_PREFIX = "twitch-clip."


def _log(msg: str):
    print(msg, file=sys.stderr)


def _finish(handle) -> int:
    handle.flush()
    handle.seek(0)
    size = os.fstat(handle.fileno()).st_size
    handle.close()
    return size


class PayloadFetcher:
    """Downloads a video with a single GET.

    `fetch()` is an async context manager: the temp file exists only inside
    the `async with` block and is removed on exit, success or failure.
    """

    CHUNK_SIZE = 64 * 1024

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        temp_dir: Optional[str] = None,
    ):
        self._session = session
        self._temp_dir = temp_dir

    async def _download(self, url: str, handle) -> None:
        try:
            async with session_scope(self._session) as session:
                async with session.get(url) as resp:
                    if resp.status >= 400:
                        raise FetchError(f"download failed (HTTP {resp.status})", url=url)
                    async for chunk in resp.content.iter_chunked(self.CHUNK_SIZE):
                        await asyncio.to_thread(handle.write, chunk)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(f"download: {e}", url=url) from e
        except OSError as e:
            raise FetchError(f"write temp file: {e}", url=url) from e

    @asynccontextmanager
    async def fetch(self, url: str) -> AsyncIterator[TemporaryPayload]:
        try:
            handle = await asyncio.to_thread(
                tempfile.NamedTemporaryFile,
                prefix=TEMP_PREFIX,
                dir=self._temp_dir,
                delete=False,
            )
        except OSError as e:
            raise FetchError(f"create temp file: {e}", url=url) from e

        try:
            await self._download(url, handle)
            try:
                size = await asyncio.to_thread(_finish, handle)
            except OSError as e:
                raise FetchError(f"file stat: {e}", url=url) from e

            if size == 0:
                raise FetchError("empty payload", url=url)

            _log(f"[clip-relay] file size {size}")
            yield TemporaryPayload(path=handle.name, size=size)
        finally:
            handle.close()
            try:
                os.remove(handle.name)
            except FileNotFoundError:
                pass
