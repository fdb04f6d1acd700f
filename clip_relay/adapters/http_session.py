"""Shared aiohttp session handling for outbound HTTP adapters."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import aiohttp


@asynccontextmanager
async def session_scope(
    session: Optional[aiohttp.ClientSession],
) -> AsyncIterator[aiohttp.ClientSession]:
    """Yield the shared session, or a throwaway one when none was injected."""
    if session is not None:
        yield session
        return
    async with aiohttp.ClientSession() as owned:
        yield owned
