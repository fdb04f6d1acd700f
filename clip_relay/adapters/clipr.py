"""Clip resolver backed by the clipr.xyz grabclip API (aiohttp-based)."""

import asyncio
import json
from typing import Optional

import aiohttp

from clip_relay.adapters.http_session import session_scope
from clip_relay.config import DEFAULT_RESOLVER_URL
from clip_relay.domain.errors import ResolutionError
from clip_relay.domain.models import ResolvedClip

REQUEST_HEADERS = {
    "x-requested-with": "XMLHttpRequest",
    "content-type": "application/json",
}


def normalize_download_url(raw: str) -> str:
    """Qualify a scheme-relative URL with https. Returns "" if not absolute."""
    if raw.startswith("//"):
        return "https:" + raw
    scheme, sep, rest = raw.partition("://")
    if sep and scheme and rest:
        return raw
    return ""


def _text_field(data: dict, key: str, url: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ResolutionError(f"{key} is not a string: {value!r}", url=url)
    return value


class CliprResolver:
    """Resolves a Twitch clip page URL to a direct video URL.

    One POST per clip, no retry.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_RESOLVER_URL,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self._api_url = api_url
        self._session = session

    async def resolve(self, url: str) -> ResolvedClip:
        body = json.dumps({"clip_url": url})
        try:
            async with session_scope(self._session) as session:
                async with session.post(self._api_url, data=body, headers=REQUEST_HEADERS) as resp:
                    if resp.status >= 400:
                        text = await resp.text()
                        raise ResolutionError(
                            f"clip API failed (HTTP {resp.status}): {text[:200]}", url=url
                        )
                    try:
                        data = await resp.json(content_type=None)
                    except ValueError as e:
                        raise ResolutionError(f"json decode: {e}", url=url) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ResolutionError(f"http post: {e}", url=url) from e

        if not isinstance(data, dict):
            raise ResolutionError(f"unexpected response: {str(data)[:200]}", url=url)

        raw = data.get("download_url")
        if raw is not None and not isinstance(raw, str):
            raise ResolutionError(f"download_url is not a string: {raw!r}", url=url)
        if not raw:
            raise ResolutionError("empty url", url=url)

        download_url = normalize_download_url(raw)
        if not download_url:
            raise ResolutionError(f"download url is not absolute: {raw!r}", url=url)

        return ResolvedClip(
            title=_text_field(data, "title", url),
            broadcaster=_text_field(data, "broadcaster", url),
            download_url=download_url,
        )
