"""ClipRelay — the per-message extraction-and-relay pipeline.

No framework dependencies: talks to the outside world only through ports,
so it runs against mock ports in tests.

Per URL: resolve -> fetch -> publish -> [crosspost]. A failure at any stage
is logged and the next URL is attempted. `handle()` never raises.
"""

import sys
from typing import Callable, List, Optional

from clip_relay.domain.caption import (
    CAPTION_LIMIT,
    build_caption,
    build_filename,
    build_link_message,
)
from clip_relay.domain.errors import PublishError, RelayError
from clip_relay.domain.models import RelayOutcome
from clip_relay.domain.relay_filter import should_relay
from clip_relay.domain.url_parser import find_clip_urls
from clip_relay.ports.inbound import IncomingMessage
from clip_relay.ports.outbound import (
    ClipResolverPort,
    PayloadFetcherPort,
    TextPublisherPort,
    VideoPublisherPort,
)


def _log(msg: str):
    print(msg, file=sys.stderr)


class ClipRelay:
    """Relays Twitch clips found in command messages to a destination chat.

    Two configurations:
    - cross_post=True: video goes to the video publisher's own destination,
      then a link-back is sent to the originating channel via text_publisher.
    - cross_post=False: video is uploaded into the originating channel.
    """

    def __init__(
        self,
        resolver: ClipResolverPort,
        fetcher: PayloadFetcherPort,
        video_publisher: VideoPublisherPort,
        text_publisher: Optional[TextPublisherPort] = None,
        command_prefix: str = "-archive",
        clip_domain: str = "twitch.tv",
        caption_limit: int = CAPTION_LIMIT,
        cross_post: bool = True,
        self_id: Optional[Callable[[], Optional[int]]] = None,
    ):
        if cross_post and text_publisher is None:
            raise ValueError("cross_post requires a text_publisher")
        self._resolver = resolver
        self._fetcher = fetcher
        self._video = video_publisher
        self._text = text_publisher
        self.command_prefix = command_prefix
        self.clip_domain = clip_domain
        self.caption_limit = caption_limit
        self.cross_post = cross_post
        self._self_id = self_id

    def candidate_urls(self, msg: IncomingMessage) -> List[str]:
        """Clip URLs this message asks us to relay; empty means do nothing."""
        bot_user_id = self._self_id() if self._self_id else None
        if not should_relay(msg, bot_user_id, self.command_prefix):
            return []
        return find_clip_urls(msg.content, self.clip_domain)

    async def handle(self, msg: IncomingMessage) -> List[RelayOutcome]:
        """Process one inbound message. One outcome per candidate URL, in order."""
        outcomes = []
        for url in self.candidate_urls(msg):
            outcomes.append(await self.relay_url(msg, url))
        return outcomes

    async def relay_url(self, msg: IncomingMessage, url: str) -> RelayOutcome:
        _log(f"[clip-relay] find link for {url} (from {msg.author_name or msg.author_id})")
        stage = "resolve"
        try:
            clip = await self._resolver.resolve(url)

            stage = "fetch"
            _log(f"[clip-relay] download {clip.download_url}")
            async with self._fetcher.fetch(clip.download_url) as payload:
                stage = "publish"
                caption = build_caption(clip.broadcaster, clip.title, self.caption_limit)
                filename = build_filename(clip.broadcaster, clip.title)
                _log("[clip-relay] file send")

                if self.cross_post:
                    result = await self._video.send_video(payload, filename, caption)
                else:
                    result = await self._video.send_video(
                        payload, filename, caption, channel_id=msg.channel_id
                    )
                if not result.success:
                    raise PublishError(f"send video: {result.error}", url=url)

                permalink = result.permalink
                if self.cross_post:
                    stage = "crosspost"
                    link = build_link_message(clip.title, clip.broadcaster, permalink or "")
                    back = await self._text.send_text(msg.channel_id, link)
                    if not back.success:
                        raise PublishError(f"send link: {back.error}", url=url, stage="crosspost")
        except RelayError as e:
            _log(f"[clip-relay] {e.stage} failed: {url}: {type(e).__name__}: {e}")
            return RelayOutcome(url=url, stage=e.stage, success=False, error=str(e))
        except Exception as e:
            _log(f"[clip-relay] {stage} failed: {url}: unexpected {e!r}")
            return RelayOutcome(url=url, stage=stage, success=False, error=str(e))

        _log(f"[clip-relay] finished {url}")
        return RelayOutcome(url=url, stage="done", success=True, permalink=permalink)
