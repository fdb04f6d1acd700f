"""Telegram video publisher using python-telegram-bot."""

import asyncio
from pathlib import Path
from typing import Optional

from telegram import Bot, Message
from telegram.error import TelegramError

from clip_relay.domain.models import TemporaryPayload
from clip_relay.ports.outbound import PostResult

TELEGRAM_LINK_BASE = "https://t.me"


def post_link(username: Optional[str], chat_id: int, message_id: int) -> str:
    """Public t.me link for a message; private chats use the /c/ form."""
    if username:
        return f"{TELEGRAM_LINK_BASE}/{username}/{message_id}"
    internal = str(chat_id)
    if internal.startswith("-100"):
        internal = internal[4:]
    return f"{TELEGRAM_LINK_BASE}/c/{internal.lstrip('-')}/{message_id}"


def message_link(message: Message) -> str:
    return post_link(message.chat.username, message.chat.id, message.message_id)


class TelegramVideoPublisher:
    """Uploads relayed clips into one Telegram chat."""

    def __init__(self, bot: Bot, chat_id: int):
        self._bot = bot
        self._chat_id = chat_id

    async def send_video(
        self,
        payload: TemporaryPayload,
        filename: str,
        caption: str,
        channel_id: Optional[int] = None,
    ) -> PostResult:
        chat_id = channel_id if channel_id is not None else self._chat_id
        try:
            # python-telegram-bot reads file objects synchronously
            video = await asyncio.to_thread(Path(payload.path).read_bytes)
            message = await self._bot.send_video(
                chat_id=chat_id,
                video=video,
                filename=filename,
                caption=caption,
                supports_streaming=True,
            )
        except (TelegramError, OSError) as e:
            return PostResult(success=False, chat_id=str(chat_id), text=caption, error=str(e))

        return PostResult(
            success=True,
            post_id=str(message.message_id),
            chat_id=str(message.chat.id),
            permalink=message_link(message),
            text=caption,
        )
