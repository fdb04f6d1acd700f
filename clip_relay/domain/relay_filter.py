"""Message filter — decides whether a message is a relay command."""

from typing import Optional

from clip_relay.ports.inbound import IncomingMessage


def is_command(content: str, prefix: str) -> bool:
    """True when the text starts with the command token followed by a space."""
    return content.startswith(prefix + " ")


def should_relay(msg: IncomingMessage, bot_user_id: Optional[int], prefix: str) -> bool:
    # Loop prevention: never react to our own posts.
    if bot_user_id is not None and msg.author_id == bot_user_id:
        return False
    return is_command(msg.content, prefix)
