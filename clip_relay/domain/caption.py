"""Caption and link-back text formatting."""

CAPTION_LIMIT = 1024


def string_limit(text: str, limit: int) -> str:
    """Hard cut at `limit` characters, no ellipsis."""
    if len(text) > limit:
        return text[:limit]
    return text


def build_caption(broadcaster: str, title: str, limit: int = CAPTION_LIMIT) -> str:
    return string_limit(f"{broadcaster}: {title}", limit)


def build_filename(broadcaster: str, title: str) -> str:
    return f"{broadcaster}: {title}.mp4"


def build_link_message(title: str, broadcaster: str, permalink: str) -> str:
    """Back-reference posted to the originating channel after a cross-post."""
    return f"{title}\n{broadcaster}\n{permalink}"
