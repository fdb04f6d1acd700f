"""Strict URL extraction and clip-domain filtering.

Pure Python, no framework dependencies.
"""

import re
from typing import Iterable, Iterator, List

# Scheme is mandatory: "twitch.tv/foo" alone is not a URL here.
URL_RE = re.compile(r"""\b[a-zA-Z][a-zA-Z0-9+.\-]*://[^\s<>"'`|]+""")

_TRAILING_PUNCT = ".,:;!?*'\""
_CLOSING = {")": "(", "]": "[", "}": "{"}


def _trim(url: str) -> str:
    """Drop sentence punctuation and unbalanced closing brackets from the tail."""
    while url:
        last = url[-1]
        if last in _TRAILING_PUNCT:
            url = url[:-1]
        elif last in _CLOSING and url.count(last) > url.count(_CLOSING[last]):
            url = url[:-1]
        else:
            break
    return url


def iter_urls(text: str) -> Iterator[str]:
    """Yield scheme-qualified URLs in order of first appearance."""
    for match in URL_RE.finditer(text):
        url = _trim(match.group(0))
        _, _, rest = url.partition("://")
        if rest:
            yield url


def extract_urls(text: str) -> List[str]:
    return list(iter_urls(text))


def filter_clip_urls(urls: Iterable[str], domain: str) -> List[str]:
    """Keep URLs containing the clip domain marker. Order and duplicates are kept."""
    return [url for url in urls if domain in url]


def find_clip_urls(text: str, domain: str) -> List[str]:
    return filter_clip_urls(iter_urls(text), domain)
