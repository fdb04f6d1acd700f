"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ResolvedClip:
    """Clip metadata returned by the resolution API."""

    title: str
    broadcaster: str
    download_url: str  # absolute, scheme-qualified


@dataclass
class TemporaryPayload:
    """Downloaded video bytes on local disk, owned by one relay attempt."""

    path: str
    size: int


@dataclass
class RelayOutcome:
    """What happened to one candidate URL of a message."""

    url: str
    stage: str  # "resolve" | "fetch" | "publish" | "crosspost" | "done"
    success: bool
    permalink: Optional[str] = None
    error: Optional[str] = None
