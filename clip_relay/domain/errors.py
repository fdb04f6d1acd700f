"""Error taxonomy for the relay pipeline."""

from typing import Optional


class RelayError(Exception):
    """Base class for relay failures that skip a single clip URL."""

    stage = "relay"

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class ConfigError(Exception):
    """Raised when a required setting is missing or malformed. Fatal at startup."""


class ResolutionError(RelayError):
    """Clip API unreachable, undecodable, or returned no download URL."""

    stage = "resolve"


class FetchError(RelayError):
    """Download transport failure or I/O failure writing the temp file."""

    stage = "fetch"


class PublishError(RelayError):
    """Destination platform rejected or failed the upload/send."""

    stage = "publish"

    def __init__(self, message: str, url: Optional[str] = None, stage: str = "publish"):
        super().__init__(message, url=url)
        self.stage = stage
