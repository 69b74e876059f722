"""Exception types raised by the site config pipeline."""


class SiteConfigError(Exception):
    """Base class for every pipeline failure."""


class NetworkError(SiteConfigError):
    """A remote resource could not be fetched or read."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class ParseError(SiteConfigError):
    """A structured document does not have the expected shape."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Invalid document {source}: {reason}")
        self.source = source
        self.reason = reason


class EmitError(SiteConfigError):
    """The assembled config could not be serialized or written."""
