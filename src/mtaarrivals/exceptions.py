"""Exceptions raised by mtaarrivals."""


class MTAArrivalsError(Exception):
    """Base class for all mtaarrivals errors."""


class DirectoryLoadError(MTAArrivalsError):
    """The station table could not be read or parsed."""


class FeedError(MTAArrivalsError):
    """The realtime feed could not be retrieved or decoded."""


class NetworkError(FeedError):
    """Transport failure or timeout while fetching the feed."""


class UnexpectedStatus(FeedError):
    """The feed endpoint answered with a non-success status."""

    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        self.url = url
        super().__init__(f"unexpected status code: {status_code}")


class DecodeError(FeedError):
    """The payload is not a valid GTFS-Realtime FeedMessage."""


class NoMatchError(MTAArrivalsError):
    """A station query matched no upcoming arrivals."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"No arrivals found for station: {query}")


class UsageError(MTAArrivalsError):
    """Invalid combination of options."""
