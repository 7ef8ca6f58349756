"""MTA GTFS-Realtime feed fetcher."""

import logging
from typing import List, Optional

import requests
from google.protobuf.message import DecodeError as ProtobufDecodeError
from google.transit import gtfs_realtime_pb2

from .config import MTA_FEED_URL, REQUEST_TIMEOUT_SECONDS
from .exceptions import DecodeError, NetworkError, UnexpectedStatus

logger = logging.getLogger(__name__)


class FeedClient:
    """Fetches and decodes a single GTFS-Realtime feed."""

    def __init__(
        self,
        feed_url: str = MTA_FEED_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the feed client.

        Args:
            feed_url: Full URL of the feed.
            timeout: Request timeout in seconds.
            session: Optional requests session to reuse connections.
        """
        self.feed_url = feed_url
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch(self) -> List[gtfs_realtime_pb2.FeedEntity]:
        """
        Fetch the feed and return its entities.

        No retry is attempted; callers decide whether to try again later.

        Returns:
            List of FeedEntity messages.

        Raises:
            NetworkError: On connection failure or timeout.
            UnexpectedStatus: If the response status is not 200.
            DecodeError: If the payload is not a valid FeedMessage.
        """
        feed = self.decode(self._fetch_payload())
        logger.debug(f"Decoded {len(feed.entity)} entities from {self.feed_url}")
        return list(feed.entity)

    def _fetch_payload(self) -> bytes:
        logger.debug(f"Fetching {self.feed_url}")
        try:
            response = self._session.get(self.feed_url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug(f"Failed to fetch {self.feed_url}: {e}")
            raise NetworkError(f"failed to fetch feed: {e}") from e

        if response.status_code != requests.codes.ok:
            logger.debug(f"Feed {self.feed_url} returned status {response.status_code}")
            raise UnexpectedStatus(response.status_code, self.feed_url)

        return response.content

    @staticmethod
    def decode(payload: bytes) -> gtfs_realtime_pb2.FeedMessage:
        """
        Parse raw protobuf bytes into a FeedMessage.

        Raises:
            DecodeError: If the payload cannot be parsed.
        """
        feed = gtfs_realtime_pb2.FeedMessage()
        try:
            feed.ParseFromString(payload)
        except ProtobufDecodeError as e:
            raise DecodeError(f"failed to unmarshal protobuf: {e}") from e
        return feed

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()
