"""
HTTP card source for the HearthstoneJSON collectible feed.
"""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from ..exceptions import FetchFailure
from ..interfaces.card_source import ICardSource
from ..models.card import Card

logger = logging.getLogger(__name__)


class HttpCardSource(ICardSource):
    """
    Downloads the card catalog as a JSON array over HTTP.

    A fresh AsyncClient is opened per fetch; refreshes are rare enough that
    holding a connection pool open between them buys nothing.
    """

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            url: Location of the JSON card array
            timeout: Seconds before the request counts as failed
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.url = url
        self.timeout = timeout
        self.__transport = transport

    async def fetch_cards(self) -> List[Card]:
        logger.debug(f"Fetching card catalog from {self.url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self.__transport
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                payload = response.json()
        except httpx.InvalidURL as e:
            raise FetchFailure(f"Invalid catalog URL {self.url!r}: {e}") from e
        except httpx.TimeoutException as e:
            raise FetchFailure(f"Timed out after {self.timeout}s fetching {self.url}") from e
        except httpx.HTTPStatusError as e:
            raise FetchFailure(f"Upstream returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FetchFailure(f"Request failed: {e}") from e
        except ValueError as e:
            raise FetchFailure(f"Response is not valid JSON: {e}") from e

        return self._parse_cards(payload)

    @staticmethod
    def _parse_cards(payload) -> List[Card]:
        if not isinstance(payload, list):
            raise FetchFailure(f"Expected a JSON array of cards, got {type(payload).__name__}")

        try:
            return [Card.model_validate(item) for item in payload]
        except ValidationError as e:
            raise FetchFailure(f"Malformed card in payload: {e.error_count()} validation error(s)") from e
