"""
Card source interface - contract for anything that can produce the full catalog.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.card import Card


class ICardSource(ABC):
    """
    Produces the complete list of cards in one call.

    Implementations must report every failure (network, status, decoding)
    as FetchFailure so the catalog cache has a single error to handle.
    """

    @abstractmethod
    async def fetch_cards(self) -> List[Card]:
        """
        Fetch the full card catalog.

        Returns:
            Cards in upstream order

        Raises:
            FetchFailure: If the catalog could not be fetched or decoded
        """
        pass
