"""
In-memory card catalog.

Holds exactly one snapshot at a time. A refresh builds the replacement
completely before publishing it with a single assignment, so readers see
either the old catalog or the new one and never a partial list.
"""

import logging
from datetime import datetime
from typing import Optional

from ..exceptions import FetchFailure
from ..interfaces.card_source import ICardSource
from ..models.card import CatalogSnapshot
from ..models.responses import CatalogStats

logger = logging.getLogger(__name__)


class CatalogCache:
    """Owns the current catalog snapshot and keeps it fresh from a card source"""

    def __init__(self, source: ICardSource):
        """
        Initialize an empty catalog

        Args:
            source: Where refreshes fetch cards from
        """
        # Private: the published snapshot, replaced wholesale, never mutated
        self.__source = source
        self.__snapshot: CatalogSnapshot = ()
        self.__refreshing = False

        # Public: Statistics
        self.last_refreshed_at: Optional[datetime] = None
        self.last_error: Optional[str] = None
        self.refresh_count = 0
        self.failure_count = 0
        self.skipped_count = 0

    @property
    def refreshing(self) -> bool:
        return self.__refreshing

    def current_snapshot(self) -> CatalogSnapshot:
        """
        Get the latest snapshot (Public API)

        Returns:
            The current cards; empty until the first successful refresh
        """
        return self.__snapshot

    async def refresh(self) -> bool:
        """
        Fetch the catalog and replace the snapshot (Public API)

        Failures are logged and recorded, never raised. A refresh requested
        while another is in flight is skipped.

        Returns:
            True if the snapshot was replaced
        """
        if self.__refreshing:
            self.skipped_count += 1
            logger.warning("Catalog refresh already in progress; skipping")
            return False

        self.__refreshing = True
        try:
            cards = await self.__source.fetch_cards()
        except FetchFailure as e:
            self.failure_count += 1
            self.last_error = str(e)
            logger.error(
                f"Error fetching card data: {e} "
                f"(keeping {len(self.__snapshot):,} cached cards)"
            )
            return False
        except Exception as e:
            self.failure_count += 1
            self.last_error = f"{type(e).__name__}: {e}"
            logger.exception(
                f"Unexpected error fetching card data "
                f"(keeping {len(self.__snapshot):,} cached cards)"
            )
            return False
        finally:
            self.__refreshing = False

        self.__snapshot = tuple(cards)
        self.refresh_count += 1
        self.last_refreshed_at = datetime.now()
        self.last_error = None
        logger.info(f"Card data cached successfully ({len(self.__snapshot):,} cards)")
        return True

    def get_stats(self) -> CatalogStats:
        """Get refresh statistics"""
        return CatalogStats(
            card_count=len(self.__snapshot),
            refreshing=self.__refreshing,
            last_refreshed_at=self.last_refreshed_at,
            last_error=self.last_error,
            refresh_count=self.refresh_count,
            failure_count=self.failure_count,
            skipped_count=self.skipped_count,
        )
