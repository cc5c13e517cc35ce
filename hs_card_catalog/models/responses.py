"""
Response models for the catalog API.
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class CardFacets(BaseModel):
    """Distinct values used to populate the filter form"""
    sets: List[str] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list)
    classes: List[str] = Field(default_factory=list)


class CatalogStats(BaseModel):
    """Refresh bookkeeping for the in-memory catalog"""
    card_count: int = 0
    refreshing: bool = False
    last_refreshed_at: Optional[datetime] = None
    last_error: Optional[str] = None
    refresh_count: int = Field(0, description="Successful refreshes")
    failure_count: int = Field(0, description="Refreshes that left the snapshot untouched")
    skipped_count: int = Field(0, description="Refreshes skipped because one was in flight")


class HealthResponse(BaseModel):
    status: str
    catalog_ready: bool
    card_count: int
