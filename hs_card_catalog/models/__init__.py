from .card import Card, CatalogSnapshot
from .requests import FilterCriteria, COST_TEN_PLUS
from .responses import CardFacets, CatalogStats, HealthResponse

__all__ = [
    "Card",
    "CatalogSnapshot",
    "FilterCriteria",
    "COST_TEN_PLUS",
    "CardFacets",
    "CatalogStats",
    "HealthResponse",
]
