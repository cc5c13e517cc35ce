from .card_source import HttpCardSource
from .catalog_cache import CatalogCache
from .query_service import normalize, list_facets, search_by_name, filter_cards, parse_cost_filter

__all__ = [
    "HttpCardSource",
    "CatalogCache",
    "normalize",
    "list_facets",
    "search_by_name",
    "filter_cards",
    "parse_cost_filter",
]
