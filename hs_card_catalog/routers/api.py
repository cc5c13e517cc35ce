from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from typing import Optional

from ..models.requests import FilterCriteria
from ..models.responses import CardFacets, CatalogStats
from ..services.catalog_cache import CatalogCache
from ..services.query_service import filter_cards, list_facets
from .dependencies import get_catalog


router = APIRouter(tags=["cards"])


@router.get("/api/cards/info", response_model=CardFacets)
async def get_card_info(catalog: CatalogCache = Depends(get_catalog)) -> CardFacets:
    """
    Sets, types and classes for populating the filter options

    Returns:
        CardFacets with each list sorted ascending
    """
    return list_facets(catalog.current_snapshot())


@router.get("/cards/filter")
async def filter_catalog(
    set_: Optional[str] = Query(None, alias="set"),
    type_: Optional[str] = Query(None, alias="type"),
    class_name: Optional[str] = Query(None, alias="className"),
    cost: Optional[str] = Query(None),
    catalog: CatalogCache = Depends(get_catalog)
) -> JSONResponse:
    """
    Filter cards on several criteria

    Args:
        set_: Card set
        type_: Card type
        class_name: Card class
        cost: Exact cost, or "10+"

    Returns:
        JSON array of matching cards in upstream form (may be empty)
    """
    criteria = FilterCriteria(set=set_, type=type_, class_name=class_name, cost=cost)
    cards = filter_cards(catalog.current_snapshot(), criteria)
    return JSONResponse([card.to_wire() for card in cards])


@router.get("/api/cards/status", response_model=CatalogStats)
async def get_catalog_status(catalog: CatalogCache = Depends(get_catalog)) -> CatalogStats:
    """Refresh statistics for the in-memory catalog"""
    return catalog.get_stats()
