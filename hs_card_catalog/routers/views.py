"""
HTML pages: home and name search.
"""

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from typing import Optional

from ..exceptions import QueryError
from ..services.catalog_cache import CatalogCache
from ..services.query_service import search_by_name
from ..views import error_page, index_page, render, results_page
from .dependencies import get_catalog

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Home page with the search and filter forms"""
    return HTMLResponse(render(index_page()))


@router.get("/search", response_class=HTMLResponse)
async def search(
    q: Optional[str] = None,
    catalog: CatalogCache = Depends(get_catalog)
) -> HTMLResponse:
    """
    Search for cards by name

    Args:
        q: Search term for the card name

    Returns:
        Results page, or the error page explaining why there are no results
    """
    try:
        cards = search_by_name(catalog.current_snapshot(), q)
    except QueryError as e:
        logger.info(f"Search for {q!r} returned no results: {e.message}")
        return HTMLResponse(render(error_page(e.message)))

    return HTMLResponse(render(results_page(f'Search results for "{q}"', cards, query=q)))
