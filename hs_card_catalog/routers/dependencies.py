from fastapi import Request

from ..services.catalog_cache import CatalogCache


def get_catalog(request: Request) -> CatalogCache:
    """Catalog cache owned by the running application (set up in create_app)"""
    return request.app.state.catalog
