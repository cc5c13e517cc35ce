from .api import router as api_router
from .views import router as views_router

__all__ = ["api_router", "views_router"]
