"""API routers."""

from .branches import router as branches_router
from .chatbots import router as chatbots_router
from .health import router as health_router
from .history import router as history_router
from .query import router as query_router
from .restaurants import router as restaurants_router

__all__ = [
    "branches_router",
    "chatbots_router",
    "health_router",
    "history_router",
    "query_router",
    "restaurants_router",
]
