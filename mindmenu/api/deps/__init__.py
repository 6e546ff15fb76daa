"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_chat_history_service,
    get_chatbot_service,
    get_query_service,
    get_restaurant_service,
    get_service_cache,
    get_snapshot_service,
)

__all__ = [
    "ServiceCache",
    "get_chat_history_service",
    "get_chatbot_service",
    "get_query_service",
    "get_restaurant_service",
    "get_service_cache",
    "get_snapshot_service",
]
