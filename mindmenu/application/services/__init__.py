"""Service orchestrators."""

from .chat_history_service import ChatHistoryService
from .chatbot_service import ChatbotService
from .indexing_runner import IndexingJobRunner
from .query_service import QueryService
from .restaurant_service import RestaurantService
from .snapshot_service import SnapshotService

__all__ = [
    "ChatHistoryService",
    "ChatbotService",
    "IndexingJobRunner",
    "QueryService",
    "RestaurantService",
    "SnapshotService",
]
