"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - RestaurantModel, BranchModel, ChatbotModel, MenuSnapshotModel, ChatHistoryModel
  - *_crud: CRUD operation singletons

Dependencies: sqlalchemy, mindmenu.configs
System role: Relational persistence for catalog, chatbots and chat history
"""

from mindmenu.boundary.db.base import Base, TimestampMixin, UUIDMixin
from mindmenu.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from mindmenu.boundary.db.models import (
    BranchModel,
    ChatbotModel,
    ChatbotStatus,
    ChatHistoryModel,
    MenuSnapshotModel,
    RestaurantModel,
)
from mindmenu.boundary.db.CRUD import (
    branch_crud,
    chat_history_crud,
    chatbot_crud,
    menu_snapshot_crud,
    restaurant_crud,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "BranchModel",
    "ChatbotModel",
    "ChatbotStatus",
    "ChatHistoryModel",
    "MenuSnapshotModel",
    "RestaurantModel",
    "branch_crud",
    "chat_history_crud",
    "chatbot_crud",
    "menu_snapshot_crud",
    "restaurant_crud",
]
