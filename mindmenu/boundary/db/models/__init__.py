"""
Database models package.

Exports:
  - RestaurantModel, BranchModel: Catalog entities
  - ChatbotModel, ChatbotStatus: Chatbot indexing lifecycle
  - MenuSnapshotModel: Knowledge document versions
  - ChatHistoryModel: Conversation turns

Dependencies: sqlalchemy, mindmenu.boundary.db.base
System role: Database model definitions for domain entities
"""

from mindmenu.boundary.db.models.branch_model import BranchModel
from mindmenu.boundary.db.models.chat_history_model import ChatHistoryModel
from mindmenu.boundary.db.models.chatbot_model import ChatbotModel, ChatbotStatus
from mindmenu.boundary.db.models.menu_snapshot_model import MenuSnapshotModel
from mindmenu.boundary.db.models.restaurant_model import RestaurantModel

__all__ = [
    "BranchModel",
    "ChatHistoryModel",
    "ChatbotModel",
    "ChatbotStatus",
    "MenuSnapshotModel",
    "RestaurantModel",
]
