"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from mindmenu.boundary.db.CRUD import branch_crud, chatbot_crud

    branch = await branch_crud.get_by_id(db, branch_id)
"""

from mindmenu.boundary.db.CRUD.base_crud import BaseCRUD
from mindmenu.boundary.db.CRUD.branch_crud import BranchCRUD, branch_crud
from mindmenu.boundary.db.CRUD.chat_history_crud import ChatHistoryCRUD, chat_history_crud
from mindmenu.boundary.db.CRUD.chatbot_crud import ChatbotCRUD, chatbot_crud
from mindmenu.boundary.db.CRUD.menu_snapshot_crud import MenuSnapshotCRUD, menu_snapshot_crud
from mindmenu.boundary.db.CRUD.restaurant_crud import RestaurantCRUD, restaurant_crud

__all__ = [
    "BaseCRUD",
    "BranchCRUD",
    "ChatHistoryCRUD",
    "ChatbotCRUD",
    "MenuSnapshotCRUD",
    "RestaurantCRUD",
    "branch_crud",
    "chat_history_crud",
    "chatbot_crud",
    "menu_snapshot_crud",
    "restaurant_crud",
]
