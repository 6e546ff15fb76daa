"""
API request/response schemas.
"""

from mindmenu.models.chatbot import (
    ChatbotAcceptedResponse,
    ChatbotResponse,
    CreateChatbotRequest,
    DeleteVectorsRequest,
    DeleteVectorsResponse,
    ReindexChatbotRequest,
)
from mindmenu.models.query import (
    ChatHistoryResponse,
    ChatTurnResponse,
    QueryRequest,
    QueryResponse,
    QueryWithHistoryRequest,
)
from mindmenu.models.restaurant import (
    BranchResponse,
    CreateBranchRequest,
    CreateRestaurantRequest,
    RestaurantResponse,
)
from mindmenu.models.snapshot import CreateSnapshotRequest, SnapshotResponse

__all__ = [
    "ChatbotAcceptedResponse",
    "ChatbotResponse",
    "CreateChatbotRequest",
    "DeleteVectorsRequest",
    "DeleteVectorsResponse",
    "ReindexChatbotRequest",
    "ChatHistoryResponse",
    "ChatTurnResponse",
    "QueryRequest",
    "QueryResponse",
    "QueryWithHistoryRequest",
    "BranchResponse",
    "CreateBranchRequest",
    "CreateRestaurantRequest",
    "RestaurantResponse",
    "CreateSnapshotRequest",
    "SnapshotResponse",
]
