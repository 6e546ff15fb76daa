"""
Chat history API endpoints.

Routes:
- GET /sessions/{session_id}/history - Chronological turns of a chat session

Dependencies: mindmenu.application.services.chat_history_service, mindmenu.models
System role: Chat history HTTP API
"""

from fastapi import APIRouter, Depends

from mindmenu.api.deps import get_chat_history_service
from mindmenu.api.routers.router_utils import handle_service_errors
from mindmenu.application.services.chat_history_service import ChatHistoryService
from mindmenu.models.query import ChatHistoryResponse, ChatTurnResponse

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("/{session_id}/history", response_model=ChatHistoryResponse)
@handle_service_errors("Chat history retrieval")
async def get_session_history(
    session_id: str,
    history_service: ChatHistoryService = Depends(get_chat_history_service),
) -> ChatHistoryResponse:
    """Every stored turn of a session, oldest first."""
    turns = await history_service.get_session_history(session_id)
    return ChatHistoryResponse(
        session_id=session_id,
        turns=[ChatTurnResponse.model_validate(turn) for turn in turns],
        total=len(turns),
    )
