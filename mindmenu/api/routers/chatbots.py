"""
Chatbot API endpoints.

Routes:
- POST /chatbots - Create or rebuild a branch chatbot (202, indexing queued)
- POST /chatbots/{id}/reindex - Reindex from content or latest snapshot (202)
- GET /chatbots/{id} - Chatbot status
- DELETE /chatbots/{id}/vectors - Delete explicit vector IDs

Dependencies: mindmenu.application.services.chatbot_service, mindmenu.models
System role: Chatbot lifecycle HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from mindmenu.api.deps import get_chatbot_service
from mindmenu.api.routers.router_utils import handle_service_errors
from mindmenu.application.services.chatbot_service import ChatbotService
from mindmenu.models.chatbot import (
    ChatbotAcceptedResponse,
    ChatbotResponse,
    CreateChatbotRequest,
    DeleteVectorsRequest,
    DeleteVectorsResponse,
    ReindexChatbotRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chatbots", tags=["chatbots"])


@router.post("", response_model=ChatbotAcceptedResponse, status_code=status.HTTP_202_ACCEPTED)
@handle_service_errors("Chatbot creation")
async def create_chatbot(
    request: CreateChatbotRequest,
    chatbot_service: ChatbotService = Depends(get_chatbot_service),
) -> ChatbotAcceptedResponse:
    """
    Create a chatbot for a branch and start indexing its knowledge.

    Returns immediately; poll GET /chatbots/{id} for status.

    Raises:
        HTTPException(400): Content is not a JSON object
        HTTPException(404): Branch or restaurant not found
    """
    chatbot = await chatbot_service.create_chatbot(
        branch_id=request.branch_id,
        content=request.content,
    )
    return ChatbotAcceptedResponse(message="Chatbot creation started", chatbot_id=chatbot.id)


@router.post(
    "/{chatbot_id}/reindex",
    response_model=ChatbotAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
@handle_service_errors("Chatbot reindex")
async def reindex_chatbot(
    chatbot_id: UUID,
    request: ReindexChatbotRequest,
    chatbot_service: ChatbotService = Depends(get_chatbot_service),
) -> ChatbotAcceptedResponse:
    """
    Reindex a chatbot from the given content or the branch's latest snapshot.

    Raises:
        HTTPException(400): Content is not a JSON object
        HTTPException(404): Chatbot not found, or no content and no snapshot
    """
    chatbot = await chatbot_service.reindex_chatbot(
        chatbot_id=chatbot_id,
        content=request.content,
        prune=request.prune,
    )
    return ChatbotAcceptedResponse(message="Chatbot reindex started", chatbot_id=chatbot.id)


@router.get("/{chatbot_id}", response_model=ChatbotResponse)
@handle_service_errors("Chatbot retrieval")
async def get_chatbot(
    chatbot_id: UUID,
    chatbot_service: ChatbotService = Depends(get_chatbot_service),
) -> ChatbotResponse:
    """Chatbot status, content hash and version."""
    chatbot = await chatbot_service.get_chatbot(chatbot_id)
    return ChatbotResponse.model_validate(chatbot)


@router.delete("/{chatbot_id}/vectors", response_model=DeleteVectorsResponse)
@handle_service_errors("Vector deletion")
async def delete_vectors(
    chatbot_id: UUID,
    request: DeleteVectorsRequest,
    chatbot_service: ChatbotService = Depends(get_chatbot_service),
) -> DeleteVectorsResponse:
    """
    Delete explicit vector IDs from the chatbot's namespace.

    Raises:
        HTTPException(404): Chatbot not found
    """
    namespace, deleted = await chatbot_service.delete_vectors(chatbot_id, request.ids)
    return DeleteVectorsResponse(namespace=namespace, deleted=deleted)
