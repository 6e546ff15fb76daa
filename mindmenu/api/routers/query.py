"""
Knowledge-base query API endpoints.

Routes:
- POST /branches/{id}/query - Answer a question (no history, English)
- POST /branches/{id}/query-with-history - Answer within a chat session

Dependencies: mindmenu.application.services.query_service, mindmenu.models
System role: RAG query HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from mindmenu.api.deps import get_query_service
from mindmenu.api.routers.router_utils import handle_service_errors
from mindmenu.application.services.query_service import QueryService
from mindmenu.models.query import QueryRequest, QueryResponse, QueryWithHistoryRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/branches", tags=["query"])


@router.post("/{branch_id}/query", response_model=QueryResponse)
@handle_service_errors("Knowledge base query")
async def query_branch(
    branch_id: UUID,
    request: QueryRequest,
    query_service: QueryService = Depends(get_query_service),
) -> QueryResponse:
    """
    Answer a question from a branch's knowledge base.

    Raises:
        HTTPException(400): Blank question
        HTTPException(404): Branch not found
        HTTPException(500): Embedding or vector query failed
    """
    result = await query_service.query(branch_id, request.question)
    return QueryResponse(response=result.response, context=result.context, debug=result.debug)


@router.post("/{branch_id}/query-with-history", response_model=QueryResponse)
@handle_service_errors("Knowledge base query")
async def query_branch_with_history(
    branch_id: UUID,
    request: QueryWithHistoryRequest,
    query_service: QueryService = Depends(get_query_service),
) -> QueryResponse:
    """
    Answer a question using the session's recent turns, then store the turn.

    Raises:
        HTTPException(400): Blank question
        HTTPException(404): Branch not found
        HTTPException(500): Embedding or vector query failed
    """
    result, session_id = await query_service.query_with_history(
        branch_id,
        request.question,
        session_id=request.session_id,
        language=request.language,
    )
    return QueryResponse(
        response=result.response,
        context=result.context,
        debug=result.debug,
        session_id=session_id,
    )
