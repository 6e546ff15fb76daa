"""
Indexing job model.

Dependencies: dataclasses (stdlib)
System role: Unit of work carried by the indexing queue
"""

from dataclasses import dataclass
from typing import Any
from uuid import UUID


@dataclass
class IndexingJob:
    """
    One request to (re)index a branch knowledge document.

    Attributes:
        chatbot_id: Chatbot whose status the job reports into
        branch_id: Branch the content belongs to
        restaurant_id: Restaurant stamped into chunk metadata
        namespace: Target vector namespace (queue serialization key)
        content: Knowledge document (JSON object)
        document_hash: Canonical hash of content
        prune: Delete stored IDs missing from this document after sync
    """

    chatbot_id: UUID
    branch_id: UUID
    restaurant_id: UUID
    namespace: str
    content: dict[str, Any]
    document_hash: str
    prune: bool = False
