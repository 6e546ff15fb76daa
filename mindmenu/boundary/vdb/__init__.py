"""
Vector database boundary layer.

Namespace-scoped vector store clients.
- S3VectorsStore: Production S3 Vectors client (boto3)
- FAISSVectorsStore: Local development store (LangChain FAISS)

Dependencies: boto3, langchain_community
System role: Vector store adapter for sync and retrieval
"""

from mindmenu.boundary.vdb.vector_schemas import VectorMatch, VectorRecord
from mindmenu.boundary.vdb.vector_store_client import VectorStoreClient
from mindmenu.boundary.vdb.vector_store_factory import get_vector_store

__all__ = [
    "VectorMatch",
    "VectorRecord",
    "VectorStoreClient",
    "get_vector_store",
]
