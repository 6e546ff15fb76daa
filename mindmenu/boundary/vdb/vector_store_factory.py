"""
Vector store factory for selecting between FAISS (dev) and S3 Vectors (prod).

Depends on VECTOR_STORE_STORE_TYPE environment variable.

Dependencies: mindmenu.boundary.vdb, mindmenu.configs
System role: Vector store instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings

from mindmenu.boundary.vdb.vector_store_client import VectorStoreClient
from mindmenu.configs import get_settings

logger = logging.getLogger(__name__)


def get_vector_store(embeddings: Embeddings | None = None) -> VectorStoreClient:
    """
    Build the vector store selected by configuration.

    Args:
        embeddings: LangChain embeddings, required by the FAISS store

    Returns:
        VectorStoreClient: FAISSVectorsStore or S3VectorsStore

    Raises:
        ValueError: If store_type is invalid or FAISS is selected without embeddings
    """
    settings = get_settings().vector_store
    store_type = settings.store_type.lower()

    if store_type == "faiss":
        if embeddings is None:
            raise ValueError("FAISS vector store requires an embeddings instance")
        from mindmenu.boundary.vdb.faiss_store import FAISSVectorsStore

        logger.info(f"{__name__}:get_vector_store - Creating FAISS vector store (local dev mode)")
        return FAISSVectorsStore(
            embeddings=embeddings,
            persist_directory=settings.faiss_index_dir,
            dimension=settings.dimension,
        )

    elif store_type == "s3":
        from mindmenu.boundary.vdb.s3_vectors_store import S3VectorsStore

        logger.info(f"{__name__}:get_vector_store - Creating S3 Vectors store (production mode)")
        return S3VectorsStore(
            vectors_bucket=settings.vectors_bucket,
            region=settings.aws_region,
            index_prefix=settings.index_prefix,
            dimension=settings.dimension,
            distance_metric=settings.distance_metric,
        )

    else:
        raise ValueError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'faiss' (dev) or 's3' (production)."
        )
