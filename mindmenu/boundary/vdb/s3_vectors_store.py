"""
S3 Vectors store for production.

Maps each namespace onto its own S3 Vectors index inside one vector bucket,
so per-branch isolation does not depend on metadata filters and the stored
metadata keeps exactly the chunk fields. Indexes are created on first write.

Metadata Keys:
- Filterable: restaurant_id, branch_id, source, category, item_key,
  item_index, content_hash
- Non-filterable: text

Dependencies: boto3, botocore, tenacity
System role: Production vector store (S3 Vectors)
"""

import hashlib
import logging
import re
from typing import Any

import boto3
from botocore.exceptions import ClientError
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from mindmenu.boundary.vdb.vector_schemas import VectorMatch, VectorRecord
from mindmenu.boundary.vdb.vector_store_client import VectorStoreClient
from mindmenu.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)

MAX_INDEX_NAME_LENGTH = 63
NON_FILTERABLE_METADATA_KEYS = ["text"]
THROTTLING_ERROR_CODES = {
    "ThrottlingException",
    "TooManyRequestsException",
    "ServiceUnavailableException",
}


def _is_throttling(error: BaseException) -> bool:
    if not isinstance(error, ClientError):
        return False
    return error.response.get("Error", {}).get("Code") in THROTTLING_ERROR_CODES


def _is_not_found(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") in {"NotFoundException", "ResourceNotFoundException"}


_retry_on_throttling = retry(
    retry=retry_if_exception(_is_throttling),
    stop=stop_after_attempt(5),
    wait=wait_exponential_jitter(initial=1, max=30, jitter=5),
    before_sleep=lambda retry_state: logger.warning(
        f"{__name__} - Retry {retry_state.attempt_number}/5 after throttling"
    ),
    reraise=True,
)


def index_name_for(namespace: str, prefix: str = "mindmenu") -> str:
    """
    Derive a valid S3 Vectors index name for a namespace.

    Index names allow lowercase letters, digits, hyphens and dots. A digest
    of the exact namespace is appended so namespaces that only differ in case
    or punctuation never share an index.
    """
    digest = hashlib.sha256(namespace.encode("utf-8")).hexdigest()[:12]
    slug = re.sub(r"[^a-z0-9]+", "-", namespace.lower()).strip("-")
    room = MAX_INDEX_NAME_LENGTH - len(prefix) - len(digest) - 2
    slug = slug[:room].strip("-")
    if not slug:
        return f"{prefix}-{digest}"
    return f"{prefix}-{slug}-{digest}"


class S3VectorsStore(VectorStoreClient):
    """
    Namespace-scoped vector store backed by Amazon S3 Vectors.

    Uses the boto3 "s3vectors" client directly because vectors are embedded
    upstream and IDs/metadata must be stored verbatim.
    """

    def __init__(
        self,
        vectors_bucket: str = "mindmenu-vectors",
        region: str = "ap-southeast-2",
        index_prefix: str = "mindmenu",
        dimension: int = 768,
        distance_metric: str = "cosine",
        client: Any = None,
    ) -> None:
        """
        Initialize S3 Vectors store.

        Args:
            vectors_bucket: S3 Vectors bucket name
            region: AWS region for S3 Vectors
            index_prefix: Prefix for per-namespace index names
            dimension: Vector dimension for created indexes
            distance_metric: "cosine" or "euclidean"
            client: Preconfigured boto3 s3vectors client (tests)
        """
        self._vectors_bucket = vectors_bucket
        self._index_prefix = index_prefix
        self._dimension = dimension
        self._distance_metric = distance_metric
        self._client = client or boto3.client("s3vectors", region_name=region)
        self._known_indexes: set[str] = set()

        logger.info(
            f"{__name__}:__init__ - S3 Vectors store ready",
            extra={"bucket": vectors_bucket, "region": region, "dimension": dimension},
        )

    def _index(self, namespace: str) -> str:
        return index_name_for(namespace, self._index_prefix)

    @_retry_on_throttling
    def _ensure_index(self, index_name: str) -> None:
        """Create the namespace index if this process has not seen it yet."""
        if index_name in self._known_indexes:
            return
        try:
            self._client.create_index(
                vectorBucketName=self._vectors_bucket,
                indexName=index_name,
                dataType="float32",
                dimension=self._dimension,
                distanceMetric=self._distance_metric,
                metadataConfiguration={"nonFilterableMetadataKeys": NON_FILTERABLE_METADATA_KEYS},
            )
            logger.info(f"{__name__}:_ensure_index - Created index {index_name}")
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") != "ConflictException":
                raise
        self._known_indexes.add(index_name)

    @_retry_on_throttling
    def _get_vectors(self, index_name: str, ids: list[str]) -> dict:
        return self._client.get_vectors(
            vectorBucketName=self._vectors_bucket,
            indexName=index_name,
            keys=ids,
            returnData=False,
            returnMetadata=True,
        )

    @_retry_on_throttling
    def _put_vectors(self, index_name: str, vectors: list[dict]) -> None:
        self._client.put_vectors(
            vectorBucketName=self._vectors_bucket,
            indexName=index_name,
            vectors=vectors,
        )

    @_retry_on_throttling
    def _query_vectors(self, index_name: str, vector: list[float], top_k: int) -> dict:
        return self._client.query_vectors(
            vectorBucketName=self._vectors_bucket,
            indexName=index_name,
            queryVector={"float32": vector},
            topK=top_k,
            returnMetadata=False,
            returnDistance=True,
        )

    @_retry_on_throttling
    def _delete_vectors(self, index_name: str, ids: list[str]) -> None:
        self._client.delete_vectors(
            vectorBucketName=self._vectors_bucket,
            indexName=index_name,
            keys=ids,
        )

    @_retry_on_throttling
    def _list_vectors_page(self, index_name: str, next_token: str | None) -> dict:
        kwargs: dict[str, Any] = {
            "vectorBucketName": self._vectors_bucket,
            "indexName": index_name,
            "returnData": False,
            "returnMetadata": False,
        }
        if next_token:
            kwargs["nextToken"] = next_token
        return self._client.list_vectors(**kwargs)

    def fetch(self, namespace: str, ids: list[str]) -> dict[str, VectorRecord]:
        if not ids:
            return {}
        index_name = self._index(namespace)
        try:
            response = self._get_vectors(index_name, ids)
        except ClientError as e:
            if _is_not_found(e):
                return {}
            raise VectorStoreError(
                message="Failed to fetch vectors from S3 Vectors",
                operation="fetch",
                details={"error": str(e), "namespace": namespace, "id_count": len(ids)},
            ) from e

        return {
            item["key"]: VectorRecord(id=item["key"], metadata=item.get("metadata") or {})
            for item in response.get("vectors", [])
        }

    def upsert(self, namespace: str, records: list[VectorRecord]) -> None:
        if not records:
            return
        index_name = self._index(namespace)
        vectors = [
            {
                "key": record.id,
                "data": {"float32": [float(v) for v in record.values]},
                "metadata": record.metadata,
            }
            for record in records
        ]
        try:
            self._ensure_index(index_name)
            self._put_vectors(index_name, vectors)
        except ClientError as e:
            raise VectorStoreError(
                message="Failed to upsert vectors to S3 Vectors",
                operation="upsert",
                details={"error": str(e), "namespace": namespace, "vector_count": len(records)},
            ) from e

        logger.info(
            f"{__name__}:upsert - Upserted {len(records)} vectors",
            extra={"namespace": namespace, "index_name": index_name},
        )

    def query(self, namespace: str, vector: list[float], top_k: int) -> list[VectorMatch]:
        index_name = self._index(namespace)
        try:
            response = self._query_vectors(index_name, [float(v) for v in vector], top_k)
        except ClientError as e:
            if _is_not_found(e):
                return []
            raise VectorStoreError(
                message="Failed to query vectors from S3 Vectors",
                operation="query",
                details={"error": str(e), "namespace": namespace, "top_k": top_k},
            ) from e

        # S3 Vectors reports distance; convert so higher means closer
        return [
            VectorMatch(id=item["key"], score=1.0 - float(item.get("distance", 0.0)))
            for item in response.get("vectors", [])
        ]

    def delete(self, namespace: str, ids: list[str]) -> None:
        if not ids:
            return
        index_name = self._index(namespace)
        try:
            self._delete_vectors(index_name, ids)
        except ClientError as e:
            if _is_not_found(e):
                return
            raise VectorStoreError(
                message="Failed to delete vectors from S3 Vectors",
                operation="delete",
                details={"error": str(e), "namespace": namespace, "id_count": len(ids)},
            ) from e

        logger.info(
            f"{__name__}:delete - Deleted {len(ids)} vectors",
            extra={"namespace": namespace},
        )

    def list_ids(self, namespace: str) -> list[str]:
        index_name = self._index(namespace)
        ids: list[str] = []
        next_token = None
        try:
            while True:
                page = self._list_vectors_page(index_name, next_token)
                ids.extend(item["key"] for item in page.get("vectors", []))
                next_token = page.get("nextToken")
                if not next_token:
                    break
        except ClientError as e:
            if _is_not_found(e):
                return []
            raise VectorStoreError(
                message="Failed to list vectors in S3 Vectors",
                operation="list",
                details={"error": str(e), "namespace": namespace},
            ) from e
        return ids
