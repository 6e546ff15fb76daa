"""
Test suite for S3VectorsStore.

Uses a MagicMock in place of the boto3 s3vectors client.

System role: Verification of the production vector store adapter
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from mindmenu.boundary.vdb.s3_vectors_store import (
    MAX_INDEX_NAME_LENGTH,
    S3VectorsStore,
    index_name_for,
)
from mindmenu.boundary.vdb.vector_schemas import VectorRecord
from mindmenu.core.exceptions import VectorStoreError

NAMESPACE = "3f2a_Main_Street"


def client_error(code: str, operation: str = "GetVectors") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def s3_client() -> MagicMock:
    """Provide mock s3vectors client."""
    return MagicMock()


@pytest.fixture
def store(s3_client) -> S3VectorsStore:
    """Provide S3VectorsStore bound to the mock client."""
    return S3VectorsStore(vectors_bucket="bucket", index_prefix="mindmenu", dimension=4, client=s3_client)


class TestIndexNameFor:
    """Test suite for index_name_for()."""

    def test_index_name_should_be_lowercase_slug_with_digest(self) -> None:
        """Test invalid characters are replaced and a digest is appended."""
        name = index_name_for("3F2A_Main Street", prefix="mindmenu")

        assert name.startswith("mindmenu-3f2a-main-street-")
        assert all(c.isalnum() or c == "-" for c in name)
        assert name == name.lower()

    def test_index_name_should_separate_namespaces_differing_in_case(self) -> None:
        """Test namespaces with the same slug map to different indexes."""
        assert index_name_for("r1_Main") != index_name_for("r1_main")

    def test_index_name_should_respect_length_limit(self) -> None:
        """Test very long namespaces are truncated to a valid name."""
        name = index_name_for("r" * 300)

        assert len(name) <= MAX_INDEX_NAME_LENGTH

    def test_index_name_should_handle_namespaces_without_slug_characters(self) -> None:
        """Test a namespace of only symbols still gets a name."""
        assert index_name_for("___").startswith("mindmenu-")


class TestFetch:
    """Test suite for S3VectorsStore.fetch()."""

    def test_fetch_should_return_records_keyed_by_id(self, store, s3_client) -> None:
        """Test found vectors come back with their metadata."""
        # Arrange
        s3_client.get_vectors.return_value = {
            "vectors": [{"key": "mm_1", "metadata": {"content_hash": "h1", "text": "hours: 9-5"}}]
        }

        # Act
        records = store.fetch(NAMESPACE, ["mm_1", "mm_2"])

        # Assert
        assert list(records) == ["mm_1"]
        assert records["mm_1"].content_hash == "h1"
        kwargs = s3_client.get_vectors.call_args.kwargs
        assert kwargs["indexName"] == index_name_for(NAMESPACE)
        assert kwargs["keys"] == ["mm_1", "mm_2"]
        assert kwargs["returnMetadata"] is True

    def test_fetch_should_treat_missing_index_as_empty(self, store, s3_client) -> None:
        """Test a namespace that was never written has no vectors."""
        s3_client.get_vectors.side_effect = client_error("NotFoundException")

        assert store.fetch(NAMESPACE, ["mm_1"]) == {}

    def test_fetch_should_wrap_other_client_errors(self, store, s3_client) -> None:
        """Test access errors become VectorStoreError."""
        s3_client.get_vectors.side_effect = client_error("AccessDeniedException")

        with pytest.raises(VectorStoreError) as exc_info:
            store.fetch(NAMESPACE, ["mm_1"])

        assert exc_info.value.details["operation"] == "fetch"

    def test_fetch_should_skip_request_for_no_ids(self, store, s3_client) -> None:
        """Test an empty ID list makes no call."""
        assert store.fetch(NAMESPACE, []) == {}
        s3_client.get_vectors.assert_not_called()


class TestUpsert:
    """Test suite for S3VectorsStore.upsert()."""

    def test_upsert_should_create_index_once_and_put_vectors(self, store, s3_client) -> None:
        """Test first write creates the namespace index, later writes reuse it."""
        # Arrange
        record = VectorRecord(id="mm_1", values=[0.1, 0.2, 0.3, 0.4], metadata={"text": "hours: 9-5"})

        # Act
        store.upsert(NAMESPACE, [record])
        store.upsert(NAMESPACE, [record])

        # Assert
        s3_client.create_index.assert_called_once()
        create_kwargs = s3_client.create_index.call_args.kwargs
        assert create_kwargs["dimension"] == 4
        assert create_kwargs["metadataConfiguration"] == {"nonFilterableMetadataKeys": ["text"]}
        put_kwargs = s3_client.put_vectors.call_args.kwargs
        assert put_kwargs["vectors"] == [
            {"key": "mm_1", "data": {"float32": [0.1, 0.2, 0.3, 0.4]}, "metadata": {"text": "hours: 9-5"}}
        ]

    def test_upsert_should_accept_existing_index(self, store, s3_client) -> None:
        """Test a ConflictException from create_index is not an error."""
        s3_client.create_index.side_effect = client_error("ConflictException", "CreateIndex")

        store.upsert(NAMESPACE, [VectorRecord(id="mm_1", values=[0.0] * 4)])

        s3_client.put_vectors.assert_called_once()

    def test_upsert_should_wrap_put_errors(self, store, s3_client) -> None:
        """Test a rejected write becomes VectorStoreError."""
        s3_client.put_vectors.side_effect = client_error("ValidationException", "PutVectors")

        with pytest.raises(VectorStoreError):
            store.upsert(NAMESPACE, [VectorRecord(id="mm_1", values=[0.0] * 4)])


class TestQuery:
    """Test suite for S3VectorsStore.query()."""

    def test_query_should_convert_distance_to_score(self, store, s3_client) -> None:
        """Test matches keep rank order and score = 1 - distance."""
        s3_client.query_vectors.return_value = {
            "vectors": [{"key": "mm_1", "distance": 0.1}, {"key": "mm_2", "distance": 0.4}]
        }

        matches = store.query(NAMESPACE, [0.1, 0.2, 0.3, 0.4], top_k=2)

        assert [m.id for m in matches] == ["mm_1", "mm_2"]
        assert matches[0].score == pytest.approx(0.9)
        assert s3_client.query_vectors.call_args.kwargs["topK"] == 2

    def test_query_should_return_nothing_for_missing_index(self, store, s3_client) -> None:
        """Test querying an unwritten namespace is empty, not an error."""
        s3_client.query_vectors.side_effect = client_error("NotFoundException", "QueryVectors")

        assert store.query(NAMESPACE, [0.0] * 4, top_k=5) == []

    def test_query_should_wrap_other_errors(self, store, s3_client) -> None:
        """Test other query failures raise VectorStoreError."""
        s3_client.query_vectors.side_effect = client_error("AccessDeniedException", "QueryVectors")

        with pytest.raises(VectorStoreError):
            store.query(NAMESPACE, [0.0] * 4, top_k=5)


class TestDeleteAndList:
    """Test suite for S3VectorsStore.delete() and list_ids()."""

    def test_delete_should_target_namespace_index(self, store, s3_client) -> None:
        """Test deletions address only the namespace's index."""
        store.delete(NAMESPACE, ["mm_1"])

        kwargs = s3_client.delete_vectors.call_args.kwargs
        assert kwargs["indexName"] == index_name_for(NAMESPACE)
        assert kwargs["keys"] == ["mm_1"]

    def test_list_ids_should_follow_pagination(self, store, s3_client) -> None:
        """Test every page of keys is collected."""
        s3_client.list_vectors.side_effect = [
            {"vectors": [{"key": "a"}, {"key": "b"}], "nextToken": "t1"},
            {"vectors": [{"key": "c"}]},
        ]

        assert store.list_ids(NAMESPACE) == ["a", "b", "c"]
        assert s3_client.list_vectors.call_args.kwargs["nextToken"] == "t1"

    def test_list_ids_should_treat_missing_index_as_empty(self, store, s3_client) -> None:
        """Test listing an unwritten namespace returns no IDs."""
        s3_client.list_vectors.side_effect = client_error("NotFoundException", "ListVectors")

        assert store.list_ids(NAMESPACE) == []
