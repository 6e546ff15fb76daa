"""
Test suite for the namespace-scoped Retriever.

System role: Verification of context retrieval and its failure modes
"""

from unittest.mock import MagicMock

import pytest

from mindmenu.boundary.vdb.vector_schemas import VectorMatch, VectorRecord
from mindmenu.core.exceptions import RetrievalError
from mindmenu.core.rag.retriever import Retriever

NAMESPACE = "r1_Main_Street"


def store_with(matches: list[VectorMatch], records: dict[str, VectorRecord]) -> MagicMock:
    store = MagicMock()
    store.query.return_value = matches
    store.fetch.return_value = records
    return store


class TestRetrieve:
    """Test suite for Retriever.retrieve()."""

    def test_retrieve_should_return_texts_in_rank_order(self) -> None:
        """Test contexts follow match order, not fetch order."""
        # Arrange
        store = store_with(
            [VectorMatch(id="b", score=0.9), VectorMatch(id="a", score=0.5)],
            {
                "a": VectorRecord(id="a", metadata={"text": "second"}),
                "b": VectorRecord(id="b", metadata={"text": "first"}),
            },
        )
        retriever = Retriever(store, top_k=3)

        # Act
        result = retriever.retrieve([0.1, 0.2], NAMESPACE)

        # Assert
        assert result.contexts == ["first", "second"]
        assert result.match_ids == ["b", "a"]
        assert result.matches == 2
        store.query.assert_called_once_with(NAMESPACE, [0.1, 0.2], 3)
        store.fetch.assert_called_once_with(NAMESPACE, ["b", "a"])

    def test_retrieve_should_skip_matches_without_text(self) -> None:
        """Test records missing text (or missing entirely) add no context."""
        store = store_with(
            [VectorMatch(id="a", score=0.9), VectorMatch(id="b", score=0.8), VectorMatch(id="c", score=0.7)],
            {
                "a": VectorRecord(id="a", metadata={"source": "hours"}),
                "c": VectorRecord(id="c", metadata={"text": "hours: 9-5"}),
            },
        )

        result = Retriever(store).retrieve([0.1], NAMESPACE)

        assert result.contexts == ["hours: 9-5"]
        assert result.matches == 3

    def test_retrieve_should_not_fetch_when_nothing_matches(self) -> None:
        """Test an empty namespace returns an empty result without a fetch."""
        store = store_with([], {})

        result = Retriever(store).retrieve([0.1], NAMESPACE)

        assert result.contexts == []
        store.fetch.assert_not_called()

    def test_retrieve_should_raise_when_query_fails(self) -> None:
        """Test a failing similarity query surfaces as RetrievalError."""
        store = MagicMock()
        store.query.side_effect = RuntimeError("index unavailable")

        with pytest.raises(RetrievalError) as exc_info:
            Retriever(store).retrieve([0.1], NAMESPACE)

        assert exc_info.value.details["namespace"] == NAMESPACE

    def test_retrieve_should_degrade_to_empty_context_when_fetch_fails(self) -> None:
        """Test a failing metadata fetch yields no contexts but keeps match IDs."""
        store = MagicMock()
        store.query.return_value = [VectorMatch(id="a", score=0.9)]
        store.fetch.side_effect = RuntimeError("timeout")

        result = Retriever(store).retrieve([0.1], NAMESPACE)

        assert result.contexts == []
        assert result.match_ids == ["a"]

    def test_retrieve_should_only_read_its_namespace(self, vector_store) -> None:
        """Test vectors stored under another namespace are never returned."""
        # Arrange
        vector_store.upsert("other", [VectorRecord(id="x", values=[1.0, 0.0], metadata={"text": "other branch"})])
        vector_store.upsert(NAMESPACE, [VectorRecord(id="y", values=[0.0, 1.0], metadata={"text": "this branch"})])

        # Act
        result = Retriever(vector_store, top_k=5).retrieve([1.0, 0.0], NAMESPACE)

        # Assert
        assert result.contexts == ["this branch"]
