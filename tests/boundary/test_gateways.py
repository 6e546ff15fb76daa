"""
Test suite for the embedding and generation gateways.

System role: Verification of provider error wrapping and response checks
"""

from unittest.mock import MagicMock

import pytest
from langchain_core.messages import AIMessage
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from mindmenu.boundary.gateways.embeddings import EmbeddingGateway, GeminiEmbeddings
from mindmenu.boundary.gateways.generation import GenerationGateway
from mindmenu.core.exceptions import EmbeddingError, GenerationError


class TestEmbeddingGateway:
    """Test suite for EmbeddingGateway."""

    def test_embed_should_return_query_vector(self, hash_embeddings) -> None:
        """Test a single text is embedded with the query method."""
        gateway = EmbeddingGateway(hash_embeddings, dimension=8)

        assert gateway.embed("hours") == hash_embeddings.embed_query("hours")

    def test_embed_should_reject_wrong_dimension(self, hash_embeddings) -> None:
        """Test vectors of the wrong size raise EmbeddingError."""
        gateway = EmbeddingGateway(hash_embeddings, dimension=768)

        with pytest.raises(EmbeddingError, match="dimension"):
            gateway.embed("hours")

    def test_embed_should_wrap_provider_errors(self) -> None:
        """Test provider exceptions become EmbeddingError."""
        embeddings = MagicMock()
        embeddings.embed_query.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(EmbeddingError, match="quota exceeded"):
            EmbeddingGateway(embeddings, dimension=8).embed("hours")

    def test_embed_many_should_batch_and_keep_order(self, hash_embeddings) -> None:
        """Test texts are sent in batch_size groups and returned in input order."""
        # Arrange
        embeddings = MagicMock(wraps=hash_embeddings)
        gateway = EmbeddingGateway(embeddings, dimension=8, batch_size=2)
        texts = ["a", "b", "c"]

        # Act
        vectors = gateway.embed_many(texts)

        # Assert
        assert vectors == hash_embeddings.embed_documents(texts)
        assert [call.args[0] for call in embeddings.embed_documents.call_args_list] == [["a", "b"], ["c"]]

    def test_embed_many_should_reject_short_responses(self) -> None:
        """Test a provider returning fewer vectors than texts fails the batch."""
        embeddings = MagicMock()
        embeddings.embed_documents.return_value = [[0.0] * 8]

        with pytest.raises(EmbeddingError, match="different number"):
            EmbeddingGateway(embeddings, dimension=8).embed_many(["a", "b"])


class TestGeminiEmbeddings:
    """Test suite for GeminiEmbeddings request options."""

    def test_documents_use_document_task_and_index_dimension(self, monkeypatch) -> None:
        base = MagicMock(return_value=[[0.1] * 8])
        monkeypatch.setattr(GoogleGenerativeAIEmbeddings, "embed_documents", base)
        embeddings = GeminiEmbeddings.model_construct(dimension=8)

        embeddings.embed_documents(["hours: 9am-5pm"])

        base.assert_called_once_with(["hours: 9am-5pm"], task_type="RETRIEVAL_DOCUMENT", output_dimensionality=8)

    def test_query_uses_query_task(self, monkeypatch) -> None:
        base = MagicMock(return_value=[0.1] * 8)
        monkeypatch.setattr(GoogleGenerativeAIEmbeddings, "embed_query", base)
        embeddings = GeminiEmbeddings.model_construct(dimension=8)

        embeddings.embed_query("When do you open?")

        base.assert_called_once_with("When do you open?", task_type="RETRIEVAL_QUERY", output_dimensionality=8)

    def test_explicit_task_type_is_kept(self, monkeypatch) -> None:
        base = MagicMock(return_value=[0.1] * 8)
        monkeypatch.setattr(GoogleGenerativeAIEmbeddings, "embed_query", base)
        embeddings = GeminiEmbeddings.model_construct(dimension=8)

        embeddings.embed_query("menu", task_type="SEMANTIC_SIMILARITY")

        assert base.call_args.kwargs["task_type"] == "SEMANTIC_SIMILARITY"


class TestGenerationGateway:
    """Test suite for GenerationGateway."""

    def test_generate_should_return_stripped_text(self) -> None:
        """Test plain string content is returned."""
        model = MagicMock()
        model.invoke.return_value = AIMessage(content="  Open 9-5.  ")

        assert GenerationGateway(model=model).generate("prompt") == "Open 9-5."

    def test_generate_should_join_text_parts(self) -> None:
        """Test list-of-parts content is flattened."""
        model = MagicMock()
        model.invoke.return_value = AIMessage(
            content=[{"type": "text", "text": "Open "}, {"type": "text", "text": "9-5."}]
        )

        assert GenerationGateway(model=model).generate("prompt") == "Open 9-5."

    def test_generate_should_fail_on_empty_response(self) -> None:
        """Test an empty candidate is a GenerationError."""
        model = MagicMock()
        model.invoke.return_value = AIMessage(content="")

        with pytest.raises(GenerationError, match="No response generated"):
            GenerationGateway(model=model).generate("prompt")

    def test_generate_should_wrap_transport_errors(self) -> None:
        """Test provider exceptions become GenerationError."""
        model = MagicMock()
        model.invoke.side_effect = ConnectionError("reset")

        with pytest.raises(GenerationError):
            GenerationGateway(model=model).generate("prompt")
