"""
Provider gateways for embeddings and text generation.

Dependencies: langchain_google_genai
System role: LLM provider adapters
"""

from mindmenu.boundary.gateways.embeddings import EmbeddingGateway, GeminiEmbeddings
from mindmenu.boundary.gateways.generation import GenerationGateway

__all__ = ["EmbeddingGateway", "GeminiEmbeddings", "GenerationGateway"]
