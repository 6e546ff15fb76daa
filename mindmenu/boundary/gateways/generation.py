"""
Generation gateway backed by Gemini chat models.

Dependencies: langchain_google_genai, langchain_core
System role: Prompt-to-answer text generation for RAG queries
"""

import logging

from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from mindmenu.core.exceptions import GenerationError

logger = logging.getLogger(__name__)


def _response_text(content) -> str:
    """Flatten LangChain message content (str or list of parts) to text."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class GenerationGateway:
    """Generates a text answer for a fully composed prompt."""

    def __init__(
        self,
        model_id: str = "gemini-2.5-flash",
        temperature: float = 0.2,
        model=None,
    ) -> None:
        """
        Args:
            model_id: Gemini chat model ID
            temperature: Sampling temperature
            model: Preconfigured LangChain chat model (tests)
        """
        self._model_id = model_id
        self._model = model or ChatGoogleGenerativeAI(
            model=model_id,
            temperature=temperature,
        )

    def generate(self, prompt: str) -> str:
        """
        Generate an answer.

        Raises:
            GenerationError: Transport failure or empty response
        """
        try:
            response = self._model.invoke([HumanMessage(content=prompt)])
        except Exception as e:
            raise GenerationError(
                f"Generation request failed: {e}",
                details={"model": self._model_id, "error_type": type(e).__name__},
            ) from e

        text = _response_text(response.content).strip()
        if not text:
            raise GenerationError(
                "No response generated",
                details={"model": self._model_id},
            )

        logger.info(
            f"{__name__}:generate - Generated response",
            extra={"model": self._model_id, "response_length": len(text)},
        )
        return text
