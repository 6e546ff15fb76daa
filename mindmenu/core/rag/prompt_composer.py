"""
Restaurant assistant prompt composition.

Builds the generation prompt from retrieved knowledge, bounded conversation
history, a language directive and the user question. Nothing is truncated
here except the history window.

Dependencies: langchain_core.prompts
System role: Prompt template for restaurant Q&A
"""

from typing import Sequence

from langchain_core.prompts import PromptTemplate

from mindmenu.core.rag.models import ConversationTurn

DEFAULT_LANGUAGE_INSTRUCTION = "Respond in English"

LANGUAGE_INSTRUCTIONS = {
    "en": "Respond in English",
    "zh": "请用中文回答",
    "ja": "日本語で回答してください",
    "ko": "한국어로 답변해주세요",
}

NEW_CONVERSATION = "This is the start of a new conversation."

HISTORY_WINDOW = 5

PREAMBLE = (
    "You are a helpful assistant for a restaurant. You specialize in providing "
    "information about the restaurant's menu, services, hours, and general dining experience."
)

RESTAURANT_PROMPT = PromptTemplate.from_template(
    PREAMBLE
    + """

Respond in English.

Restaurant Knowledge (USE THIS INFORMATION TO ANSWER):
{context}

Current User Question: {question}

Instructions:
- Be friendly, helpful, and professional
- Focus on restaurant-related topics
- ALWAYS use the Restaurant Knowledge provided above to answer questions
- If the Restaurant Knowledge contains relevant information, use it directly in your response
- Only suggest contacting the restaurant if the specific information is not in the Restaurant Knowledge
- Keep responses concise but informative
- If asked about appetizers, focus on the appetizer information from the knowledge
- If asked about mains, focus on the main course information from the knowledge

Response:"""
)

RESTAURANT_PROMPT_WITH_HISTORY = PromptTemplate.from_template(
    PREAMBLE
    + """

{language_instruction}.

Restaurant Knowledge (USE THIS INFORMATION TO ANSWER):
{context}

Conversation History:
{history}

Current User Question: {question}

Instructions:
- Be friendly, helpful, and professional
- Focus on restaurant-related topics
- ALWAYS use the Restaurant Knowledge provided above to answer questions
- If the Restaurant Knowledge contains relevant information, use it directly in your response
- Only suggest contacting the restaurant if the specific information is not in the Restaurant Knowledge
- Keep responses concise but informative
- STRICTLY follow the language instructions provided
- Maintain the conversational context from previous messages

Response:"""
)


def language_instruction(language: str | None) -> str:
    """Directive for a language code; unknown or missing codes fall back to English."""
    return LANGUAGE_INSTRUCTIONS.get(language or "", DEFAULT_LANGUAGE_INSTRUCTION)


def build_conversation_context(
    history: Sequence[ConversationTurn],
    window: int = HISTORY_WINDOW,
) -> str:
    """
    Render the last `window` turns as alternating User/Assistant lines.

    Args:
        history: Turns in chronological order
        window: Maximum number of turns rendered, capped at HISTORY_WINDOW

    Returns:
        str: Conversation block, or the new-conversation marker when empty
    """
    window = min(window, HISTORY_WINDOW)
    recent = list(history)[-window:] if window > 0 else []
    if not recent:
        return NEW_CONVERSATION

    lines = []
    for turn in recent:
        lines.append(f"User: {turn.query}")
        lines.append(f"Assistant: {turn.response}")
    return "\n".join(lines)


def compose_prompt(question: str, contexts: Sequence[str]) -> str:
    """Prompt for a single question without conversation history (English)."""
    return RESTAURANT_PROMPT.format(
        context="\n".join(contexts),
        question=question,
    )


def compose_prompt_with_history(
    question: str,
    contexts: Sequence[str],
    history: Sequence[ConversationTurn],
    language: str | None = "en",
    window: int = HISTORY_WINDOW,
) -> str:
    """
    Prompt including bounded conversation history and a language directive.

    Args:
        question: Current user question
        contexts: Retrieved knowledge texts in rank order
        history: Prior turns in chronological order
        language: Requested answer language code
        window: Maximum number of history turns rendered

    Returns:
        str: Complete prompt text
    """
    return RESTAURANT_PROMPT_WITH_HISTORY.format(
        language_instruction=language_instruction(language),
        context="\n".join(contexts),
        history=build_conversation_context(history, window),
        question=question,
    )
