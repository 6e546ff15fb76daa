"""Adapters between services and persistence."""

from mindmenu.application.adapters.chat_history_adapter import ChatHistoryAdapter

__all__ = ["ChatHistoryAdapter"]
