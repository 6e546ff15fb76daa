"""
Test suite for chat configuration.

System role: Verification of history window bounds
"""

import pytest
from pydantic import ValidationError

from mindmenu.configs.chat import ChatSettings


class TestChatSettings:
    """Test suite for ChatSettings."""

    def test_default_window_is_five(self, monkeypatch) -> None:
        monkeypatch.delenv("CHAT_HISTORY_WINDOW", raising=False)

        assert ChatSettings().history_window == 5

    def test_window_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("CHAT_HISTORY_WINDOW", "3")

        assert ChatSettings().history_window == 3

    @pytest.mark.parametrize("value", ["0", "8"])
    def test_window_outside_one_to_five_is_rejected(self, monkeypatch, value) -> None:
        """Test the prompt history window cannot be configured past five turns or to zero."""
        monkeypatch.setenv("CHAT_HISTORY_WINDOW", value)

        with pytest.raises(ValidationError):
            ChatSettings()
