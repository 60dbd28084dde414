# -*- coding: utf-8 -*-
"""
Shared fixtures: an explicit English deployment and a stubbed model client.
"""
from unittest.mock import AsyncMock, Mock

import pytest

from settings import Settings


def _completion(content):
    message = Mock()
    message.content = content
    choice = Mock()
    choice.message = message
    response = Mock()
    response.choices = [choice]
    return response


@pytest.fixture
def make_completion():
    """Factory for chat completion responses carrying the given message content."""
    return _completion


@pytest.fixture
def config():
    return Settings(
        TELEGRAM_BOT_API_TOKEN="test-token",
        OPENAI_API_KEY="test-key",
        TARGET_LANGUAGE_CODE="en",
        TARGET_LANGUAGE_NAME="English",
    )


@pytest.fixture
def llm_client():
    """Stands in for the shared AsyncOpenAI handle; tests set `create` per case."""
    client = Mock()
    client.chat.completions.create = AsyncMock()
    return client
