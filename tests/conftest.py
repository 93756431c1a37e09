from typing import Any

import pytest

from traceprettify.config import PrettifyConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Keep TRACEPRETTIFY_* variables from the host out of tests."""
    monkeypatch.delenv("TRACEPRETTIFY_INPUT_KEYS", raising=False)
    monkeypatch.delenv("TRACEPRETTIFY_OUTPUT_KEYS", raising=False)


@pytest.fixture
def config() -> PrettifyConfig:
    """Provide a default config that ignores any .env file."""
    return PrettifyConfig(_env_file=None)


@pytest.fixture
def openai_input() -> dict[str, Any]:
    """Provide a chat-completion request payload."""
    return {
        "model": "gpt-4o",
        "messages": [
            {"role": "system", "content": "You are helpful"},
            {"role": "user", "content": "What is the capital of France?"},
        ],
    }


@pytest.fixture
def openai_output() -> dict[str, Any]:
    """Provide a chat-completion response payload."""
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": "Paris."},
            }
        ],
    }


@pytest.fixture
def agents_input() -> dict[str, Any]:
    """Provide an OpenAI Agents run input payload."""
    return {
        "input": [
            {"role": "user", "content": "Book a flight"},
            {"role": "assistant", "content": "Where to?"},
            {"role": "user", "content": "Lisbon"},
        ]
    }


@pytest.fixture
def agents_output() -> dict[str, Any]:
    """Provide an OpenAI Agents run output payload."""
    return {
        "output": [
            {"type": "function_call", "name": "search_flights", "arguments": "{}"},
            {
                "role": "assistant",
                "type": "message",
                "content": [
                    {"type": "output_text", "text": "Found 3 flights."},
                    {"type": "refusal", "refusal": "n/a"},
                    {"type": "output_text", "text": "The cheapest is 120 EUR."},
                ],
            },
        ]
    }


@pytest.fixture
def adk_input() -> dict[str, Any]:
    """Provide a Google ADK request payload."""
    return {
        "contents": [
            {"role": "user", "parts": [{"text": "Summarize this"}]},
            {"role": "model", "parts": [{"text": "Sure"}]},
            {"role": "user", "parts": [{"text": "Shorter please"}]},
        ]
    }


@pytest.fixture
def adk_output() -> dict[str, Any]:
    """Provide a Google ADK response payload."""
    return {"content": {"role": "model", "parts": [{"text": "A short summary."}]}}
