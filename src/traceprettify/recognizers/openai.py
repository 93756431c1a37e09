"""OpenAI chat-completion recognizer.

Input payloads are chat-completion requests (``{"messages": [...]}``),
output payloads are chat-completion responses (``{"choices": [...]}``).
"""

from typing import Any

from traceprettify.access import as_dict, as_list, get_path, last, non_empty_str
from traceprettify.results import Direction


class OpenAIRecognizer:
    """Extracts the last message of a chat-completion request or response.

    Usage:
        ```python
        recognizer = OpenAIRecognizer()
        recognizer.extract({"messages": [{"role": "user", "content": "Hi"}]}, "input")
        # "Hi"
        ```
    """

    name = "openai"

    def extract(self, payload: Any, type: Direction) -> str | None:
        if type == "input":
            return self._extract_input(payload)
        if type == "output":
            return self._extract_output(payload)
        return None

    def _extract_input(self, payload: Any) -> str | None:
        last_message = as_dict(last(as_list(get_path(payload, "messages"))))
        if last_message is None or "content" not in last_message:
            return None

        content = last_message["content"]
        if text := non_empty_str(content):
            return text

        # Multimodal content: take the last text part
        for part in reversed(as_list(content) or []):
            if get_path(part, "type") == "text" and (text := non_empty_str(get_path(part, "text"))):
                return text
        return None

    def _extract_output(self, payload: Any) -> str | None:
        last_choice = last(as_list(get_path(payload, "choices")))
        return non_empty_str(get_path(last_choice, "message", "content"))
