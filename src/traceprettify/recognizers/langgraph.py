"""LangGraph recognizer.

LangGraph graph state carries a ``messages`` list of serialized LangChain
messages, each with a ``type`` of "human", "ai", "tool", etc.
"""

from typing import Any

from traceprettify.access import as_list, as_str, get_path, non_empty_str
from traceprettify.results import Direction


class LangGraphRecognizer:
    """Extracts the first human message of the input or the last AI message of the output."""

    name = "langgraph"

    def extract(self, payload: Any, type: Direction) -> str | None:
        messages = as_list(get_path(payload, "messages"))
        if messages is None:
            return None

        if type == "input":
            for message in messages:
                if get_path(message, "type") != "human":
                    continue
                if content := non_empty_str(get_path(message, "content")):
                    return content
            return None

        if type == "output":
            ai_texts = [
                text
                for message in messages
                if get_path(message, "type") == "ai"
                and (text := self._ai_text(get_path(message, "content"))) is not None
            ]
            return ai_texts[-1] if ai_texts else None

        return None

    def _ai_text(self, content: Any) -> str | None:
        """Get the text of an AI message content.

        Content is either a plain string or, with the OpenAI Responses API,
        a list of content blocks. A list is only used when it holds exactly
        one text block; several are ambiguous.
        """
        if (text := as_str(content)) is not None:
            return text

        text_items = [
            text
            for item in as_list(content) or []
            if get_path(item, "type") == "text"
            and (text := non_empty_str(get_path(item, "text")))
        ]
        if len(text_items) == 1:
            return text_items[0]
        return None
