"""OpenAI Agents SDK recognizer.

Agent runs log the whole conversation as ``input`` items and the produced
response items as ``output``.
"""

from typing import Any

from traceprettify.access import as_list, get_path, non_empty_str
from traceprettify.results import MESSAGES_DIVIDER, Direction


class OpenAIAgentsRecognizer:
    """Joins all user turns of a run input, or all output texts of a run output."""

    name = "openai_agents"

    def extract(self, payload: Any, type: Direction) -> str | None:
        if type == "input":
            texts = self._user_texts(as_list(get_path(payload, "input")))
        elif type == "output":
            texts = self._output_texts(as_list(get_path(payload, "output")))
        else:
            return None

        if not texts:
            return None
        return MESSAGES_DIVIDER.join(texts)

    def _user_texts(self, items: list[Any] | tuple[Any, ...] | None) -> list[str]:
        texts: list[str] = []
        for item in items or []:
            if get_path(item, "role") != "user":
                continue
            if content := non_empty_str(get_path(item, "content")):
                texts.append(content)
        return texts

    def _output_texts(self, items: list[Any] | tuple[Any, ...] | None) -> list[str]:
        texts: list[str] = []
        for item in items or []:
            if get_path(item, "role") != "assistant" or get_path(item, "type") != "message":
                continue
            content = as_list(get_path(item, "content"))
            if content is None:
                continue
            for part in content:
                if get_path(part, "type") != "output_text":
                    continue
                if text := non_empty_str(get_path(part, "text")):
                    texts.append(text)
        return texts
