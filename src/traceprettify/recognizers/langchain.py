"""LangChain recognizer.

LangChain callbacks log chat model inputs as ``{"messages": [[...]]}`` (one
inner list per prompt) and LLM results as ``{"generations": [[...]]}`` (one
inner list per prompt, each generation carrying a serialized message).
"""

from typing import Any

from traceprettify.access import as_list, get_path, non_empty_str
from traceprettify.results import Direction


class LangChainRecognizer:
    """Extracts the human prompt or the AI generation of a single-prompt call.

    Some older models return multiple generations, and LangChain can be
    called with several prompts at once. There is no way to tell which one
    the user wants to see, so only a single prompt or generation group is
    prettified.
    """

    name = "langchain"

    def extract(self, payload: Any, type: Direction) -> str | None:
        if type == "input":
            group = self._single_group(get_path(payload, "messages"))
            if group is None:
                return None
            for message in group:
                if get_path(message, "type") != "human":
                    continue
                if content := non_empty_str(get_path(message, "content")):
                    return content
            return None

        if type == "output":
            group = self._single_group(get_path(payload, "generations"))
            if group is None:
                return None
            ai_texts = [
                text
                for generation in group
                if get_path(generation, "message", "kwargs", "type") == "ai"
                and (text := non_empty_str(get_path(generation, "text")))
            ]
            return ai_texts[-1] if ai_texts else None

        return None

    def _single_group(self, value: Any) -> list[Any] | tuple[Any, ...] | None:
        """Return the only inner list of a list-of-lists, None if there are zero or several."""
        groups = as_list(value)
        if groups is None or len(groups) != 1:
            return None
        return as_list(groups[0])
