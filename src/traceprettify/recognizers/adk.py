"""Google ADK recognizer.

ADK logs requests as ``{"contents": [{"parts": [...]}]}`` or a bare
``{"parts": [...]}`` and responses as ``{"content": {"parts": [...]}}``.
"""

from typing import Any

from traceprettify.access import as_dict, as_list, as_str, get_path, last
from traceprettify.results import Direction


class ADKRecognizer:
    """Extracts the text of the last part.

    Unlike the other recognizers, an empty input ``text`` is returned as-is.
    """

    name = "adk"

    def extract(self, payload: Any, type: Direction) -> str | None:
        message = as_dict(payload)
        if message is None:
            return None

        if type == "input":
            contents = as_list(message.get("contents"))
            if "parts" not in message and contents is not None:
                message = as_dict(last(contents))
            parts = as_list(get_path(message, "parts"))
        elif type == "output":
            parts = as_list(get_path(message, "content", "parts"))
        else:
            return None

        return as_str(get_path(last(parts), "text"))
