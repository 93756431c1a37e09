"""Block-structured message recognizer.

Handles two formats:
- Direct: ``{"blocks": [{"block_type": "text", "text": "..."}]}``
- Nested (output only): ``{"output": {"blocks": [...]}}``
"""

from typing import Any

from traceprettify.access import as_list, as_str, get_path
from traceprettify.results import BLOCKS_SEPARATOR, Direction


class BlocksRecognizer:
    name = "blocks"

    def extract(self, payload: Any, type: Direction) -> str | None:
        blocks = as_list(get_path(payload, "blocks"))
        if blocks is not None:
            return self._join_text_blocks(blocks)

        if type == "output":
            nested = as_list(get_path(payload, "output", "blocks"))
            if nested is not None:
                return self._join_text_blocks(nested)

        return None

    def _join_text_blocks(self, blocks: list[Any] | tuple[Any, ...]) -> str | None:
        texts = [
            text
            for block in blocks
            if get_path(block, "block_type") == "text"
            and (text := as_str(get_path(block, "text"))) is not None
            and text.strip()
        ]
        return BLOCKS_SEPARATOR.join(texts) if texts else None
