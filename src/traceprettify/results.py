"""Result models for message prettification."""

from typing import Any, Literal

from pydantic import BaseModel

# Which side of a span the payload comes from
Direction = Literal["input", "output"]

# Joins several extracted turns (e.g. multiple user messages)
MESSAGES_DIVIDER = "\n\n  ----------------- \n\n"

# Joins text blocks of block-structured payloads
BLOCKS_SEPARATOR = "\n\n"


class Extraction(BaseModel):
    """Outcome of running the recognizer chain.

    Attributes:
        text: The extracted text, or None when nothing matched.
        recognizer: Name of the recognizer that produced the text.
    """

    text: str | None = None
    recognizer: str | None = None

    @property
    def matched(self) -> bool:
        return bool(self.text)


class PrettifyResult(BaseModel):
    """Public result of prettify_message.

    Attributes:
        message: The extracted text when prettified, otherwise the original
            payload unchanged.
        prettified: Whether message is newly extracted text.
    """

    message: Any = None
    prettified: bool = False
