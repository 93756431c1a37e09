"""Protocol for message recognizers."""

from typing import Any, Protocol

from traceprettify.results import Direction


class Recognizer(Protocol):
    """Protocol for extracting display text from a framework-specific payload.

    Implementations pattern-match one known payload shape (OpenAI chat
    completions, LangGraph state, etc.) and pull out the text a user would
    want to see. They must not mutate the payload.
    """

    name: str

    def extract(self, payload: Any, type: Direction) -> str | None:
        """Extract display text from a span payload.

        Args:
            payload: The span input or output, an untyped JSON value.
            type: Whether the payload is a span input or output.

        Returns:
            The extracted text, or None if the payload does not have the
            shape this recognizer understands.
        """
        ...
