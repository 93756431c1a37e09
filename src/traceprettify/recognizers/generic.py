"""Generic fallback recognizer for arbitrary application JSON."""

from typing import Any

from traceprettify.access import as_dict, as_str, lookup
from traceprettify.config import DEFAULT_CONFIG, PrettifyConfig
from traceprettify.results import Direction


class GenericRecognizer:
    """Schema-agnostic heuristics, tried after all format-specific recognizers.

    Single-key objects are unwrapped at most twice, e.g.
    ``{"outputs": {"answer": "42"}}`` yields ``"42"``. Objects with several
    keys are scanned for well-known input or output key names.

    Args:
        config: Provides the candidate key names per direction. Uses the
            built-in DEFAULT_CONFIG if not provided; the environment is
            never read here.
    """

    name = "generic"

    def __init__(self, config: PrettifyConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def extract(self, payload: Any, type: Direction) -> str | None:
        value = self._unwrap(payload)

        if (text := as_str(value)) is not None:
            return text

        mapping = as_dict(value)
        if mapping is None:
            return None

        if len(mapping) == 1:
            return as_str(self._unwrap(mapping))

        for key in self.config.keys_for(type):
            if (text := as_str(lookup(mapping, key))) is not None:
                return text
        return None

    def _unwrap(self, value: Any) -> Any:
        """Return the only value of a single-key object, or the value itself."""
        mapping = as_dict(value)
        if mapping is not None and len(mapping) == 1:
            return next(iter(mapping.values()))
        return value
