"""Prettify span payloads into a short human-readable message.

Usage:
    ```python
    from traceprettify import prettify_message

    result = prettify_message(
        {"choices": [{"message": {"role": "assistant", "content": "Hello!"}}]},
        type="output",
    )
    result.message  # "Hello!"
    result.prettified  # True

    prettify_message({"foo": 1, "bar": 2}).prettified  # False
    ```
"""

import logging
from collections.abc import Sequence
from typing import Any

from traceprettify.config import PrettifyConfig
from traceprettify.recognizers import (
    ADKRecognizer,
    BlocksRecognizer,
    GenericRecognizer,
    LangChainRecognizer,
    LangGraphRecognizer,
    OpenAIAgentsRecognizer,
    OpenAIRecognizer,
    Recognizer,
)
from traceprettify.results import Direction, Extraction, PrettifyResult

logger = logging.getLogger(__name__)

# Format-specific recognizers in priority order. Generic fallback goes last.
DEFAULT_RECOGNIZERS: tuple[Recognizer, ...] = (
    OpenAIRecognizer(),
    OpenAIAgentsRecognizer(),
    ADKRecognizer(),
    LangGraphRecognizer(),
    LangChainRecognizer(),
    BlocksRecognizer(),
)


def build_recognizers(config: PrettifyConfig | None = None) -> tuple[Recognizer, ...]:
    """Build the full recognizer chain, generic fallback included.

    Args:
        config: Configuration for the generic fallback. Uses DEFAULT_CONFIG if not
            provided.

    Returns:
        Recognizers in the order they are tried.
    """
    return (*DEFAULT_RECOGNIZERS, GenericRecognizer(config))


# Chain used when neither config nor recognizers are given
DEFAULT_CHAIN = build_recognizers()


def extract_message(
    payload: Any,
    type: Direction = "input",
    recognizers: Sequence[Recognizer] | None = None,
) -> Extraction:
    """Run recognizers in order and return the first non-empty text.

    Exceptions raised by a recognizer propagate; use prettify_message for
    the non-raising entry point.

    Args:
        payload: The span input or output.
        type: Whether the payload is a span input or output.
        recognizers: Recognizers to try, in order. Uses DEFAULT_CHAIN
            if not provided.

    Returns:
        Extraction with the text and the name of the recognizer that
        produced it, or an empty Extraction when nothing matched.
    """
    if recognizers is None:
        recognizers = DEFAULT_CHAIN

    for recognizer in recognizers:
        text = recognizer.extract(payload, type)
        if isinstance(text, str) and text:
            logger.debug("extract_message type=%s recognizer=%s", type, recognizer.name)
            return Extraction(text=text, recognizer=recognizer.name)

    logger.debug("extract_message type=%s no match", type)
    return Extraction()


def prettify_message(
    payload: Any,
    type: Direction = "input",
    *,
    config: PrettifyConfig | None = None,
    recognizers: Sequence[Recognizer] | None = None,
) -> PrettifyResult:
    """Extract a readable message from a span input or output.

    Strings are returned as-is and never reprocessed. Payloads that no
    recognizer understands, and payloads that make a recognizer fail, are
    returned unchanged with prettified=False. This function never raises.

    Args:
        payload: The span input or output, an untyped JSON value.
        type: Whether the payload is a span input or output.
        config: Configuration for the generic fallback. Ignored when
            recognizers is given.
        recognizers: Custom recognizer chain, tried in order.

    Returns:
        PrettifyResult with the extracted text, or the original payload.
    """
    if isinstance(payload, str):
        return PrettifyResult(message=payload, prettified=False)

    try:
        if recognizers is None:
            recognizers = DEFAULT_CHAIN if config is None else build_recognizers(config)
        extraction = extract_message(payload, type, recognizers)
    except Exception:
        logger.debug("prettify_message type=%s failed", type, exc_info=True)
        return PrettifyResult(message=payload, prettified=False)

    if not extraction.matched:
        return PrettifyResult(message=payload, prettified=False)
    return PrettifyResult(message=extraction.text, prettified=True)
