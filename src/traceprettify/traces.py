"""Display helpers for traces and experiment items."""

import hashlib
from numbers import Real
from typing import Any, Literal

from pydantic import BaseModel

from traceprettify.access import get_path

TraceVisibilityMode = Literal["default", "hidden"]

# Named style variants for tags, in a fixed order
TAG_VARIANTS = (
    "gray",
    "purple",
    "burgundy",
    "pink",
    "red",
    "orange",
    "yellow",
    "green",
    "turquoise",
    "blue",
)


class FeedbackScoreBounds(BaseModel):
    """Inclusive range for a numeric feedback score."""

    min: float
    max: float


class ExperimentItem(BaseModel):
    """An experiment item as logged against a dataset item."""

    id: str | None = None
    trace_id: str | None = None
    input: Any = None
    output: Any = None
    feedback_scores: list[dict[str, Any]] | None = None
    trace_visibility_mode: TraceVisibilityMode = "default"


def generate_tag_variant(label: str) -> str:
    """Map a label to a stable tag variant.

    The last 8 hex digits of the label's md5 select the variant, so the same
    label always gets the same color.
    """
    digest = hashlib.md5(label.encode("utf-8")).hexdigest()
    return TAG_VARIANTS[int(digest[-8:], 16) % len(TAG_VARIANTS)]


def is_object_span(obj: Any) -> bool:
    """Check whether a logged object is a span (it belongs to a trace)."""
    return bool(get_path(obj, "trace_id"))


def is_numeric_feedback_score_valid(bounds: FeedbackScoreBounds, value: Any) -> bool:
    """Check that a value is a number within the inclusive bounds."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return bounds.min <= value <= bounds.max


def _has_content(value: Any) -> bool:
    """Containers count even when empty; scalars count when truthy."""
    if isinstance(value, (list, tuple, dict)):
        return True
    return bool(value)


def trace_exist(item: ExperimentItem) -> bool:
    return any(_has_content(value) for value in (item.output, item.input, item.feedback_scores))


def trace_visible(item: ExperimentItem) -> bool:
    return item.trace_visibility_mode == "default"
