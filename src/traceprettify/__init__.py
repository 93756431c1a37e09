from traceprettify.config import DEFAULT_CONFIG, PrettifyConfig
from traceprettify.prettify import (
    DEFAULT_CHAIN,
    DEFAULT_RECOGNIZERS,
    build_recognizers,
    extract_message,
    prettify_message,
)
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
from traceprettify.results import (
    BLOCKS_SEPARATOR,
    MESSAGES_DIVIDER,
    Direction,
    Extraction,
    PrettifyResult,
)
from traceprettify.traces import (
    TAG_VARIANTS,
    ExperimentItem,
    FeedbackScoreBounds,
    generate_tag_variant,
    is_numeric_feedback_score_valid,
    is_object_span,
    trace_exist,
    trace_visible,
)

__all__ = [
    # Entry points
    "prettify_message",
    "extract_message",
    "build_recognizers",
    "DEFAULT_RECOGNIZERS",
    "DEFAULT_CHAIN",
    # Config
    "PrettifyConfig",
    "DEFAULT_CONFIG",
    # Results
    "Direction",
    "Extraction",
    "PrettifyResult",
    "MESSAGES_DIVIDER",
    "BLOCKS_SEPARATOR",
    # Recognizers
    "Recognizer",
    "OpenAIRecognizer",
    "OpenAIAgentsRecognizer",
    "ADKRecognizer",
    "LangGraphRecognizer",
    "LangChainRecognizer",
    "BlocksRecognizer",
    "GenericRecognizer",
    # Trace display helpers
    "TAG_VARIANTS",
    "ExperimentItem",
    "FeedbackScoreBounds",
    "generate_tag_variant",
    "is_numeric_feedback_score_valid",
    "is_object_span",
    "trace_exist",
    "trace_visible",
]
