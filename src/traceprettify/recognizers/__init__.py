"""Recognizers for framework-specific span payloads.

Available recognizers, in priority order:
    - OpenAIRecognizer: OpenAI chat-completion requests and responses
    - OpenAIAgentsRecognizer: OpenAI Agents SDK runs
    - ADKRecognizer: Google ADK contents and parts
    - LangGraphRecognizer: LangGraph message state
    - LangChainRecognizer: LangChain chat prompts and generations
    - BlocksRecognizer: block-structured messages
    - GenericRecognizer: fallback for arbitrary JSON

Usage:
    ```python
    from traceprettify.recognizers import LangGraphRecognizer

    recognizer = LangGraphRecognizer()
    recognizer.extract({"messages": [{"type": "human", "content": "Hi"}]}, "input")
    # "Hi"
    ```
"""

from traceprettify.recognizers.adk import ADKRecognizer
from traceprettify.recognizers.blocks import BlocksRecognizer
from traceprettify.recognizers.generic import GenericRecognizer
from traceprettify.recognizers.langchain import LangChainRecognizer
from traceprettify.recognizers.langgraph import LangGraphRecognizer
from traceprettify.recognizers.openai import OpenAIRecognizer
from traceprettify.recognizers.openai_agents import OpenAIAgentsRecognizer
from traceprettify.recognizers.protocol import Recognizer

__all__ = [
    "Recognizer",
    "OpenAIRecognizer",
    "OpenAIAgentsRecognizer",
    "ADKRecognizer",
    "LangGraphRecognizer",
    "LangChainRecognizer",
    "BlocksRecognizer",
    "GenericRecognizer",
]
