from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from traceprettify.results import Direction

DEFAULT_INPUT_KEYS = [
    "question",
    "messages",
    "user_input",
    "query",
    "input_prompt",
    "prompt",
    "sys.query",  # Dify
]

DEFAULT_OUTPUT_KEYS = ["answer", "output", "response"]


class PrettifyConfig(BaseSettings):
    """Configuration for traceprettify.

    Settings can be provided via environment variables with TRACEPRETTIFY_ prefix.
    List values are read as JSON, e.g. TRACEPRETTIFY_OUTPUT_KEYS='["answer", "result"]'.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRACEPRETTIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Candidate keys scanned by the generic fallback, in priority order
    input_keys: list[str] = Field(default_factory=lambda: list(DEFAULT_INPUT_KEYS))
    output_keys: list[str] = Field(default_factory=lambda: list(DEFAULT_OUTPUT_KEYS))

    def keys_for(self, type: Direction) -> list[str]:
        """Get the generic fallback keys for a direction."""
        if type == "input":
            return self.input_keys
        if type == "output":
            return self.output_keys
        return []


# Built-in defaults, without reading the environment or a .env file.
# Construct PrettifyConfig() explicitly to pick up TRACEPRETTIFY_* settings.
DEFAULT_CONFIG = PrettifyConfig.model_construct()
