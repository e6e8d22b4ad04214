"""Configuration for natural-language to JQL translation."""

import os
from dataclasses import dataclass

DEFAULT_LLM_BASE_URL = "https://api.openai.com/v1"
DEFAULT_LLM_MODEL = "gpt-4o-mini"
DEFAULT_LLM_MAX_TOKENS = 200


@dataclass(frozen=True)
class LLMConfig:
    """Settings for an OpenAI-compatible chat completions service."""

    api_key: str
    base_url: str = DEFAULT_LLM_BASE_URL
    model: str = DEFAULT_LLM_MODEL
    max_tokens: int = DEFAULT_LLM_MAX_TOKENS

    @property
    def completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"

    @classmethod
    def from_env(cls) -> "LLMConfig | None":
        """Create configuration from environment variables.

        Returns:
            LLMConfig, or None when LLM_API_KEY is unset or blank

        Raises:
            ValueError: If LLM_MAX_TOKENS is not a positive integer
        """
        api_key = (os.getenv("LLM_API_KEY") or "").strip()
        if not api_key:
            return None

        max_tokens_env = (os.getenv("LLM_MAX_TOKENS") or "").strip()
        max_tokens = int(max_tokens_env) if max_tokens_env else DEFAULT_LLM_MAX_TOKENS
        if max_tokens <= 0:
            raise ValueError("LLM_MAX_TOKENS must be a positive integer")

        return cls(
            api_key=api_key,
            base_url=(os.getenv("LLM_BASE_URL") or "").strip() or DEFAULT_LLM_BASE_URL,
            model=(os.getenv("LLM_MODEL") or "").strip() or DEFAULT_LLM_MODEL,
            max_tokens=max_tokens,
        )
