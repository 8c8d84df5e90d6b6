"""Config - built from CLI args, gaps filled from environment variables"""

import os
from dataclasses import dataclass

from review_summary.models import AIProvider, ReviewSummaryOptions


@dataclass
class Config:
    """Unified config; the CLI builds it after parsing args"""
    # backend
    provider: str = ""                  # gemini / openai, falls back to REVIEW_SUMMARY_PROVIDER

    # API keys (read from env when empty)
    gemini_api_key: str = ""
    openai_api_key: str = ""

    # tuning, None → option default
    max_characters: int | None = None
    tone: str | None = None
    language: str | None = None
    gemini_model: str | None = None
    openai_model: str | None = None
    temperature: float | None = None

    def __post_init__(self) -> None:
        """Fill unset values from the environment"""
        if not self.provider:
            self.provider = os.environ.get("REVIEW_SUMMARY_PROVIDER", "gemini")
        if not self.gemini_api_key:
            self.gemini_api_key = (
                os.environ.get("GEMINI_API_KEY", "")
                or os.environ.get("GOOGLE_API_KEY", "")
            )
        if not self.openai_api_key:
            self.openai_api_key = os.environ.get("OPENAI_API_KEY", "")

    @property
    def api_key(self) -> str:
        if self.provider == "gemini":
            return self.gemini_api_key
        if self.provider == "openai":
            return self.openai_api_key
        return ""

    @property
    def options(self) -> ReviewSummaryOptions:
        return ReviewSummaryOptions.from_partial({
            "max_characters": self.max_characters,
            "tone": self.tone,
            "language": self.language,
            "gemini_model": self.gemini_model,
            "openai_model": self.openai_model,
            "temperature": self.temperature,
        })

    def to_provider(self) -> AIProvider:
        return AIProvider(name=self.provider, api_key=self.api_key, options=self.options)
