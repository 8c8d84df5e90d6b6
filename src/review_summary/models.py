"""Data models"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

TONES = ("friendly", "professional", "casual")
PROVIDERS = ("gemini", "openai")


@dataclass(frozen=True)
class ReviewSummaryOptions:
    """Generation tuning. Every field defaults on its own."""
    max_characters: int = 250              # advisory ceiling, sent as a token hint
    tone: str = "friendly"                 # friendly / professional / casual
    language: str = "es"
    gemini_model: str = "gemini-1.5-flash"
    openai_model: str = "gpt-3.5-turbo"
    temperature: float = 0.7

    def __post_init__(self) -> None:
        if self.tone not in TONES:
            raise ValueError(
                f"Unsupported tone: {self.tone!r}. Use one of: {', '.join(TONES)}"
            )
        if isinstance(self.max_characters, bool) or not isinstance(self.max_characters, int):
            raise ValueError(f"max_characters must be an int, got {self.max_characters!r}")
        if self.max_characters < 1:
            raise ValueError(f"max_characters must be positive, got {self.max_characters}")

    @classmethod
    def from_partial(cls, values: Mapping[str, Any] | None) -> "ReviewSummaryOptions":
        """Build options from a partial mapping; missing or None values take the default."""
        if not values:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(sorted(unknown))}")
        return cls(**{k: v for k, v in values.items() if v is not None})


def resolve_options(
    options: "ReviewSummaryOptions | Mapping[str, Any] | None",
) -> ReviewSummaryOptions:
    if isinstance(options, ReviewSummaryOptions):
        return options
    return ReviewSummaryOptions.from_partial(options)


@dataclass(frozen=True)
class AIProvider:
    """Backend selection: name, credential and tuning options"""
    name: str                          # gemini / openai
    api_key: str
    options: ReviewSummaryOptions = field(default_factory=ReviewSummaryOptions)

    def __post_init__(self) -> None:
        # accept None or a plain dict for options
        object.__setattr__(self, "options", resolve_options(self.options))
