"""Error types"""


class SummaryError(Exception):
    """Base class for review_summary errors."""


class UnsupportedProviderError(SummaryError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported AI provider: {name}")
        self.name = name


class SummaryGenerationError(SummaryError, RuntimeError):
    """A backend call failed. The SDK exception is kept as __cause__."""

    PREFIX = "Failed to generate summary: "
    UNKNOWN = "Unknown error"

    @classmethod
    def wrap(cls, exc: BaseException) -> "SummaryGenerationError":
        return cls(cls.PREFIX + (str(exc) or cls.UNKNOWN))
