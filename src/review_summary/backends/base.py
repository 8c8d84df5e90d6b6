"""Backend abstract base class"""

from abc import ABC, abstractmethod

from review_summary.models import ReviewSummaryOptions
from review_summary.prompt import estimate_max_tokens


class AbstractBackend(ABC):
    name: str = ""

    def __init__(self, api_key: str, options: ReviewSummaryOptions) -> None:
        self.api_key = api_key
        self.options = options

    @property
    def max_tokens(self) -> int:
        return estimate_max_tokens(self.options.max_characters)

    @property
    @abstractmethod
    def model(self) -> str:
        ...

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Send the prompt, return the raw generated text. SDK errors propagate."""
        ...

    @abstractmethod
    async def agenerate(self, prompt: str) -> str:
        ...
