"""Backends - pick one by provider name"""

from review_summary.backends.base import AbstractBackend
from review_summary.backends.gemini import GeminiBackend
from review_summary.backends.openai_chat import OpenAIBackend
from review_summary.errors import UnsupportedProviderError
from review_summary.models import ReviewSummaryOptions

BACKENDS: dict[str, type[AbstractBackend]] = {
    "gemini": GeminiBackend,
    "openai": OpenAIBackend,
}


def get_backend(name: str, api_key: str, options: ReviewSummaryOptions) -> AbstractBackend:
    """
    name="gemini" → GeminiBackend
    name="openai" → OpenAIBackend
    """
    try:
        backend_cls = BACKENDS[name]
    except (KeyError, TypeError):
        raise UnsupportedProviderError(name) from None
    return backend_cls(api_key=api_key, options=options)
