"""review-summary - customer review summaries via Gemini or OpenAI"""

__version__ = "1.0.0"

from review_summary.config import Config
from review_summary.errors import SummaryError, SummaryGenerationError, UnsupportedProviderError
from review_summary.models import AIProvider, ReviewSummaryOptions
from review_summary.summarizer import (
    ReviewSummarizer,
    asummarize_reviews,
    create_review_summarizer,
    summarize_reviews,
)

__all__ = [
    "AIProvider",
    "Config",
    "ReviewSummarizer",
    "ReviewSummaryOptions",
    "SummaryError",
    "SummaryGenerationError",
    "UnsupportedProviderError",
    "asummarize_reviews",
    "create_review_summarizer",
    "summarize_reviews",
]
