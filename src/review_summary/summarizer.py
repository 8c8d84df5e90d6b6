"""Review summarizer: render the prompt, dispatch to one backend, return its text"""

from collections.abc import Iterable, Sequence

from review_summary.backends import AbstractBackend, get_backend
from review_summary.errors import SummaryGenerationError
from review_summary.models import AIProvider
from review_summary.prompt import build_prompt


class ReviewSummarizer:
    """
    Summarizes customer reviews with the provider given at construction.

    Each call builds its own backend client from the stored credential, so one
    instance can serve concurrent calls.
    """

    def __init__(self, provider: AIProvider) -> None:
        self.provider = provider

    @property
    def options(self):
        return self.provider.options

    def build_prompt(self, reviews: Sequence[str], context: str | None = None) -> str:
        return build_prompt(
            reviews,
            tone=self.options.tone,
            max_characters=self.options.max_characters,
            context=context,
        )

    def _prepare(self, reviews: Iterable[str] | None, context: str | None) -> tuple[AbstractBackend, str]:
        # materialize once so generators are checked and joined the same way
        reviews = list(reviews) if reviews is not None else []
        if not reviews:
            raise ValueError("Reviews list cannot be empty")

        prompt = self.build_prompt(reviews, context)
        backend = get_backend(self.provider.name, self.provider.api_key, self.options)
        return backend, prompt

    def generate_summary(self, reviews: Iterable[str], context: str | None = None) -> str:
        """
        Return the backend's summary text for `reviews`.

        Raises ValueError for an empty batch, UnsupportedProviderError for an
        unknown provider and SummaryGenerationError when the backend call fails.
        An empty response is returned as "".
        """
        backend, prompt = self._prepare(reviews, context)
        try:
            text = backend.generate(prompt)
        except Exception as e:
            raise SummaryGenerationError.wrap(e) from e
        return text

    async def agenerate_summary(self, reviews: Iterable[str], context: str | None = None) -> str:
        """Async counterpart of generate_summary()."""
        backend, prompt = self._prepare(reviews, context)
        try:
            text = await backend.agenerate(prompt)
        except Exception as e:
            raise SummaryGenerationError.wrap(e) from e
        return text


def create_review_summarizer(provider: AIProvider) -> ReviewSummarizer:
    return ReviewSummarizer(provider)


def summarize_reviews(
    reviews: Sequence[str],
    provider: AIProvider,
    context: str | None = None,
) -> str:
    """One-shot helper: build a summarizer and generate a summary."""
    return create_review_summarizer(provider).generate_summary(reviews, context)


async def asummarize_reviews(
    reviews: Sequence[str],
    provider: AIProvider,
    context: str | None = None,
) -> str:
    return await create_review_summarizer(provider).agenerate_summary(reviews, context)
