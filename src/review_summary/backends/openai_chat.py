"""OpenAI chat-completion backend"""

from review_summary.backends.base import AbstractBackend
from review_summary.utils import log_error, log_info

SYSTEM_PROMPT = (
    "Eres un asistente especializado en generar resúmenes concisos de reseñas de "
    "clientes. Tu única tarea es crear resúmenes directos sin saludos, despedidas o "
    "comentarios adicionales. Responde únicamente con el resumen solicitado."
)


def _extract_text(completion) -> str:
    """First choice's content, or "" when there is none."""
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


class OpenAIBackend(AbstractBackend):
    name = "openai"

    @property
    def model(self) -> str:
        return self.options.openai_model

    def _request(self, prompt: str) -> dict:
        return dict(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=self.options.temperature,
            max_tokens=self.max_tokens,
        )

    def generate(self, prompt: str) -> str:
        try:
            from openai import OpenAI
        except ImportError:
            log_error("openai package not installed")
            log_info("Install it: pip install openai")
            raise RuntimeError("openai not installed")

        client = OpenAI(api_key=self.api_key)
        completion = client.chat.completions.create(**self._request(prompt))
        return _extract_text(completion)

    async def agenerate(self, prompt: str) -> str:
        try:
            from openai import AsyncOpenAI
        except ImportError:
            log_error("openai package not installed")
            log_info("Install it: pip install openai")
            raise RuntimeError("openai not installed")

        client = AsyncOpenAI(api_key=self.api_key)
        completion = await client.chat.completions.create(**self._request(prompt))
        return _extract_text(completion)
