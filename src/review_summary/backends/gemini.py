"""Google Gemini backend (google-genai)"""

from review_summary.backends.base import AbstractBackend
from review_summary.utils import log_error, log_info


class GeminiBackend(AbstractBackend):
    name = "gemini"

    @property
    def model(self) -> str:
        return self.options.gemini_model

    def _client_and_config(self):
        try:
            from google import genai
            from google.genai import types
        except ImportError:
            log_error("google-genai package not installed")
            log_info("Install it: pip install google-genai")
            raise RuntimeError("google-genai not installed")

        # the client carries its own key; nothing process-wide is touched
        client = genai.Client(api_key=self.api_key)
        config = types.GenerateContentConfig(
            temperature=self.options.temperature,
            max_output_tokens=self.max_tokens,
        )
        return client, config

    def generate(self, prompt: str) -> str:
        client, config = self._client_and_config()
        response = client.models.generate_content(
            model=self.model, contents=prompt, config=config,
        )
        return response.text or ""

    async def agenerate(self, prompt: str) -> str:
        client, config = self._client_and_config()
        response = await client.aio.models.generate_content(
            model=self.model, contents=prompt, config=config,
        )
        return response.text or ""
