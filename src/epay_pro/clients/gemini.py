"""Google Gemini client for the financial summary.

Uses the google-genai SDK (v1.0+) through its async surface so that the
rest of the dashboard keeps running while a summary is generated.
"""

import structlog
from google import genai
from google.genai import types

from epay_pro.config import get_settings
from epay_pro.exceptions import InsightsUnavailableError

logger = structlog.get_logger(__name__)


class GeminiClient:
    """Thin text-generation client for Google's Gemini API."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ):
        settings = get_settings()
        if api_key is None and settings.google_api_key is not None:
            api_key = settings.google_api_key.get_secret_value()
        self._api_key = api_key
        self._model_name = model or settings.gemini_model
        self._max_tokens = max_tokens or settings.llm_max_tokens
        self._temperature = temperature if temperature is not None else settings.llm_temperature

        # Without a key there is nothing to call; generate_text reports it
        self._client = genai.Client(api_key=self._api_key) if self._api_key else None

        self._logger = logger.bind(client="gemini", model=self._model_name)

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def generate_text(self, prompt: str) -> str:
        """Send ``prompt`` as a single user turn and return the reply text.

        Raises:
            InsightsUnavailableError: No API key is configured, or the reply
                carried no text.
            Exception: Errors from the SDK are logged and re-raised.
        """
        if self._client is None:
            raise InsightsUnavailableError("GOOGLE_API_KEY is not configured")

        self._logger.debug("generating_text", prompt_chars=len(prompt))

        config = types.GenerateContentConfig(
            max_output_tokens=self._max_tokens,
            temperature=self._temperature,
        )

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=prompt,
                config=config,
            )
        except Exception as e:
            self._logger.error("api_error", error=str(e))
            raise

        text = getattr(response, "text", None)
        if not text:
            self._logger.warning("empty_response")
            raise InsightsUnavailableError("Gemini returned no text")

        usage = getattr(response, "usage_metadata", None)
        self._logger.info(
            "text_generated",
            output_chars=len(text),
            input_tokens=getattr(usage, "prompt_token_count", 0) or 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) or 0,
        )
        return text
