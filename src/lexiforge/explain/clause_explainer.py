"""Plain-English clause explanations via Google Gemini."""

import asyncio
import logging
from typing import Optional

from google import genai

from ..config.models import Settings
from ..interfaces.explainer import IClauseExplainer


logger = logging.getLogger(__name__)

EMPTY_RESPONSE_MESSAGE = "Could not generate explanation."
ERROR_MESSAGE = "Error generating AI explanation. Please check your connection."


def build_prompt(title: str, content: str) -> str:
    return (
        f'Explain this legal clause titled "{title}" in simple, plain English for a non-lawyer.\n'
        "Help them understand why it matters and what the potential risks or benefits are.\n\n"
        f"Clause Content:\n{content}\n\n"
        "Keep the explanation concise and professional."
    )


class GeminiClauseExplainer(IClauseExplainer):
    """
    Clause explainer backed by the Gemini API.

    Each call is a single attempt. Failures are logged and turned into
    ERROR_MESSAGE; retrying is left to the user.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: str = "gemini-2.5-flash",
        timeout: Optional[float] = 30.0,
        client: Optional[genai.Client] = None,
    ):
        """
        Initialize the explainer.

        Args:
            api_key: Google API key. Without it (and without ``client``)
                     only static fallbacks are available.
            model_name: Gemini model to query.
            timeout: Seconds to wait for a response; None waits indefinitely.
            client: Pre-built client, mainly for tests.
        """
        self.api_key = api_key
        self.model_name = model_name
        self.timeout = timeout
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClauseExplainer":
        return cls(
            api_key=settings.api_key,
            model_name=settings.model_name,
            timeout=settings.explain_timeout,
        )

    @property
    def is_configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def explain(self, title: str, content: str, fallback: Optional[str] = None) -> str:
        """
        Explain a clause in plain English.

        Args:
            title: Clause title.
            content: Clause text.
            fallback: Static explanation used when no API key is configured.

        Returns:
            The explanation text, or a user-facing message on failure.
        """
        if not self.is_configured:
            logger.warning("No API key configured for clause explanations")
            return fallback or ERROR_MESSAGE

        try:
            client = self._get_client()
            request = client.aio.models.generate_content(
                model=self.model_name,
                contents=build_prompt(title, content),
            )
            response = await asyncio.wait_for(request, timeout=self.timeout)
            text = response.text
        except Exception as e:
            logger.warning(f"Clause explanation failed for '{title}': {e}")
            return ERROR_MESSAGE

        return text or EMPTY_RESPONSE_MESSAGE
