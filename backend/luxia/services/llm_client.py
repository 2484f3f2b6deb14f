"""Completion client — Groq chat completions through the OpenAI SDK."""

import logging

import openai
from openai import AsyncOpenAI

from luxia.config import Settings
from luxia.exceptions import CompletionError
from luxia.services.prompt_builder import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class LLMClient:
    """Single-attempt async client for the OpenAI-compatible Groq endpoint."""

    def __init__(self, settings: Settings):
        self._settings = settings
        self._client: AsyncOpenAI | None = None

    @property
    def configured(self) -> bool:
        return bool(self._settings.groq_api_key)

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._settings.groq_api_key,
                base_url=self._settings.groq_base_url,
                max_retries=0,
            )
        return self._client

    async def complete(self, prompt: str) -> str:
        """Send ``prompt`` with the JSON-only system instruction.

        Returns the text of the first choice, or "" when there is none.

        Raises:
            CompletionError if the call fails at the transport or HTTP level.
        """
        try:
            response = await self._get_client().chat.completions.create(
                model=self._settings.groq_model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self._settings.completion_temperature,
                max_tokens=self._settings.completion_max_tokens,
            )
        except openai.APIStatusError as e:
            logger.error(f"Completion service returned {e.status_code}: {e.message}")
            raise CompletionError(
                f"Completion service error {e.status_code}", upstream_status=e.status_code
            ) from e
        except openai.APIConnectionError as e:
            logger.error(f"Completion service unreachable: {e}")
            raise CompletionError(f"Completion service unreachable: {e}") from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def ping(self) -> bool:
        """Minimal completion call used by the diagnostics endpoint."""
        try:
            await self._get_client().chat.completions.create(
                model=self._settings.groq_model,
                messages=[{"role": "user", "content": "OK"}],
                max_tokens=5,
            )
            return True
        except Exception as e:
            logger.warning(f"Completion service probe failed: {e}")
            return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
