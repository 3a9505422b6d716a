"""Summarization client for the Ollama inference service."""

import logging

import httpx

from user_registry.config import get_settings
from user_registry.errors import InferenceError
from user_registry.services.summarizer_prompts import get_summarization_prompt

logger = logging.getLogger(__name__)


class SummarizerService:
    """Service for summarizing file contents with an Ollama model."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = get_settings()
        self.base_url = self.settings.ollama_base_url
        self.model = self.settings.llm_model
        self.timeout = self.settings.llm_timeout_seconds
        self.transport = transport

    async def summarize(self, text: str, filename: str, extension: str) -> str:
        """Summarize a file's text. Raises InferenceError if no summary comes back."""
        prompt = get_summarization_prompt(text, filename, extension)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    f"{self.base_url}/api/chat",
                    json={
                        "model": self.model,
                        "messages": [{"role": "user", "content": prompt}],
                        "stream": False,
                    },
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling Ollama: {e}")
            raise InferenceError(f"Error generating summary: {e}") from e
        except ValueError as e:
            logger.error(f"Ollama returned a non-JSON response: {e}")
            raise InferenceError("Error generating summary: invalid response") from e

        try:
            return data["message"]["content"]
        except (KeyError, TypeError) as e:
            logger.warning(f"Unexpected Ollama response shape: {data!r}")
            raise InferenceError("Error generating summary: missing message content") from e
