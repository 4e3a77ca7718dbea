from __future__ import annotations

import logging
from typing import Any

import httpx

from ..domain.errors import CorrectionAPIError
from ..domain.interfaces import TextCorrectorLLM
from ..domain.models import GenerationConfig
from ..prompts import build_correction_prompt

logger = logging.getLogger(__name__)

DEFAULT_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/gemma-3-27b-it:generateContent"
)


def extract_candidate_text(data: Any) -> str:
    """Pull ``candidates[0].content.parts[0].text`` out of a response, or ``""``."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return "API request failed"
    error = body.get("error") if isinstance(body, dict) else None
    message = error.get("message") if isinstance(error, dict) else None
    return message or "API request failed"


class GeminiTextCorrector(TextCorrectorLLM):
    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        generation: GenerationConfig | None = None,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._api_url = api_url
        self._generation = generation or GenerationConfig()

    def build_payload(self, text: str) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": build_correction_prompt(text)}]}],
            "generationConfig": self._generation.to_payload(),
        }

    async def correct(self, text: str) -> str:
        try:
            response = await self._client.post(
                self._api_url,
                params={"key": self._api_key},
                json=self.build_payload(text),
            )
        except httpx.HTTPError as exc:
            raise CorrectionAPIError(f"Transport failure: {exc}") from exc

        if not response.is_success:
            message = _error_message(response)
            logger.error("Gemini API error %s: %s", response.status_code, message)
            raise CorrectionAPIError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError:
            logger.warning("Gemini API returned a non-JSON body")
            return ""
        return extract_candidate_text(data)
