"""Client for the Google Gemini generateContent REST endpoint."""

import json
import httpx
from typing import Any, Dict, Optional
from aqvision.core.errors import UpstreamError
from aqvision.core.upstream import UpstreamClient, UpstreamRequest
import logging

logger = logging.getLogger(__name__)

FALLBACK_SUMMARY = (
    "Demo AI summary: The area shows elevated PM2.5 values, with hotspots near "
    "industrial and high-traffic zones. Main pollutants: PM2.5 and NO2. "
    "Recommended actions: reduce traffic near sensitive zones, temporary emission "
    "controls in industrial clusters, and public health advisories for vulnerable groups."
)


def extract_error_message(raw_body: str) -> str:
    """Pulls error.message out of a Gemini error body, else returns the raw text."""
    try:
        parsed = json.loads(raw_body)
    except ValueError:
        return raw_body
    if not isinstance(parsed, dict):
        return raw_body

    error = parsed.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    return raw_body


def extract_text(payload: Any) -> str:
    """Text of the first candidate's first part; empty when the shape is missing."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


class GeminiClient(UpstreamClient):
    """A client to handle interactions with the Google Gemini API."""

    provider = "Gemini"

    def __init__(
        self,
        http: httpx.AsyncClient,
        base_url: str,
        model: str,
        api_key: str,
        debug: bool = False,
    ):
        super().__init__(http, debug=debug)
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.api_key = api_key

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def build_request(
        self, prompt: Optional[str], system_instruction: Optional[str] = None
    ) -> UpstreamRequest:
        payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt or ""}]}]}
        if system_instruction:
            payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}

        return UpstreamRequest(
            method="POST",
            url=f"{self.base_url}/models/{self.model}:generateContent",
            params={"key": self.api_key},
            json_body=payload,
        )

    async def summarize(
        self, prompt: Optional[str], system_instruction: Optional[str] = None
    ) -> str:
        """
        Generates summary text for the prompt. Without an API key no call is made
        and the demo summary is returned instead.
        """
        if not self.is_configured:
            logger.warning("No GEMINI_API_KEY configured - using fallback summary")
            return FALLBACK_SUMMARY

        logger.info(f"Calling Gemini {self.model} (prompt: {(prompt or '')[:100]!r})")
        response = await self.send(self.build_request(prompt, system_instruction))

        if not response.is_success:
            raw_body = response.text
            logger.error(f"Gemini API error {response.status_code}: {raw_body}")
            raise UpstreamError(
                "Gemini error",
                upstream_status=response.status_code,
                detail=extract_error_message(raw_body),
                body=raw_body,
            )

        return extract_text(self.decode(response))
