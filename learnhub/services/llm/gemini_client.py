from __future__ import annotations

from typing import Any, Dict

import httpx

from learnhub.services.llm.base import GenerationError

API_KEY_HEADER = "x-goog-api-key"


def _first_candidate_text(data: Any) -> str:
    # {"candidates": [{"content": {"parts": [{"text": "..."}]}}]}
    try:
        return data["candidates"][0]["content"]["parts"][0]["text"] or ""
    except (KeyError, IndexError, TypeError) as e:
        raise GenerationError("Gemini response has no candidate text") from e


class GeminiClient:
    """
    Minimal Gemini client over the public REST `generateContent` endpoint.

    Raises GenerationError on HTTP/transport failures and on bodies without
    candidate text. Error messages carry the status code only, never the
    request URL.
    """

    name = "gemini"

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = "gemini-2.0-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1",
        timeout_s: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.transport = transport

    async def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise GenerationError("GEMINI_API_KEY is missing")

        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload: Dict[str, Any] = {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": prompt}],
                }
            ]
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
                r = await client.post(url, headers={API_KEY_HEADER: self.api_key}, json=payload)
        except httpx.HTTPError as e:
            raise GenerationError(f"Gemini request failed ({type(e).__name__})") from None

        if r.is_error:
            raise GenerationError(f"Gemini returned HTTP {r.status_code}")

        try:
            data = r.json()
        except ValueError:
            raise GenerationError("Gemini returned a non-JSON body") from None

        return _first_candidate_text(data).strip()
