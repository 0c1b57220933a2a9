from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from learnhub.services.llm.base import GenerationError


class OllamaClient:
    """
    Minimal Ollama client for local generation.

    Uses /api/generate (simple) to keep integration stable.
    """

    name = "ollama"

    def __init__(
        self,
        base_url: str,
        model: str,
        timeout_s: float = 120.0,
        *,
        system: Optional[str] = None,
        temperature: float = 0.2,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout_s = timeout_s
        self.system = system
        self.temperature = temperature
        self.transport = transport

    async def generate(self, prompt: str) -> str:
        url = f"{self.base_url}/api/generate"

        payload: Dict[str, Any] = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": self.temperature,
            },
        }
        if self.system:
            payload["system"] = self.system

        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
                r = await client.post(url, json=payload)
                r.raise_for_status()
                data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            raise GenerationError(f"Ollama request failed: {e}") from e

        # Ollama returns {"response": "...", ...}
        return (data.get("response") or "").strip()
