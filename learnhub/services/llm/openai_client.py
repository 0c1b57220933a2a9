from __future__ import annotations

from learnhub.services.llm.base import GenerationError
from learnhub.services.llm.prompts import LEARNING_ASSISTANT_SYSTEM


# ----------------------------
# OpenAI call helpers (SDK compatible)
# ----------------------------

def _build_openai_client(api_key: str | None, timeout_sec: float, max_retries: int):
    if not api_key:
        raise GenerationError("OPENAI_API_KEY is missing")

    # OpenAI SDK v1+
    from openai import AsyncOpenAI  # type: ignore

    return AsyncOpenAI(api_key=api_key, timeout=timeout_sec, max_retries=max_retries)


class OpenAIClient:
    """
    Chat Completions backend. The SDK handles its own retries; anything that
    still fails is surfaced as GenerationError.
    """

    name = "openai"

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = "gpt-4o-mini",
        timeout_sec: float = 60.0,
        max_retries: int = 2,
        client=None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.timeout_sec = timeout_sec
        self.max_retries = max_retries
        self._client = client

    def _get_client(self):
        if self._client is None:
            self._client = _build_openai_client(self.api_key, self.timeout_sec, self.max_retries)
        return self._client

    async def generate(self, prompt: str) -> str:
        client = self._get_client()
        try:
            chat = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": LEARNING_ASSISTANT_SYSTEM},
                    {"role": "user", "content": prompt},
                ],
            )
        except Exception as e:
            raise GenerationError(f"OpenAI generation failed: {e}") from e

        try:
            return (chat.choices[0].message.content or "").strip()
        except (AttributeError, IndexError) as e:
            raise GenerationError("OpenAI returned no choices") from e
