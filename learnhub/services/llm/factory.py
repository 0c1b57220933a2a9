from __future__ import annotations

from learnhub.core.config import Settings
from learnhub.services.llm.base import TextGenerator
from learnhub.services.llm.gemini_client import GeminiClient
from learnhub.services.llm.ollama_client import OllamaClient
from learnhub.services.llm.openai_client import OpenAIClient

PROVIDERS = ("gemini", "openai", "ollama")


def build_text_generator(s: Settings) -> TextGenerator:
    provider = (s.llm_provider or "gemini").strip().lower()

    if provider == "gemini":
        return GeminiClient(
            s.gemini_api_key,
            model=s.gemini_model,
            base_url=s.gemini_base_url,
            timeout_s=s.http_timeout_sec,
        )
    if provider == "openai":
        return OpenAIClient(
            s.openai_api_key,
            model=s.openai_model,
            timeout_sec=s.openai_timeout_sec,
            max_retries=s.openai_max_retries,
        )
    if provider == "ollama":
        return OllamaClient(s.ollama_base_url, s.ollama_model, timeout_s=s.http_timeout_sec)

    raise ValueError(f"Unknown LLM_PROVIDER: {s.llm_provider!r} (expected one of {', '.join(PROVIDERS)})")
