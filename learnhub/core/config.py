import os
from dataclasses import dataclass
from pathlib import Path

try:
    from dotenv import load_dotenv

    # Always load .env from the repo root (stable, regardless of CWD)
    BASE_DIR = Path(__file__).resolve().parents[2]
    dotenv_path = BASE_DIR / ".env"
    load_dotenv(dotenv_path=dotenv_path, override=False)
except Exception:
    # dotenv is optional; if not installed, env vars still work
    pass


def _env(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    return v if v and v.strip() else default


@dataclass(frozen=True)
class Settings:
    env: str = _env("ENV", "local")
    log_level: str = _env("LOG_LEVEL", "INFO")

    # Video search (YouTube Data API v3)
    youtube_api_key: str | None = _env("YOUTUBE_API_KEY")
    youtube_api_base_url: str = _env("YOUTUBE_API_BASE_URL", "https://www.googleapis.com/youtube/v3")
    youtube_web_host: str = _env("YOUTUBE_WEB_HOST", "www.youtube.com")
    youtube_max_results: int = int(_env("YOUTUBE_MAX_RESULTS", "10"))

    # Text generation: gemini | openai | ollama
    llm_provider: str = _env("LLM_PROVIDER", "gemini")

    gemini_api_key: str | None = _env("GEMINI_API_KEY")
    gemini_base_url: str = _env("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1")
    gemini_model: str = _env("GEMINI_MODEL", "gemini-2.0-flash")

    openai_api_key: str | None = _env("OPENAI_API_KEY")
    openai_model: str = _env("OPENAI_MODEL", "gpt-4o-mini")
    openai_timeout_sec: float = float(_env("OPENAI_TIMEOUT_SEC", "60"))
    openai_max_retries: int = int(_env("OPENAI_MAX_RETRIES", "2"))

    ollama_base_url: str = _env("OLLAMA_BASE_URL", "http://localhost:11434")
    ollama_model: str = _env("OLLAMA_MODEL", "qwen2.5:7b-instruct")

    http_timeout_sec: float = float(_env("HTTP_TIMEOUT_SEC", "30"))

    # Optional TrueType font for the PDF export (non-Latin study guides)
    pdf_font_path: str | None = _env("PDF_FONT_PATH")


settings = Settings()
