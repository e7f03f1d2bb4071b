"""
Application configuration, read from environment variables and .env.
"""

from pydantic_settings import BaseSettings
from typing import Optional

from webchat import __version__


class Settings(BaseSettings):
    # ── App ──────────────────────────────────────────────
    APP_NAME: str = "AI Chat Assistant"
    APP_VERSION: str = __version__
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: str = "*"

    # ── Web search providers ─────────────────────────────
    WIKIPEDIA_SEARCH_URL: str = "https://en.wikipedia.org/w/api.php"
    WIKIPEDIA_SUMMARY_URL: str = "https://en.wikipedia.org/api/rest_v1/page/summary/"
    SERPAPI_URL: str = "https://serpapi.com/search.json"
    SERPAPI_KEY: str = "demo"
    # None means outbound calls wait indefinitely
    SEARCH_TIMEOUT: Optional[float] = None
    USER_AGENT: str = "webchat/1.0"

    # ── Console client ───────────────────────────────────
    CHAT_API_URL: str = "http://127.0.0.1:8000/api/chat"

    # ── Rate Limiting ────────────────────────────────────
    RATE_LIMIT_PER_MINUTE: int = 60

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
