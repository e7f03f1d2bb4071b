"""
Per-client rate limiting for the chat endpoint.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from webchat.config import settings

limiter = Limiter(key_func=get_remote_address)


def chat_rate_limit() -> str:
    # Read on every request so RATE_LIMIT_PER_MINUTE can change at runtime
    return f"{settings.RATE_LIMIT_PER_MINUTE}/minute"
