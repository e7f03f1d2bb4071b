"""
Request / response logging middleware.
"""

import time
from fastapi import Request
from loguru import logger

# Logged at DEBUG only
_QUIET_PATHS = {"/api/health"}


async def logging_middleware(request: Request, call_next):
    log = logger.debug if request.url.path in _QUIET_PATHS else logger.info
    client = request.client.host if request.client else "-"
    start = time.perf_counter()
    log(f"→ {request.method} {request.url.path} from {client}")

    response = await call_next(request)

    elapsed = round((time.perf_counter() - start) * 1000, 2)
    if response.status_code >= 500:
        log = logger.error
    elif response.status_code >= 400:
        log = logger.warning
    log(f"← {request.method} {request.url.path} [{response.status_code}] {elapsed}ms")

    return response
