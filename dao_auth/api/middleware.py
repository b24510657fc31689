import logging
import time

from fastapi import Request

logger = logging.getLogger("dao_auth.access")


async def log_requests(request: Request, call_next):
    """Log method, path, status, duration and the authenticated user if known"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    user_id = getattr(request.state, "user_id", None)
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} "
        f"{elapsed_ms:.0f}ms [{user_id or 'anonymous'}]"
    )
    return response
