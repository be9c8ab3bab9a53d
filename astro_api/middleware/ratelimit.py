import os
import time
from collections import defaultdict
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

# Per-client request timestamps within the last minute.
_counters = defaultdict(list)


class RateLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if os.getenv("RATE_LIMIT_ENABLED", "false").lower() != "true":
            return await call_next(request)
        if request.url.path == "/__health":
            return await call_next(request)

        client_host = request.client.host if request.client else "unknown"
        key = getattr(request.state, "api_key", None) or client_host
        limit = int(os.getenv("RATE_LIMIT_PER_MINUTE", "10"))
        now = time.time()

        cutoff = now - 60
        for stale in [k for k, stamps in _counters.items() if not stamps or stamps[-1] <= cutoff]:
            del _counters[stale]

        window = [t for t in _counters.get(key, []) if t > cutoff]
        window.append(now)
        _counters[key] = window

        if len(window) > limit:
            return JSONResponse({"error": "Rate limit exceeded"}, status_code=429)

        return await call_next(request)
