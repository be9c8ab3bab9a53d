import os
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

OPEN_PATHS = {"/", "/__health"}


class APIKeyMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if request.url.path in OPEN_PATHS:
            return await call_next(request)

        # CORS preflight never carries credentials
        if request.method == "OPTIONS":
            return await call_next(request)

        if os.getenv("AUTH_ENABLED", "false").lower() != "true":
            return await call_next(request)

        keys = {k.strip() for k in os.getenv("API_KEYS", "").split(",") if k.strip()}
        auth = request.headers.get("Authorization", "")
        if not auth.startswith("Bearer "):
            return JSONResponse({"error": "Missing API key"}, status_code=401)
        token = auth.removeprefix("Bearer ").strip()
        if token not in keys:
            return JSONResponse({"error": "Invalid API key"}, status_code=403)

        request.state.api_key = token
        return await call_next(request)
