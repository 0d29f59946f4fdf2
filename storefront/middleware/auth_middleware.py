import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from jose import JWTError
from typing import Optional
from storefront.auth.utils import decode_access_token, session_from_payload

logger = logging.getLogger(__name__)


class AuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request.state.user = None  # default

        auth: Optional[str] = request.headers.get("Authorization")
        token = None
        if auth and auth.lower().startswith("bearer "):
            token = auth.split(" ", 1)[1].strip()

        if token:
            try:
                payload = decode_access_token(token)
                request.state.user = session_from_payload(payload)
            except JWTError as e:
                logger.debug("Rejected bearer token: %s", e)
                request.state.user = None

        response = await call_next(request)
        return response
