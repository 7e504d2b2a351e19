import base64
import hashlib
import hmac
from typing import Dict, Optional
from urllib.parse import quote, unquote

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

SIGNED_PREFIX = "s:"


def _signature(value: str, secret: str) -> str:
    digest = hmac.new(secret.encode(), value.encode(), hashlib.sha256).digest()
    return base64.b64encode(digest).decode().rstrip("=")


def sign_cookie(value: str, secret: str) -> str:
    """Sign a cookie value as `s:<value>.<signature>`, percent-encoded for the header."""
    return quote(f"{SIGNED_PREFIX}{value}.{_signature(value, secret)}", safe="")


def unsign_cookie(raw: str, secret: str) -> Optional[str]:
    """Return the original value of a signed cookie, or None if it is unsigned or tampered."""
    signed = unquote(raw)
    if not signed.startswith(SIGNED_PREFIX):
        return None
    value, sep, signature = signed[len(SIGNED_PREFIX):].rpartition(".")
    if not sep:
        return None
    if not hmac.compare_digest(signature.encode(), _signature(value, secret).encode()):
        return None
    return value


class SignedCookieMiddleware(BaseHTTPMiddleware):
    """Exposes verified signed cookies on `request.state.signed_cookies`."""

    def __init__(self, app, secret: str):
        super().__init__(app)
        self.secret = secret

    async def dispatch(self, request: Request, call_next):
        signed: Dict[str, str] = {}
        for name, raw in request.cookies.items():
            value = unsign_cookie(raw, self.secret)
            if value is not None:
                signed[name] = value
        request.state.signed_cookies = signed
        return await call_next(request)
