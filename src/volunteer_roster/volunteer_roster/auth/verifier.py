from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol

from google.auth import exceptions as google_auth_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from ..core.exceptions import AuthenticationError, AuthorizationError, UpstreamError

logger = logging.getLogger(__name__)


class TokenVerifier(Protocol):
    @property
    def enabled(self) -> bool:
        raise NotImplementedError

    def verify(self, token: str) -> str:
        """Return the verified identity (e-mail) or raise AuthenticationError."""

        raise NotImplementedError


class GoogleTokenVerifier:
    """Verifies Google-issued ID tokens sent as bearer tokens by the dashboard.

    Disabled when no client id is configured.
    """

    def __init__(self, client_id: str, *, allowed_emails: Optional[Iterable[str]] = None):
        self._client_id = client_id
        self._allowed = {e.strip().lower() for e in (allowed_emails or []) if e.strip()}
        self._request = google_requests.Request()

    @property
    def enabled(self) -> bool:
        return bool(self._client_id)

    def verify(self, token: str) -> str:
        if not token:
            raise AuthenticationError("Missing bearer token")
        try:
            claims = id_token.verify_oauth2_token(token, self._request, audience=self._client_id)
        except google_auth_exceptions.TransportError as exc:
            logger.error("Could not fetch Google signing certificates: %s", exc)
            raise UpstreamError("Token verification is unavailable") from exc
        except (ValueError, google_auth_exceptions.GoogleAuthError) as exc:
            logger.info("Rejected bearer token: %s", exc)
            raise AuthenticationError("Invalid bearer token") from exc

        email = str(claims.get("email") or "").lower()
        if not email or not claims.get("email_verified", False):
            raise AuthenticationError("Token has no verified e-mail")
        if self._allowed and email not in self._allowed:
            raise AuthorizationError("This account may not record attendance")
        return email


def bearer_token(authorization: Optional[str]) -> str:
    """Extract the token from an "Authorization: Bearer <token>" header."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()
