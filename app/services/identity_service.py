"""
app/services/identity_service.py

Purpose: Identity provider integration (Firebase)

- Verifies a bearer ID token by resolving it to an account
- Returns the account's UID, email and display name
- No token cryptography here; the provider is the authority
"""

import httpx
from typing import Optional

from app.core.config import settings
from app.core.exceptions import AuthenticationError, ExternalServiceError
from app.core.logging import get_logger
from app.schemas.auth import Identity
from utils.constants import ERR_IDENTITY_UNAVAILABLE, ERR_INVALID_TOKEN

logger = get_logger(__name__)


class IdentityProvider:
    """
    Interface for anything that turns a bearer token into an Identity.
    """

    async def verify_token(self, token: str) -> Identity:
        raise NotImplementedError


class FirebaseIdentityProvider(IdentityProvider):
    """
    Resolves Firebase ID tokens through the Identity Toolkit accounts:lookup API.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        lookup_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key or settings.FIREBASE_API_KEY
        self._lookup_url = lookup_url or settings.IDENTITY_LOOKUP_URL
        self._timeout = timeout or settings.IDENTITY_TIMEOUT
        self._transport = transport

    async def verify_token(self, token: str) -> Identity:
        """
        Verifies an ID token.

        Args:
            token: Raw ID token from the Authorization header

        Returns:
            Identity of the account the token belongs to

        Raises:
            AuthenticationError: If the token is rejected
            ExternalServiceError: If the provider cannot be reached
        """
        if not self._api_key:
            logger.error("FIREBASE_API_KEY is not configured")
            raise ExternalServiceError(ERR_IDENTITY_UNAVAILABLE)

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    self._lookup_url,
                    params={"key": self._api_key},
                    json={"idToken": token},
                )
        except httpx.TimeoutException:
            logger.error("Identity provider timeout")
            raise ExternalServiceError(ERR_IDENTITY_UNAVAILABLE)
        except httpx.RequestError as e:
            logger.error(f"Network error contacting identity provider: {e}")
            raise ExternalServiceError(ERR_IDENTITY_UNAVAILABLE)

        if response.status_code == 400:
            reason = _error_reason(response)
            logger.info(f"Identity token rejected: {reason}")
            raise AuthenticationError(ERR_INVALID_TOKEN, details={"reason": reason})

        if response.status_code != 200:
            logger.error(f"Identity lookup failed with status {response.status_code}")
            raise ExternalServiceError(ERR_IDENTITY_UNAVAILABLE)

        users = response.json().get("users") or []
        if not users:
            raise AuthenticationError(ERR_INVALID_TOKEN)

        account = users[0]
        if account.get("disabled"):
            raise AuthenticationError("Account is disabled")

        return Identity(
            uid=account["localId"],
            email=account.get("email"),
            name=account.get("displayName"),
        )


def _error_reason(response: httpx.Response) -> str:
    try:
        return response.json().get("error", {}).get("message", "UNKNOWN")
    except ValueError:
        return "UNKNOWN"


# Global provider instance
_identity_provider: Optional[IdentityProvider] = None


def get_identity_provider() -> IdentityProvider:
    """
    FastAPI dependency returning the configured identity provider.
    Tests override this with a fake provider.
    """
    global _identity_provider
    if _identity_provider is None:
        _identity_provider = FirebaseIdentityProvider()
    return _identity_provider
