"""Admin authentication service.

Authorizes the single catalog admin. Credentials come from settings;
a successful login yields an HMAC-signed session token that expires
after the configured lifetime.

Token format: ``<subject>.<expires_at>.<nonce>.<sha256 hex digest>``
"""

import hashlib
import hmac
import secrets
import time
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from affiliate_catalog.domain.exceptions import AuthError
from affiliate_catalog.infrastructure.config import settings

logger = structlog.get_logger()

_PBKDF2_ITERATIONS = 100_000


@dataclass(frozen=True)
class AdminSession:
    """Issued admin session.

    Attributes:
        token: Signed session token.
        subject: Username the session was issued to.
        expires_at: Expiry as seconds since the epoch.
        max_age: Lifetime in seconds, for cookies.
    """

    token: str
    subject: str
    expires_at: int
    max_age: int


def _hash_secret(value: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", value.encode(), salt, _PBKDF2_ITERATIONS)


class AdminAuthenticator:
    """Checks admin credentials and issues/verifies session tokens.

    Uses HMAC-SHA256 for token signatures.
    """

    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        secret: str | None = None,
        ttl_seconds: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize authenticator.

        Args:
            username: Admin username.
            password: Admin password; only its salted hash is kept.
            secret: HMAC secret for session signatures.
            ttl_seconds: Session lifetime.
            clock: Source of the current time in epoch seconds.
        """
        self.username = username or settings.admin_username
        self.secret = secret or settings.session_secret
        self.ttl_seconds = ttl_seconds or settings.session_ttl_seconds
        self.clock = clock
        self._salt = secrets.token_bytes(16)
        self._password_hash = _hash_secret(password or settings.admin_password, self._salt)

    def login(self, username: str | None, password: str | None) -> AdminSession:
        """Exchange admin credentials for a session.

        Args:
            username: Submitted username.
            password: Submitted password.

        Returns:
            New AdminSession.

        Raises:
            AuthError: If the credentials do not match.
        """
        username_ok = hmac.compare_digest(
            (username or "").encode(),
            self.username.encode(),
        )
        password_ok = hmac.compare_digest(
            _hash_secret(password or "", self._salt),
            self._password_hash,
        )
        if not (username_ok and password_ok):
            logger.warning("Admin login rejected", username=username)
            raise AuthError("Invalid credentials")

        expires_at = int(self.clock()) + self.ttl_seconds
        body = f"{self.username}.{expires_at}.{secrets.token_hex(8)}"
        token = f"{body}.{self._sign(body)}"

        logger.info("Admin logged in", username=self.username, expires_at=expires_at)
        return AdminSession(
            token=token,
            subject=self.username,
            expires_at=expires_at,
            max_age=self.ttl_seconds,
        )

    def verify(self, token: str | None) -> str:
        """Verify a session token.

        Args:
            token: Token from a bearer header or cookie.

        Returns:
            The session subject.

        Raises:
            AuthError: If the token is missing, malformed, forged or expired.
        """
        if not token:
            raise AuthError("Missing session token")

        body, _, signature = token.rpartition(".")
        parts = body.rsplit(".", 2)
        if len(parts) != 3 or not signature:
            raise AuthError("Malformed session token")

        subject, expires_raw, _nonce = parts

        # Constant-time comparison
        if not hmac.compare_digest(self._sign(body).encode(), signature.encode()):
            logger.warning("Session signature mismatch", subject=subject)
            raise AuthError("Invalid session token")

        try:
            expires_at = int(expires_raw)
        except ValueError:
            raise AuthError("Malformed session token") from None

        if expires_at <= self.clock():
            raise AuthError("Session expired")

        if subject != self.username:
            raise AuthError("Invalid session token")

        return subject

    def _sign(self, body: str) -> str:
        return hmac.new(
            self.secret.encode(),
            body.encode(),
            hashlib.sha256,
        ).hexdigest()


# Global authenticator instance
_authenticator: AdminAuthenticator | None = None


def get_authenticator() -> AdminAuthenticator:
    """Get or create the admin authenticator instance.

    Returns:
        AdminAuthenticator built from settings.
    """
    global _authenticator
    if _authenticator is None:
        _authenticator = AdminAuthenticator()
    return _authenticator
