"""Application layer module.

Contains application services that sit between the API and the
catalog, such as admin authentication.
"""

from affiliate_catalog.application.auth_service import (
    AdminAuthenticator,
    AdminSession,
    get_authenticator,
)

__all__ = [
    "AdminAuthenticator",
    "AdminSession",
    "get_authenticator",
]
