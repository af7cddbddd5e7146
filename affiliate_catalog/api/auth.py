"""Admin authentication endpoints.

Provides login/logout and the dependency that guards admin-only
endpoints. A session token is accepted either as
``Authorization: Bearer <token>`` or from the session cookie.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status

from affiliate_catalog.api.schemas import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
)
from affiliate_catalog.application.auth_service import (
    AdminAuthenticator,
    get_authenticator,
)
from affiliate_catalog.domain.exceptions import AuthError
from affiliate_catalog.infrastructure.config import settings

logger = structlog.get_logger()

router = APIRouter(prefix="/api/auth", tags=["Auth"])


# ============================================================================
# Dependencies
# ============================================================================


def _bearer_token(authorization: str | None) -> str | None:
    """Extract the token from a Bearer Authorization header."""
    if not authorization:
        return None
    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip()


def require_admin(
    request: Request,
    authenticator: Annotated[AdminAuthenticator, Depends(get_authenticator)],
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """Require a valid admin session.

    Args:
        request: Incoming request, for the session cookie.
        authenticator: Admin authenticator.
        authorization: Authorization header value.

    Returns:
        The authenticated admin's username.

    Raises:
        HTTPException: 401 if no valid session is presented.
    """
    token = _bearer_token(authorization) or request.cookies.get(settings.session_cookie_name)

    try:
        subject = authenticator.verify(token)
    except AuthError as e:
        logger.warning(
            "Admin authorization failed",
            path=request.url.path,
            method=request.method,
            reason=e.message,
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None

    request.state.admin = subject
    return subject


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Admin login",
    description="Exchange admin credentials for a session token and cookie.",
)
async def login(
    payload: LoginRequest,
    response: Response,
    authenticator: Annotated[AdminAuthenticator, Depends(get_authenticator)],
) -> LoginResponse:
    """Log the admin in.

    On success the token is returned in the body and also set as an
    HttpOnly cookie scoped to the whole site.

    Args:
        payload: Username and password.
        response: Outgoing response, for the cookie.
        authenticator: Admin authenticator.

    Returns:
        Login confirmation with the session token.

    Raises:
        HTTPException: 401 on bad credentials.
    """
    try:
        session = authenticator.login(payload.username, payload.password)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from None

    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=session.max_age,
        path="/",
        httponly=True,
        samesite="lax",
    )

    return LoginResponse(message="Login successful", token=session.token)


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Admin logout",
    description="Clear the session cookie.",
)
async def logout(response: Response) -> MessageResponse:
    """Clear the admin session cookie."""
    response.delete_cookie(key=settings.session_cookie_name, path="/")
    return MessageResponse(message="Logout successful")
