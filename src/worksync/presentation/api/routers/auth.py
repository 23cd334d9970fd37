"""Authentication router: login and token introspection."""

import logging

from fastapi import APIRouter, HTTPException, status

from worksync.presentation.api.dependencies import AuthService, BearerCredentials
from worksync.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MeResponse,
)
from worksync.presentation.api.schemas.common import ErrorResponse
from worksync.presentation.api.schemas.users import UserResponse
from worksync_auth import InvalidTokenError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Username or password missing"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(request: LoginRequest, auth_service: AuthService) -> LoginResponse:
    """
    Authenticate with username and password.

    Returns the user's identity (never the password) and a bearer token
    for subsequent requests.
    """
    result = await auth_service.login(request.username, request.password)
    return LoginResponse(
        token=result.token,
        expires_in=result.expires_in,
        user=UserResponse.from_domain(result.identity),
    )


@router.get(
    "/me",
    summary="Get the current user",
    responses={
        200: {"description": "User of the token"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        404: {"model": ErrorResponse, "description": "User no longer exists"},
    },
)
async def me(credentials: BearerCredentials, auth_service: AuthService) -> MeResponse:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user = await auth_service.current_user(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token on /me: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    return MeResponse(user=UserResponse.from_domain(user))
