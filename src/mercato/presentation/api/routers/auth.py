"""Authentication router for registration, login and the current user."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from mercato.domain.user import User
from mercato.presentation.api.config import get_api_settings
from mercato.presentation.api.dependencies import AuthService, CurrentUser, DBSession
from mercato.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from mercato_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def _create_auth_response(
    user: User,
    access_token: str,
    settings: Settings,
) -> AuthResponse:
    return AuthResponse(
        user=UserResponse.from_domain(user),
        access_token=access_token,
        expires_in=settings.jwt_access_token_expire_hours * 3600,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Weak password"},
        403: {"description": "Role cannot be self-assigned"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Create an account and return an access token.

    The role defaults to ``client``; ``seller`` may be requested.
    """
    try:
        user, access_token = await auth_service.register(
            email=request.email,
            password=request.password,
            name=request.name,
            role=request.role,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _create_auth_response(user, access_token, settings)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Wrong password"},
        404: {"description": "No user with this email"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    try:
        user, access_token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _create_auth_response(user, access_token, settings)


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user data"},
        401: {"description": "Not authenticated"},
    },
)
async def get_me(user: CurrentUser) -> UserResponse:
    """Get the authenticated user's public profile."""
    return UserResponse.from_domain(user)
