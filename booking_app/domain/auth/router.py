"""Auth router - FastAPI endpoints for registration, login and profile"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...auth import get_current_user, get_optional_user
from ...authorization import Operation, enforce
from ...credentials import CredentialService, get_credential_service
from ...database import get_db
from ...models import User
from .schemas import (
    AdminSignupRequest,
    AuthResponse,
    LoginRequest,
    MeResponse,
    SignupRequest,
    UserResponse,
)
from .service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])
me_router = APIRouter(tags=["Users"])


def get_auth_service(
    db: Session = Depends(get_db),
    credentials: CredentialService = Depends(get_credential_service),
) -> AuthService:
    """Dependency injection for AuthService"""
    return AuthService(db, credentials)


def user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        createdAt=user.created_at,
    )


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(data: SignupRequest, service: AuthService = Depends(get_auth_service)):
    """Register a new CLIENT or PROVIDER account"""
    user, token = service.signup(data)
    return AuthResponse(user=user_response(user), token=token)


@router.post("/login", response_model=AuthResponse)
async def login(data: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Authenticate with email and password and receive a bearer token"""
    user, token = service.login(data)
    return AuthResponse(user=user_response(user), token=token)


@router.post("/admin-signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def admin_signup(
    data: AdminSignupRequest,
    caller: Optional[User] = Depends(get_optional_user),
    service: AuthService = Depends(get_auth_service),
):
    """Create an ADMIN account (requires an ADMIN token once the first admin exists)"""
    user, token = service.admin_signup(data, caller)
    return AuthResponse(user=user_response(user), token=token)


@router.post("/admin-login", response_model=AuthResponse)
async def admin_login(data: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Authenticate an ADMIN account"""
    user, token = service.login(data, admin_only=True)
    return AuthResponse(user=user_response(user), token=token)


@me_router.get("/me", response_model=MeResponse)
async def read_me(current_user: User = Depends(get_current_user)):
    """Get the profile of the authenticated user"""
    enforce(current_user, Operation.READ_PROFILE)
    return MeResponse(user=user_response(current_user))
