"""Authentication endpoints: registration, login and current-user introspection."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from insureclaim.api.deps import get_current_user, get_db
from insureclaim.api.schemas.auth import AuthResponse, CurrentUserResponse, LoginRequest, RegisterRequest
from insureclaim.db.models.user import User
from insureclaim.services import auth as auth_service
from insureclaim.services.auth import IssuedToken

router = APIRouter(prefix="/auth", tags=["Auth"])


def _auth_response(issued: IssuedToken) -> AuthResponse:
    return AuthResponse(
        user_id=issued.user.id,
        full_name=issued.user.full_name,
        email=issued.user.email,
        role=issued.user.role,
        access_token=issued.access_token,
        token_type="bearer",
        expires_at=issued.expires_at,
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db, scope="function"),
) -> AuthResponse:
    """Create an account and return an access token for it."""
    issued = await auth_service.register(
        db,
        full_name=payload.full_name,
        email=payload.email,
        password=payload.password,
        phone_number=payload.phone_number,
        role=payload.role,
    )
    return _auth_response(issued)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db, scope="function"),
) -> AuthResponse:
    """Authenticate a user and issue an access token."""
    issued = await auth_service.login(db, email=payload.email, password=payload.password)
    return _auth_response(issued)


@router.get("/me", response_model=CurrentUserResponse)
async def read_current_user(current_user: User = Depends(get_current_user)) -> CurrentUserResponse:

    """Return the currently authenticated active user."""
    return CurrentUserResponse.from_model(current_user)
