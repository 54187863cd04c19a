"""Auth endpoints."""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from safecircle.core.deps import CurrentClaims, get_token_service
from safecircle.core.errors import NotFound
from safecircle.core.security import TokenService
from safecircle.db.session import get_db
from safecircle.models.user import User
from safecircle.schemas.auth import LoginRequest, LoginResponse, RegisteredUser, RegisterRequest, RegisterResponse
from safecircle.schemas.user import UserPublic
from safecircle.services.auth_service import authenticate_user, create_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """Register a new user."""
    user = create_user(db, data, rounds=request.app.state.settings.bcrypt_rounds)
    return RegisterResponse(
        message="User registered successfully",
        user=RegisteredUser.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """Login and return an access token with the user's public profile."""
    user = authenticate_user(db, data.email, data.password)
    token = tokens.issue(user.id, user.email)
    return LoginResponse(user=UserPublic.model_validate(user), access_token=token)


@router.get("/me", response_model=UserPublic)
def me(claims: CurrentClaims, db: Session = Depends(get_db)):
    """Get current authenticated user."""
    user = db.get(User, claims.user_id)
    if not user:
        raise NotFound("User not found")
    return user
