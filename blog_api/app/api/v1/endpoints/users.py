"""
User endpoints for API v1.

Provide registration, login and the current user's profile.  Tokens
issued by ``/login`` authenticate the post write endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from blog_api.app.core.errors import ValidationError
from blog_api.app.core.security import create_access_token, get_current_user
from blog_api.app.schemas.user import Token, UserCreate, UserLogin, UserRead
from blog_api.app.services.user_service import EmailTakenError, UserService

router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user: UserCreate) -> UserRead:
    """Register a new user.

    Returns 422 when the payload is invalid or the email is already
    registered.
    """
    try:
        return await UserService.create_user(user)
    except EmailTakenError as e:
        raise ValidationError(errors={"email": ["The email has already been taken."]}) from e


@router.post("/login", response_model=Token)
async def login_user(credentials: UserLogin) -> Token:
    """Exchange an email and password for a bearer token."""
    db_user = await UserService.authenticate(credentials.email, credentials.password)
    if not db_user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return Token(access_token=create_access_token({"sub": db_user.email}))


@router.get("/me", response_model=UserRead)
async def read_current_user(current_user: dict = Depends(get_current_user)) -> UserRead:
    return UserRead(
        id=current_user["user_id"],
        name=current_user["name"],
        email=current_user["email"],
    )
