from fastapi import APIRouter, HTTPException, status, Depends
from sqlalchemy.orm import Session

from api.config import get_db
from api.schemas.auth_schemas import LoginRequest, RegisterRequest, TokenResponse
from api.schemas.user_schemas import User
from api.utils.auth import authenticate_user, create_user, get_current_user, get_user_by_email
from api.utils.jwt import create_access_token

auth_routes = APIRouter()


@auth_routes.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)) -> TokenResponse:
    """Authenticate user and return a bearer token."""
    user = authenticate_user(request.email, request.password, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password"
        )
    return TokenResponse(access_token=create_access_token(user.email))


@auth_routes.post("/register", response_model=TokenResponse)
def register(request: RegisterRequest, db: Session = Depends(get_db)) -> TokenResponse:
    """Register a new user and return a bearer token."""
    if get_user_by_email(request.email, db):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    if request.password != request.confirm_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Passwords do not match"
        )

    user = create_user(request.email, request.password, db)
    return TokenResponse(access_token=create_access_token(user.email))


@auth_routes.get("/me", response_model=User)
def get_current_user_info(current_user: User = Depends(get_current_user)) -> User:
    """Current user resolved from the bearer token."""
    return current_user
