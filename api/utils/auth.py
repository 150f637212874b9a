from typing import Optional
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from api.models.models import User as DbUser
from api.schemas.user_schemas import User
from api.utils.jwt import verify_token, get_password_hash, verify_password
from api.config import get_db
from api.utils.logger import configure_logging

logger = configure_logging()

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the bearer credential to a user. Every failure is a 401."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = verify_token(credentials.credentials)
    user = get_user_by_email(payload.sub, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found"
        )
    return User(id=user.id, email=user.email, preferences=user.preferences)


def get_user_by_email(email: str, db: Session) -> DbUser | None:
    return db.query(DbUser).filter(DbUser.email == email).first()

def create_user(email: str, password: str, db: Session) -> DbUser:
    logger.info("creating user email=%s", email)
    user = DbUser(email=email, hashed_password=get_password_hash(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user

def authenticate_user(email: str, password: str, db: Session) -> DbUser | None:
    user = get_user_by_email(email, db)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user
