from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi import HTTPException, status
from jose import JWTError
from jose.jwt import encode, decode

from api.config import settings
from api.schemas.auth_schemas import AuthTokenPayload


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
    except ValueError:
        # malformed stored hash
        return False

def get_password_hash(password: str) -> str:
    """Hash a password for storing."""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')

def create_access_token(subject: str, expires_minutes: Optional[int] = None) -> str:
    """Create a signed JWT access token for `subject` (the user's email)."""
    minutes = expires_minutes if expires_minutes is not None else settings.access_token_expire_minutes
    payload = AuthTokenPayload(sub=subject, exp=datetime.now(timezone.utc) + timedelta(minutes=minutes))
    return encode(payload.model_dump(), settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

def verify_token(token: Optional[str]) -> AuthTokenPayload:
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token")
    try:
        payload = decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        return AuthTokenPayload(**payload)
    except JWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
