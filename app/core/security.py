"""
Password hashing and the JWTs that identify a job owner.

Both token kinds carry the user id in `sub`; refresh tokens are marked with
`type: refresh` and are refused wherever an access token is expected.
"""

from datetime import datetime, timedelta
from typing import Optional
from jose import jwt
from passlib.context import CryptContext
from app.core.config import settings

REFRESH_TOKEN_TYPE = "refresh"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def _bcrypt_input(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes
    return password.encode('utf-8')[:72]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(_bcrypt_input(plain_password), hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(_bcrypt_input(password))


def _encode(user_id: str, lifetime: timedelta, **extra_claims) -> str:
    claims = {"sub": user_id, "exp": datetime.utcnow() + lifetime, **extra_claims}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign an access token for `user_id`.

    Lifetime defaults to ACCESS_TOKEN_EXPIRE_MINUTES; a negative delta yields
    an already-expired token.
    """
    lifetime = expires_delta if expires_delta is not None else timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return _encode(user_id, lifetime)


def create_refresh_token(user_id: str) -> str:
    return _encode(user_id, timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS), type=REFRESH_TOKEN_TYPE)


def decode_token(token: str) -> dict:
    """
    Verify signature and expiry and return the claims.

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def is_refresh_token(claims: dict) -> bool:
    return claims.get("type") == REFRESH_TOKEN_TYPE
