"""
Caller identity from bearer tokens.

Tokens are issued elsewhere; this service only signs (for tooling) and
verifies them. The ``sub`` claim is the resume owner identifier.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from ..config import get_settings
from ..exceptions import AuthenticationError

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_user_id(token: str) -> str:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        raise AuthenticationError("Not authorized, invalid token") from e

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Not authorized, invalid token")
    return str(user_id)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """FastAPI dependency returning the authenticated caller's id."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authorized, token missing")
    return decode_user_id(credentials.credentials)
