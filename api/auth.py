"""JWT bearer authentication for the HTTP routes."""
from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from config.settings import settings


logger = logging.getLogger(__name__)

security_scheme = HTTPBearer(auto_error=False)


def create_access_token(user_id: str, expires_delta: Optional[dt.timedelta] = None) -> str:
    """Issue a signed token whose ``userId`` claim identifies the caller."""

    now = dt.datetime.now(dt.timezone.utc)
    expire = now + (expires_delta or dt.timedelta(minutes=settings.JWT_EXPIRE_MINUTES))
    claims: Dict[str, Any] = {"userId": user_id, "iat": now, "exp": expire}
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_user_id(token: str) -> Optional[str]:
    """Return the user id carried by ``token``, or None if it does not verify."""

    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as exc:
        logger.info("JWT rejected: %s", exc)
        return None
    user_id = payload.get("userId") or payload.get("sub")
    return str(user_id) if user_id else None


def current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> str:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user_id = decode_user_id(credentials.credentials)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is not valid",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


__all__ = ["create_access_token", "current_user_id", "decode_user_id", "security_scheme"]
