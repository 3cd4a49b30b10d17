from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Header, HTTPException
import jwt

from .config import settings


@dataclass(frozen=True)
class AuthContext:
    user_id: str
    email: str


def decode_token(token: str) -> AuthContext:
    """Verify an access token issued by the auth backend."""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience or None,
        )
    except jwt.ExpiredSignatureError as exc:
        raise HTTPException(status_code=401, detail="Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Malformed token payload")

    return AuthContext(user_id=str(user_id), email=str(payload.get("email") or ""))


def get_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing Authorization header")

    parts = authorization.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid Authorization header")
    return parts[1].strip()


def auth_context_from_header(authorization: Optional[str] = Header(default=None)) -> AuthContext:
    token = get_bearer_token(authorization)
    return decode_token(token)
