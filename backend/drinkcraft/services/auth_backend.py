from __future__ import annotations

import asyncio
from dataclasses import dataclass
from functools import lru_cache
import logging
from typing import Any, Optional, Protocol
from urllib.parse import urlencode

import aiohttp

from ..config import settings

logger = logging.getLogger("drinkcraft.auth_backend")

NETWORK_ERROR_MESSAGE = "Network error"


class AuthBackendConfigurationError(RuntimeError):
    """Raised when the auth backend URL or API key is missing."""


@dataclass(frozen=True)
class AuthSession:
    user_id: str
    email: str
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    expires_in: Optional[int] = None

    @property
    def confirmation_required(self) -> bool:
        return self.access_token is None


@dataclass(frozen=True)
class AuthError:
    message: str
    status: Optional[int] = None


@dataclass(frozen=True)
class AuthResponse:
    session: Optional[AuthSession] = None
    error: Optional[AuthError] = None

    @classmethod
    def failure(cls, message: str, status: Optional[int] = None) -> AuthResponse:
        return cls(error=AuthError(message=message, status=status))


class AuthBackend(Protocol):
    async def sign_in(self, email: str, password: str) -> AuthResponse: ...

    async def sign_up(self, email: str, password: str, display_name: str) -> AuthResponse: ...


@dataclass(frozen=True)
class SupabaseRuntimeConfig:
    url: str
    anon_key: str
    timeout_seconds: float
    redirect_url: str


class SupabaseAuthBackend:
    """Email/password auth against a Supabase (GoTrue) REST endpoint."""

    def __init__(self, cfg: SupabaseRuntimeConfig) -> None:
        self._cfg = cfg

    def _headers(self) -> dict[str, str]:
        if not self._cfg.url or not self._cfg.anon_key:
            raise AuthBackendConfigurationError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")
        return {
            "apikey": self._cfg.anon_key,
            "Authorization": f"Bearer {self._cfg.anon_key}",
            "Content-Type": "application/json",
        }

    async def _post_json(self, path: str, payload: dict[str, Any]) -> tuple[int, Any]:
        headers = self._headers()
        timeout = aiohttp.ClientTimeout(total=self._cfg.timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(f"{self._cfg.url}{path}", json=payload, headers=headers) as response:
                try:
                    data = await response.json(content_type=None)
                except ValueError:
                    data = None
                return response.status, data

    @staticmethod
    def _error_message(data: Any) -> str:
        if isinstance(data, dict):
            for key in ("msg", "error_description", "message", "error"):
                value = data.get(key)
                if isinstance(value, str) and value.strip():
                    return value.strip()
        return "Auth request failed"

    @staticmethod
    def _parse_session(data: Any) -> Optional[AuthSession]:
        if not isinstance(data, dict):
            return None

        # Sign-up without auto-confirm returns the bare user object.
        user = data.get("user") if isinstance(data.get("user"), dict) else data
        user_id = str(user.get("id") or "").strip()
        if not user_id:
            return None

        expires_in = data.get("expires_in")
        return AuthSession(
            user_id=user_id,
            email=str(user.get("email") or ""),
            access_token=data.get("access_token") or None,
            refresh_token=data.get("refresh_token") or None,
            token_type=str(data.get("token_type") or "bearer"),
            expires_in=int(expires_in) if isinstance(expires_in, (int, float)) else None,
        )

    async def _request(self, action: str, path: str, payload: dict[str, Any]) -> AuthResponse:
        try:
            status, data = await self._post_json(path, payload)
        except asyncio.TimeoutError:
            logger.warning("Auth backend timeout", extra={"event": "auth_backend_timeout", "action": action})
            return AuthResponse.failure(NETWORK_ERROR_MESSAGE)
        except aiohttp.ClientError as exc:
            logger.warning(
                "Auth backend unreachable",
                extra={"event": "auth_backend_unreachable", "action": action, "reason": exc.__class__.__name__},
            )
            return AuthResponse.failure(NETWORK_ERROR_MESSAGE)

        if status >= 400:
            return AuthResponse.failure(self._error_message(data), status=status)

        session = self._parse_session(data)
        if session is None:
            logger.error(
                "Auth backend returned an unexpected payload",
                extra={"event": "auth_backend_bad_payload", "action": action, "status": status},
            )
            return AuthResponse.failure("Unexpected auth response", status=status)
        return AuthResponse(session=session)

    async def sign_in(self, email: str, password: str) -> AuthResponse:
        return await self._request(
            "signin",
            "/auth/v1/token?grant_type=password",
            {"email": email, "password": password},
        )

    async def sign_up(self, email: str, password: str, display_name: str) -> AuthResponse:
        path = "/auth/v1/signup"
        if self._cfg.redirect_url:
            path = f"{path}?{urlencode({'redirect_to': self._cfg.redirect_url})}"
        payload = {"email": email, "password": password, "data": {"display_name": display_name}}
        return await self._request("signup", path, payload)


@lru_cache(maxsize=1)
def get_auth_backend() -> SupabaseAuthBackend:
    return SupabaseAuthBackend(
        SupabaseRuntimeConfig(
            url=settings.supabase_url,
            anon_key=settings.supabase_anon_key,
            timeout_seconds=settings.auth_timeout,
            redirect_url=f"{settings.frontend_url.rstrip('/')}/" if settings.frontend_url else "",
        )
    )
