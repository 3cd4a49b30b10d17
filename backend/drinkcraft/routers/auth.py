from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from ..errors import GENERIC_ERROR_MESSAGE
from ..schemas import (
    AuthSessionResponse,
    PasswordStrengthRequest,
    PasswordStrengthResponse,
    SignInRequest,
    SignUpRequest,
)
from ..services.auth_backend import AuthBackendConfigurationError, AuthSession
from ..services.auth_flow import AuthFlow, AuthFlowError, RateLimitedError
from ..validation import (
    PASSWORD_MAX_SCORE,
    password_strength_label,
    password_strength_percent,
    validate_password_strength,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger("drinkcraft.auth")


def get_auth_flow(request: Request) -> AuthFlow:
    return request.app.state.auth_flow


def _client_ip_from_request(request: Request) -> str:
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def _session_response(session: AuthSession) -> AuthSessionResponse:
    return AuthSessionResponse(
        user_id=session.user_id,
        email=session.email,
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        token_type=session.token_type,
        expires_in=session.expires_in,
        confirmation_required=session.confirmation_required,
    )


def _to_http_error(exc: Exception, path: str) -> HTTPException:
    if isinstance(exc, RateLimitedError):
        return HTTPException(status_code=429, detail=exc.message, headers={"Retry-After": str(exc.retry_after)})
    if isinstance(exc, AuthFlowError):
        return HTTPException(status_code=exc.status_code, detail=exc.message)
    if isinstance(exc, AuthBackendConfigurationError):
        logger.error(
            "Auth backend configuration error",
            extra={"event": "auth_configuration_error", "reason": str(exc), "path": path},
        )
        return HTTPException(status_code=503, detail="Auth service is not configured")

    logger.error(
        "Auth backend call failed",
        exc_info=exc,
        extra={"event": "auth_backend_failed", "path": path},
    )
    return HTTPException(status_code=502, detail=GENERIC_ERROR_MESSAGE)


@router.post("/signin", response_model=AuthSessionResponse)
async def sign_in(
    payload: SignInRequest,
    request: Request,
    flow: AuthFlow = Depends(get_auth_flow),
) -> AuthSessionResponse:
    try:
        session = await flow.sign_in(payload.email, payload.password, client=_client_ip_from_request(request))
    except Exception as exc:
        raise _to_http_error(exc, "/api/auth/signin") from exc
    return _session_response(session)


@router.post("/signup", response_model=AuthSessionResponse)
async def sign_up(
    payload: SignUpRequest,
    request: Request,
    flow: AuthFlow = Depends(get_auth_flow),
) -> AuthSessionResponse:
    try:
        session = await flow.sign_up(
            payload.email,
            payload.password,
            payload.display_name,
            client=_client_ip_from_request(request),
        )
    except Exception as exc:
        raise _to_http_error(exc, "/api/auth/signup") from exc
    return _session_response(session)


@router.post("/password-strength", response_model=PasswordStrengthResponse)
async def password_strength(payload: PasswordStrengthRequest) -> PasswordStrengthResponse:
    """Score a password as the user types it; nothing is stored or logged."""

    strength = validate_password_strength(payload.password)
    return PasswordStrengthResponse(
        score=strength.score,
        max_score=PASSWORD_MAX_SCORE,
        percent=password_strength_percent(strength.score),
        label=password_strength_label(strength.score),
        is_strong=strength.is_strong,
        feedback=strength.feedback,
    )
