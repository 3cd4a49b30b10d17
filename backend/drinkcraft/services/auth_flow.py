from __future__ import annotations

import logging
import math

from ..errors import format_secure_error_message
from ..metrics import AUTH_ATTEMPTS_TOTAL, AUTH_RATE_LIMITED_TOTAL
from ..rate_limit import AttemptLimiter
from ..validation import is_valid_email, sanitize_text, validate_password_strength
from .auth_backend import AuthBackend, AuthSession

logger = logging.getLogger("drinkcraft.auth")

SIGN_IN_ACTION = "signin"
SIGN_UP_ACTION = "signup"


class AuthFlowError(Exception):
    """Base error for a rejected auth form submission."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RateLimitedError(AuthFlowError):
    status_code = 429

    def __init__(self, message: str, retry_after: int) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class InvalidInputError(AuthFlowError):
    status_code = 400


class AuthRejectedError(AuthFlowError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthFlow:
    """Gates sign-in and sign-up submissions before they reach the auth backend."""

    def __init__(self, limiter: AttemptLimiter, backend: AuthBackend, display_name_max_length: int = 50) -> None:
        self.limiter = limiter
        self.backend = backend
        self.display_name_max_length = display_name_max_length

    def _check_rate_limit(self, action: str, client: str, label: str) -> None:
        # Attempts are counted per client, never across the whole service.
        key = f"{action}:{client}"
        if self.limiter.is_allowed(key):
            return

        remaining = self.limiter.remaining_lockout_seconds(key)
        AUTH_RATE_LIMITED_TOTAL.labels(action=action).inc()
        AUTH_ATTEMPTS_TOTAL.labels(action=action, outcome="rate_limited").inc()
        logger.info(
            "Auth attempt rate limited",
            extra={
                "event": "auth_rate_limited",
                "action": action,
                "ip": client,
                "reason": f"retry_after={remaining}",
            },
        )
        raise RateLimitedError(
            f"Too many {label} attempts. Please try again in {math.ceil(remaining / 60)} minutes.",
            retry_after=remaining,
        )

    def _check_email(self, action: str, email: str) -> None:
        if not is_valid_email(email):
            AUTH_ATTEMPTS_TOTAL.labels(action=action, outcome="invalid_input").inc()
            raise InvalidInputError("Please enter a valid email address")

    async def sign_in(self, email: str, password: str, client: str = "unknown") -> AuthSession:
        self._check_rate_limit(SIGN_IN_ACTION, client, "sign-in")
        self._check_email(SIGN_IN_ACTION, email)

        result = await self.backend.sign_in(email, password)
        if result.error is not None or result.session is None:
            AUTH_ATTEMPTS_TOTAL.labels(action=SIGN_IN_ACTION, outcome="rejected").inc()
            logger.info(
                "Sign-in rejected by auth backend",
                extra={"event": "signin_rejected", "status": result.error.status if result.error else None},
            )
            raise AuthRejectedError(format_secure_error_message(result.error), status_code=401)

        AUTH_ATTEMPTS_TOTAL.labels(action=SIGN_IN_ACTION, outcome="success").inc()
        logger.info("User signed in", extra={"event": "signin_success", "user_id": result.session.user_id})
        return result.session

    async def sign_up(
        self, email: str, password: str, display_name: str = "", client: str = "unknown"
    ) -> AuthSession:
        self._check_rate_limit(SIGN_UP_ACTION, client, "sign-up")
        self._check_email(SIGN_UP_ACTION, email)

        if not validate_password_strength(password).is_strong:
            AUTH_ATTEMPTS_TOTAL.labels(action=SIGN_UP_ACTION, outcome="invalid_input").inc()
            raise InvalidInputError("Please create a stronger password")

        clean_name = sanitize_text(display_name, self.display_name_max_length)
        result = await self.backend.sign_up(email, password, clean_name)
        if result.error is not None or result.session is None:
            AUTH_ATTEMPTS_TOTAL.labels(action=SIGN_UP_ACTION, outcome="rejected").inc()
            logger.info(
                "Sign-up rejected by auth backend",
                extra={"event": "signup_rejected", "status": result.error.status if result.error else None},
            )
            raise AuthRejectedError(format_secure_error_message(result.error))

        AUTH_ATTEMPTS_TOTAL.labels(action=SIGN_UP_ACTION, outcome="success").inc()
        logger.info("User signed up", extra={"event": "signup_success", "user_id": result.session.user_id})
        return result.session
