from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Ordered: the first needle found in the backend message wins.
SECURE_ERROR_MESSAGES: tuple[tuple[str, str], ...] = (
    ("Invalid login credentials", "Invalid email or password"),
    ("User already registered", "An account with this email already exists"),
    ("Email not confirmed", "Please check your email and confirm your account"),
    ("Password too weak", "Password does not meet security requirements"),
    ("Rate limit exceeded", "Too many attempts. Please try again later"),
    ("Network error", "Connection error. Please check your internet connection"),
)

GENERIC_ERROR_MESSAGE = "An error occurred. Please try again or contact support if the problem persists"


def _error_text(error: Any) -> str:
    if isinstance(error, str):
        return error

    message = getattr(error, "message", None)
    if isinstance(message, str):
        return message

    if isinstance(error, Mapping):
        message = error.get("message")
        if isinstance(message, str):
            return message

    if isinstance(error, BaseException):
        return str(error)
    return ""


def format_secure_error_message(error: Any) -> str:
    """Map a backend error to a message that is safe to show a user.

    Known backend messages are matched case-insensitively by substring;
    everything else collapses to one generic message so backend details
    never reach the client.
    """
    text = _error_text(error).lower()
    if text:
        for needle, secure_message in SECURE_ERROR_MESSAGES:
            if needle.lower() in text:
                return secure_message
    return GENERIC_ERROR_MESSAGE
