"""Input hardening for free-text form fields.

Every helper here is pure and never raises: bad input comes back as an
empty or shortened string, or as a ``False``/low score, and callers
decide what to tell the user.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re

# Characters stripped outright (no entity escaping).
XSS_CHARS_PATTERN = re.compile(r"[<>'\"&]")

# Digits, decimal/thousand separators, slash fractions, vulgar fractions,
# whitespace and ranges like "1-2".
AMOUNT_PATTERN = re.compile(r"[0-9.,/½¼¾\s-]*")

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
EMAIL_MAX_LENGTH = 254

LOWERCASE_PATTERN = re.compile(r"[a-z]")
UPPERCASE_PATTERN = re.compile(r"[A-Z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
PASSWORD_SPECIAL_CHARS_PATTERN = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")

DEFAULT_MAX_LENGTH = 255
AMOUNT_MAX_LENGTH = 10

PASSWORD_MIN_LENGTH = 8
PASSWORD_BONUS_LENGTH = 12
PASSWORD_STRONG_SCORE = 4
PASSWORD_MAX_SCORE = 5


def sanitize_text(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Drop markup-prone characters, cut to ``max_length``, then trim."""
    return XSS_CHARS_PATTERN.sub("", text)[:max_length].strip()


def validate_amount(amount: str) -> str:
    """Return the sanitized amount, or ``""`` if any character is not allowed."""
    sanitized = sanitize_text(amount, AMOUNT_MAX_LENGTH)
    if AMOUNT_PATTERN.fullmatch(sanitized) is None:
        return ""
    return sanitized


def is_valid_email(email: str) -> bool:
    # Syntactic sanity check only; the auth backend does the real validation.
    return EMAIL_PATTERN.fullmatch(email) is not None and len(email) <= EMAIL_MAX_LENGTH


@dataclass(frozen=True)
class PasswordStrength:
    is_strong: bool
    score: int
    feedback: list[str] = field(default_factory=list)


def validate_password_strength(password: str) -> PasswordStrength:
    """Score a password on five criteria plus a length bonus.

    One point each for: at least 8 characters, a lowercase letter, an
    uppercase letter, a digit, a special character. A 12+ character
    password earns one extra point, so the score can reach 6. The
    password counts as strong at 4 points, and feedback is only
    returned for passwords that are not strong.
    """
    feedback: list[str] = []
    score = 0

    if len(password) >= PASSWORD_MIN_LENGTH:
        score += 1
    else:
        feedback.append("Use at least 8 characters")

    if LOWERCASE_PATTERN.search(password):
        score += 1
    else:
        feedback.append("Add lowercase letters")

    if UPPERCASE_PATTERN.search(password):
        score += 1
    else:
        feedback.append("Add uppercase letters")

    if DIGIT_PATTERN.search(password):
        score += 1
    else:
        feedback.append("Add numbers")

    if PASSWORD_SPECIAL_CHARS_PATTERN.search(password):
        score += 1
    else:
        feedback.append("Add special characters (!@#$%^&*)")

    if len(password) >= PASSWORD_BONUS_LENGTH:
        score += 1

    is_strong = score >= PASSWORD_STRONG_SCORE
    return PasswordStrength(is_strong=is_strong, score=score, feedback=[] if is_strong else feedback)


def password_strength_label(score: int) -> str:
    if score <= 1:
        return "Very Weak"
    if score <= 2:
        return "Weak"
    if score <= 3:
        return "Fair"
    if score <= 4:
        return "Good"
    return "Strong"


def password_strength_percent(score: int) -> int:
    # The length bonus can push the score past the advertised maximum.
    return max(0, min(100, score * 100 // PASSWORD_MAX_SCORE))
