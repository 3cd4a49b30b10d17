import pytest

from drinkcraft.validation import (
    AMOUNT_PATTERN,
    XSS_CHARS_PATTERN,
    is_valid_email,
    password_strength_label,
    password_strength_percent,
    sanitize_text,
    validate_amount,
    validate_password_strength,
)

SAMPLE_INPUTS = [
    "",
    "plain text",
    "<script>alert('x')</script>",
    '"quoted" & <tagged>',
    "   padded   ",
    "&&&&",
    "Crème brûlée <3",
    "a" * 400,
]


@pytest.mark.parametrize("raw", SAMPLE_INPUTS)
def test_sanitize_removes_every_blacklisted_character(raw):
    cleaned = sanitize_text(raw)
    assert not any(char in cleaned for char in "<>'\"&")
    assert XSS_CHARS_PATTERN.search(cleaned) is None


@pytest.mark.parametrize("raw", SAMPLE_INPUTS)
@pytest.mark.parametrize("limit", [0, 1, 5, 50, 255])
def test_sanitize_respects_max_length(raw, limit):
    assert len(sanitize_text(raw, limit)) <= limit


def test_sanitize_deletes_rather_than_escapes():
    assert sanitize_text("<b>Tom & Jerry's</b>") == "bTom  Jerrys/b"


def test_sanitize_truncates_after_removal_then_trims():
    # Removal happens first, so stripped characters do not eat into the limit.
    assert sanitize_text("<<<<abcdef", 3) == "abc"
    assert sanitize_text("ab   cd", 4) == "ab"


def test_sanitize_default_limit_is_255():
    assert len(sanitize_text("x" * 300)) == 255


def test_validate_amount_accepts_measurements():
    assert validate_amount("12.5") == "12.5"
    assert validate_amount("1/2") == "1/2"
    assert validate_amount("1-2") == "1-2"
    assert validate_amount(" 1 ½ ") == "1 ½"
    assert validate_amount("¾") == "¾"
    assert validate_amount("1,5") == "1,5"
    assert validate_amount("") == ""


def test_validate_amount_fails_closed():
    assert validate_amount("<script>") == ""
    assert validate_amount("2 shots") == ""
    assert validate_amount("1e3") == ""


def test_validate_amount_truncates_to_ten_characters():
    assert validate_amount("123456789012") == "1234567890"


def test_amount_pattern_is_exposed_for_reuse():
    assert AMOUNT_PATTERN.fullmatch("1 ¼") is not None
    assert AMOUNT_PATTERN.fullmatch("one") is None


def test_is_valid_email():
    assert is_valid_email("a@b.co") is True
    assert is_valid_email("first.last@sub.example.org") is True
    assert is_valid_email("a@b") is False
    assert is_valid_email("a b@c.com") is False
    assert is_valid_email("@b.co") is False
    assert is_valid_email("a@b.co\n") is False
    assert is_valid_email("") is False


def test_is_valid_email_length_cap():
    local = "a" * 64
    domain = "b" * (254 - len(local) - len("@.com")) + ".com"
    assert is_valid_email(f"{local}@{domain}") is True
    assert is_valid_email(f"{local}x@{domain}") is False


def test_password_lowercase_only():
    strength = validate_password_strength("abcdefgh")

    # Length and lowercase criteria both hold.
    assert strength.score == 2
    assert strength.is_strong is False
    assert strength.feedback == [
        "Add uppercase letters",
        "Add numbers",
        "Add special characters (!@#$%^&*)",
    ]


def test_password_all_base_criteria():
    strength = validate_password_strength("Abcdef12!")
    assert strength.score == 5
    assert strength.is_strong is True
    assert strength.feedback == []


def test_password_length_bonus_exceeds_advertised_max():
    strength = validate_password_strength("Abcdefgh1234!")
    assert strength.score == 6
    assert strength.is_strong is True


def test_password_bonus_never_produces_feedback():
    strength = validate_password_strength("abc")
    assert strength.score == 1
    assert strength.feedback == [
        "Use at least 8 characters",
        "Add uppercase letters",
        "Add numbers",
        "Add special characters (!@#$%^&*)",
    ]


def test_password_feedback_suppressed_once_strong():
    strength = validate_password_strength("abcdEFG1")
    assert strength.score == 4
    assert strength.is_strong is True
    assert strength.feedback == []


def test_password_empty():
    strength = validate_password_strength("")
    assert strength.score == 0
    assert len(strength.feedback) == 5


def test_password_strength_display_helpers():
    assert password_strength_label(0) == "Very Weak"
    assert password_strength_label(1) == "Very Weak"
    assert password_strength_label(2) == "Weak"
    assert password_strength_label(3) == "Fair"
    assert password_strength_label(4) == "Good"
    assert password_strength_label(5) == "Strong"
    assert password_strength_label(6) == "Strong"

    assert password_strength_percent(0) == 0
    assert password_strength_percent(3) == 60
    assert password_strength_percent(6) == 100
