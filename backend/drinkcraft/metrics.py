from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

REQUESTS_TOTAL = Counter(
    "requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)
AUTH_ATTEMPTS_TOTAL = Counter(
    "auth_attempts_total",
    "Sign-in and sign-up submissions by outcome",
    ["action", "outcome"],
)
AUTH_RATE_LIMITED_TOTAL = Counter(
    "auth_rate_limited_total",
    "Auth submissions denied by the attempt limiter",
    ["action"],
)
DRINKS_SAVED_TOTAL = Counter("drinks_saved_total", "Saved drink recipes", ["type"])


__all__ = [
    "CONTENT_TYPE_LATEST",
    "REQUESTS_TOTAL",
    "AUTH_ATTEMPTS_TOTAL",
    "AUTH_RATE_LIMITED_TOTAL",
    "DRINKS_SAVED_TOTAL",
    "generate_latest",
]
