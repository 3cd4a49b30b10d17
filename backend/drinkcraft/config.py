from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _as_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _normalize_base_url(value: str | None) -> str:
    raw = (value or "").strip()
    # Some dashboards accidentally store quoted values.
    if (raw.startswith('"') and raw.endswith('"')) or (raw.startswith("'") and raw.endswith("'")):
        raw = raw[1:-1].strip()
    return raw.rstrip("/")


@dataclass(frozen=True)
class Settings:
    env: str
    port: int
    debug: bool
    log_level: str
    cors_origins: list[str]
    frontend_url: str
    supabase_url: str
    supabase_anon_key: str
    jwt_secret: str
    jwt_algorithm: str
    jwt_audience: str
    auth_timeout: float
    auth_max_attempts: int
    auth_window_ms: int
    display_name_max_length: int
    max_drinks_in_progress: int
    enable_prometheus_metrics: bool
    enable_security_headers: bool

    @property
    def is_production(self) -> bool:
        return self.env.lower() not in {"development", "dev", "test", "testing"}

    @property
    def auth_backend_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)

    def validate(self) -> None:
        """Raise early on dangerous mis-configurations in non-dev environments."""
        if self.is_production and self.jwt_secret == _DEFAULT_JWT_SECRET:
            raise RuntimeError(
                "SUPABASE_JWT_SECRET must be explicitly set in production. "
                "Copy it from the auth project's API settings."
            )


_DEFAULT_JWT_SECRET = "change-me-in-production-min-32-bytes-key"


settings = Settings(
    env=os.getenv("ENV", "development"),
    port=_as_int(os.getenv("PORT"), 8000),
    debug=_as_bool(os.getenv("DEBUG"), False),
    log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
    cors_origins=[
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", os.getenv("FRONTEND_URL", "http://localhost:5173")).split(",")
        if origin.strip()
    ],
    frontend_url=os.getenv("FRONTEND_URL", "http://localhost:5173").strip(),
    supabase_url=_normalize_base_url(os.getenv("SUPABASE_URL")),
    supabase_anon_key=os.getenv("SUPABASE_ANON_KEY", "").strip(),
    jwt_secret=os.getenv("SUPABASE_JWT_SECRET", _DEFAULT_JWT_SECRET),
    jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
    jwt_audience=os.getenv("JWT_AUDIENCE", "authenticated").strip(),
    auth_timeout=max(0.5, _as_float(os.getenv("AUTH_TIMEOUT"), 10.0)),
    auth_max_attempts=max(1, _as_int(os.getenv("AUTH_MAX_ATTEMPTS"), 5)),
    auth_window_ms=max(1000, _as_int(os.getenv("AUTH_WINDOW_MS"), 15 * 60 * 1000)),
    display_name_max_length=max(1, _as_int(os.getenv("DISPLAY_NAME_MAX_LENGTH"), 50)),
    max_drinks_in_progress=max(1, _as_int(os.getenv("MAX_DRINKS_IN_PROGRESS"), 10_000)),
    enable_prometheus_metrics=_as_bool(os.getenv("ENABLE_PROMETHEUS_METRICS"), True),
    enable_security_headers=_as_bool(os.getenv("ENABLE_SECURITY_HEADERS"), True),
)

settings.validate()
