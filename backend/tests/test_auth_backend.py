import asyncio

import aiohttp
import pytest

from drinkcraft.services.auth_backend import (
    AuthBackendConfigurationError,
    SupabaseAuthBackend,
    SupabaseRuntimeConfig,
)


def _backend(url: str = "https://project.supabase.co", anon_key: str = "anon-key") -> SupabaseAuthBackend:
    return SupabaseAuthBackend(
        SupabaseRuntimeConfig(
            url=url,
            anon_key=anon_key,
            timeout_seconds=1.0,
            redirect_url="http://localhost:5173/",
        )
    )


def test_sign_in_parses_session(monkeypatch):
    backend = _backend()
    calls = []

    async def fake_post_json(path, payload):
        calls.append((path, payload))
        return 200, {
            "access_token": "access",
            "refresh_token": "refresh",
            "token_type": "bearer",
            "expires_in": 3600,
            "user": {"id": "user-1", "email": "barista@example.com"},
        }

    monkeypatch.setattr(backend, "_post_json", fake_post_json)
    result = asyncio.run(backend.sign_in("barista@example.com", "secret"))

    assert result.error is None
    assert result.session.user_id == "user-1"
    assert result.session.access_token == "access"
    assert result.session.expires_in == 3600
    assert result.session.confirmation_required is False
    assert calls == [("/auth/v1/token?grant_type=password", {"email": "barista@example.com", "password": "secret"})]


def test_sign_up_without_session_needs_confirmation(monkeypatch):
    backend = _backend()
    calls = []

    async def fake_post_json(path, payload):
        calls.append((path, payload))
        return 200, {"id": "user-2", "email": "new@example.com", "confirmation_sent_at": "2024-01-01T00:00:00Z"}

    monkeypatch.setattr(backend, "_post_json", fake_post_json)
    result = asyncio.run(backend.sign_up("new@example.com", "Abcdef12!", "Barista"))

    assert result.session.user_id == "user-2"
    assert result.session.confirmation_required is True
    path, payload = calls[0]
    assert path == "/auth/v1/signup?redirect_to=http%3A%2F%2Flocalhost%3A5173%2F"
    assert payload["data"] == {"display_name": "Barista"}


@pytest.mark.parametrize(
    ("status", "body", "message"),
    [
        (400, {"error": "invalid_grant", "error_description": "Invalid login credentials"}, "Invalid login credentials"),
        (422, {"code": 422, "error_code": "user_already_exists", "msg": "User already registered"}, "User already registered"),
        (429, {"message": "Rate limit exceeded"}, "Rate limit exceeded"),
        (500, None, "Auth request failed"),
    ],
)
def test_error_bodies_reduce_to_one_message(monkeypatch, status, body, message):
    backend = _backend()

    async def fake_post_json(_path, _payload):
        return status, body

    monkeypatch.setattr(backend, "_post_json", fake_post_json)
    result = asyncio.run(backend.sign_in("barista@example.com", "secret"))

    assert result.session is None
    assert result.error.message == message
    assert result.error.status == status


@pytest.mark.parametrize("exc", [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()])
def test_transport_failures_become_network_error(monkeypatch, exc):
    backend = _backend()

    async def fake_post_json(_path, _payload):
        raise exc

    monkeypatch.setattr(backend, "_post_json", fake_post_json)
    result = asyncio.run(backend.sign_in("barista@example.com", "secret"))

    assert result.error.message == "Network error"


def test_unexpected_success_payload(monkeypatch):
    backend = _backend()

    async def fake_post_json(_path, _payload):
        return 200, {"unexpected": True}

    monkeypatch.setattr(backend, "_post_json", fake_post_json)
    result = asyncio.run(backend.sign_in("barista@example.com", "secret"))

    assert result.session is None
    assert result.error is not None


def test_missing_configuration_raises():
    backend = _backend(url="", anon_key="")
    with pytest.raises(AuthBackendConfigurationError):
        asyncio.run(backend.sign_in("barista@example.com", "secret"))
