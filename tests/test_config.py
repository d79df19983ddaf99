"""Tests for settings and the server entry point."""

import pytest

import server
from app.config import Settings


def test_wildcard_origin_collapses_list():
    s = Settings(ALLOWED_ORIGINS="http://a, *,http://b", _env_file=None)
    assert s.cors_origins == ["*"]
    assert s.cors_allow_credentials is False


def test_blank_origins_are_dropped():
    s = Settings(ALLOWED_ORIGINS="http://a,, ,http://b,", _env_file=None)
    assert s.cors_origins == ["http://a", "http://b"]
    assert s.cors_allow_credentials is True


def test_default_origins_allow_credentials():
    s = Settings(_env_file=None)
    assert "*" not in s.cors_origins
    assert s.cors_allow_credentials is True


def test_reload_defaults_off(monkeypatch):
    monkeypatch.delenv("RELOAD", raising=False)
    assert Settings(_env_file=None).RELOAD is False


@pytest.mark.parametrize("reload", [True, False])
def test_server_passes_reload_setting(monkeypatch, reload):
    calls = []
    monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setattr(server, "settings", Settings(RELOAD=reload, PORT=9001, _env_file=None))

    server.main()

    assert len(calls) == 1
    args, kwargs = calls[0]
    assert args == ("app.main:app",)
    assert kwargs["reload"] is reload
    assert kwargs["port"] == 9001
