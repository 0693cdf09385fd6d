"""
Tests for ledger settings and test-mode switching.

Reference: backend/app/config.py
"""
import pytest
from pydantic import ValidationError

from backend.test_scripts.test_db_config import setup_test_database, TEST_DATABASE_URL

setup_test_database()

from backend.app import config
from backend.app.config import Settings, get_settings, is_test_mode, set_test_mode


@pytest.fixture
def restore_test_mode():
    yield
    set_test_mode(True)


def test_test_mode_uses_test_database():
    assert is_test_mode()
    assert get_settings().DATABASE_URL == TEST_DATABASE_URL


def test_leaving_test_mode_restores_database_url(monkeypatch, restore_test_mode):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./elsewhere.db")

    set_test_mode(False)

    assert not is_test_mode()
    assert get_settings().DATABASE_URL == "sqlite:///./elsewhere.db"


def test_env_flag_alone_enables_test_mode(monkeypatch, restore_test_mode):
    monkeypatch.setattr(config, "_test_mode", False)
    monkeypatch.setenv(config.TEST_MODE_ENV, "true")

    assert is_test_mode()


def test_cors_disabled_by_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert Settings(_env_file=None).CORS_ORIGINS == []


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:5173"]')
    assert Settings(_env_file=None).CORS_ORIGINS == ["http://localhost:5173"]


@pytest.mark.parametrize("port", ["0", "70000"])
def test_port_range_validated(monkeypatch, port):
    monkeypatch.setenv("PORT", port)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
