from __future__ import annotations

import logging
from pathlib import Path

import pytest

from general_phones.infra.config import (
    assets_dir,
    configure_logging,
    log_level,
    server_host,
    server_port,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GENERAL_PHONES_ASSETS_DIR", raising=False)
    monkeypatch.delenv("GENERAL_PHONES_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GENERAL_PHONES_HOST", raising=False)
    monkeypatch.delenv("GENERAL_PHONES_PORT", raising=False)


# ==============================================================================
# log_level()
# ==============================================================================


def test_log_level_defaults_to_info() -> None:
    assert log_level() == "INFO"


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GENERAL_PHONES_LOG_LEVEL", " debug ")

    assert log_level() == "DEBUG"


def test_log_level_rejects_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GENERAL_PHONES_LOG_LEVEL", "verbose")

    with pytest.raises(RuntimeError, match="GENERAL_PHONES_LOG_LEVEL"):
        log_level()


def test_configure_logging_rejects_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GENERAL_PHONES_LOG_LEVEL", "loud")

    with pytest.raises(RuntimeError):
        configure_logging()


def test_configure_logging_passes_level_to_basic_config(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("GENERAL_PHONES_LOG_LEVEL", "warning")

    configure_logging()

    assert calls[0]["level"] == "WARNING"


# ==============================================================================
# assets_dir()
# ==============================================================================


def test_assets_dir_unset_returns_none() -> None:
    assert assets_dir() is None


def test_assets_dir_empty_returns_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GENERAL_PHONES_ASSETS_DIR", "")

    assert assets_dir() is None


def test_assets_dir_returns_existing_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("GENERAL_PHONES_ASSETS_DIR", str(tmp_path))

    assert assets_dir() == tmp_path


def test_assets_dir_rejects_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    not_a_dir = tmp_path / "hero-phones.jpg"
    not_a_dir.write_bytes(b"")
    monkeypatch.setenv("GENERAL_PHONES_ASSETS_DIR", str(not_a_dir))

    with pytest.raises(RuntimeError, match="not a directory"):
        assets_dir()


# ==============================================================================
# server_host() / server_port()
# ==============================================================================


def test_server_defaults_to_localhost_8000() -> None:
    assert server_host() == "127.0.0.1"
    assert server_port() == 8000


def test_server_address_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GENERAL_PHONES_HOST", "0.0.0.0")
    monkeypatch.setenv("GENERAL_PHONES_PORT", "9000")

    assert server_host() == "0.0.0.0"
    assert server_port() == 9000


@pytest.mark.parametrize("value", ["http", "", "0", "70000"])
def test_server_port_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("GENERAL_PHONES_PORT", value)

    with pytest.raises(RuntimeError, match="GENERAL_PHONES_PORT"):
        server_port()
