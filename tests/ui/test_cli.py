from __future__ import annotations

from signal import SIGINT

import pytest

from albumrest.config import ServerConfig
from albumrest.ui import cli as cli_module


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    calls: dict[str, object] = {}

    def fake_serve(config: ServerConfig, *, database_uri: str) -> None:
        calls["config"] = config
        calls["database_uri"] = database_uri

    monkeypatch.setattr(cli_module, "serve", fake_serve)
    monkeypatch.setattr(cli_module, "configure_logging", lambda **_: None)
    for name in ("ALBUMREST_HOST", "ALBUMREST_PORT", "ALBUMREST_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")
    return calls


def test_serve_defaults(captured: dict[str, object]) -> None:
    cli_module.main(["serve"])

    assert captured["config"] == ServerConfig()
    assert captured["database_uri"] == "sqlite+pysqlite:///:memory:"


def test_serve_with_flags(captured: dict[str, object]) -> None:
    cli_module.main(
        [
            "serve",
            "--host",
            "0.0.0.0",  # noqa: S104
            "--port",
            "9001",
            "--database-uri",
            "sqlite+pysqlite:////tmp/albums.db",
            "--log-level",
            "debug",
        ]
    )

    assert captured["config"] == ServerConfig(host="0.0.0.0", port=9001, log_level="debug")  # noqa: S104
    assert captured["database_uri"] == "sqlite+pysqlite:////tmp/albums.db"


def test_serve_reads_environment(
    captured: dict[str, object],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ALBUMREST_PORT", "8123")

    cli_module.main(["serve"])

    config = captured["config"]
    assert isinstance(config, ServerConfig)
    assert config.port == 8123


def test_invalid_port_exits_with_code_2(captured: dict[str, object]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["serve", "--port", "70000"])

    assert excinfo.value.code == 2
    assert captured == {}


def test_missing_command_exits_with_code_2(captured: dict[str, object]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2
    assert captured == {}


def test_fatal_error_exits_with_code_1(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_serve(config: ServerConfig, *, database_uri: str) -> None:
        _ = (config, database_uri)
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_module, "serve", failing_serve)
    monkeypatch.setattr(cli_module, "configure_logging", lambda **_: None)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["serve"])

    assert excinfo.value.code == 1


def test_sigint_handler_exits_cleanly() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.sigint_handler(SIGINT, None)

    assert excinfo.value.code == 0
