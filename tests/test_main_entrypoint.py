"""Tests for the command-line entrypoint and bootstrap wiring."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import app.bootstrap as bootstrap_module
import app.main as main_module
from app.config import config_build_configuration


def _main_prepare_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, command: str) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["app.main", command])
    monkeypatch.setattr(main_module, "config_configure_logging", lambda _app_config: None)
    for variable_name in ("NODE_ENV", "PORT", "HOST", "JWT_SECRET", "SESSION_SECRET", "DB_PORT", "REDIS_PORT"):
        monkeypatch.delenv(variable_name, raising=False)


def test_main_check_config_exits_with_status_one_for_invalid_configuration(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Abort before serving when validation fails.

    Returns:
        None: Assertions validate exit behavior.

    Raises:
        AssertionError: Raised when the entrypoint does not exit with status 1.
    """

    _main_prepare_environment(monkeypatch, tmp_path, "check-config")
    monkeypatch.setenv("JWT_SECRET", "short")

    with pytest.raises(SystemExit) as exit_info:
        main_module.main()

    assert exit_info.value.code == 1


def test_main_check_config_returns_for_valid_configuration(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Return without starting the server for a valid configuration."""

    _main_prepare_environment(monkeypatch, tmp_path, "check-config")
    monkeypatch.setattr(main_module.uvicorn, "run", lambda *_args, **_kwargs: pytest.fail("server must not start"))

    main_module.main()


def test_main_api_runs_server_on_configured_host_and_port(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Start uvicorn on HOST and the resolved application port."""

    _main_prepare_environment(monkeypatch, tmp_path, "api")
    monkeypatch.setenv("NODE_ENV", "staging")
    monkeypatch.setenv("HOST", "127.0.0.1")
    sentinel_application = object()
    monkeypatch.setattr(main_module, "bootstrap_create_application", lambda _config: sentinel_application)
    server_calls: list[tuple[object, str, int]] = []
    monkeypatch.setattr(
        main_module.uvicorn,
        "run",
        lambda application, host, port: server_calls.append((application, host, port)),
    )

    main_module.main()

    assert server_calls == [(sentinel_application, "127.0.0.1", 8080)]


def test_bootstrap_create_application_wires_routes(monkeypatch: pytest.MonkeyPatch) -> None:
    """Assemble a working application from a configuration snapshot."""

    monkeypatch.setattr(bootstrap_module, "config_configure_logging", lambda _app_config: None)
    config = config_build_configuration({"DB_URL": "sqlite+pysqlite:///:memory:", "API_PREFIX": "v1"})

    client = TestClient(bootstrap_module.bootstrap_create_application(config))

    assert client.get("/v1").text == "Hello World!"
