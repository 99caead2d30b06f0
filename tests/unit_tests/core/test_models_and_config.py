"""Unit tests for domain models and configuration helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import dotenv_values
from pydantic import ValidationError

from core.config import write_user_env_vars
from core.domain.models import ConsoleResult, RemoteConnection


def test_console_result_is_immutable() -> None:
    result = ConsoleResult(http_code=200, output="ok")

    with pytest.raises(ValidationError):
        result.output = "changed"  # type: ignore[misc]


def test_has_error_follows_error_message() -> None:
    assert ConsoleResult(http_code=500, error_message="boom").has_error
    assert not ConsoleResult(http_code=200, error_message="").has_error


@pytest.mark.parametrize(
    ("connection", "expected"),
    [
        (RemoteConnection(host="10.0.0.5", port="9002", webroot="hac"), "https://10.0.0.5:9002/hac"),
        (RemoteConnection(host="localhost", port="", webroot="/"), "https://localhost"),
        (RemoteConnection(host="shop.local", port="80", webroot="/admin/", ssl=False), "http://shop.local:80/admin"),
    ],
)
def test_generated_url(connection: RemoteConnection, expected: str) -> None:
    assert connection.generated_url == expected


def test_settings_base_url(settings) -> None:
    assert settings.base_url == "https://hac.local:9002/hac"


def test_write_user_env_vars_merges_existing(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# old\nHAC_CONSOLE_HOST=old-host\nHAC_CONSOLE_PORT='9001'\n", encoding="utf-8")

    write_user_env_vars(
        {"HAC_CONSOLE_HOST": "new-host", "HAC_CONSOLE_SESSION_ID": None},
        env_path=env_path,
    )

    assert dotenv_values(env_path) == {
        "HAC_CONSOLE_HOST": "new-host",
        "HAC_CONSOLE_PORT": "9001",
    }
    assert env_path.read_text(encoding="utf-8").startswith("# old\n")


def test_write_user_env_vars_creates_missing_file(tmp_path: Path) -> None:
    env_path = tmp_path / "new" / ".env"

    write_user_env_vars({"HAC_CONSOLE_WEBROOT": "hac"}, env_path=env_path)

    assert dotenv_values(env_path) == {"HAC_CONSOLE_WEBROOT": "hac"}
