"""Shared pytest configuration, markers and console fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import AppSettings
from core.domain.models import RawResponse


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    """Settings isolated from the developer's environment and .env files."""
    for name in ("SESSION_ID", "CSRF_TOKEN", "HOST", "PORT", "WEBROOT", "SSL"):
        monkeypatch.delenv(f"HAC_CONSOLE_{name}", raising=False)
    return AppSettings(
        _env_file=None,
        host="hac.local",
        port="9002",
        webroot="hac",
        session_id="abc123",
        csrf_token="token-1",
    )


def _make_response(
    body: str | bytes | None,
    status_code: int = 200,
    reason_phrase: str = "OK",
) -> RawResponse:
    if isinstance(body, str):
        body = body.encode("utf-8")
    return RawResponse(status_code=status_code, reason_phrase=reason_phrase, body=body)


@pytest.fixture
def raw_response():
    """Factory for `RawResponse` objects from text or bytes bodies."""
    return _make_response

