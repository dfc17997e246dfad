"""Shared test fixtures."""

from __future__ import annotations

import pytest

from toast_mcp.github.client import reset_token_cache


@pytest.fixture(autouse=True)
def _github_auth(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin a fake token and reset resolved auth so tests never shell out to `gh`."""
    reset_token_cache()
    monkeypatch.setenv("GITHUB_TOKEN", "test-token")
    yield
    reset_token_cache()
