"""Global pytest fixtures for deterministic test environment."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear local runtime env that can leak into tests on developer machines."""
    for key in (
        "RESUME_ATS_CONFIG",
        "RESUME_ATS_VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
