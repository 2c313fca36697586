import os

import pytest
import structlog

BOOM = "\U0001f4a5"  # 4 bytes in UTF-8


@pytest.fixture
def boom() -> str:
    return BOOM


@pytest.fixture(name="log_output")
def log_output_fixture():
    """Capture structlog events emitted during a test."""
    with structlog.testing.capture_logs() as captured:
        yield captured


@pytest.fixture(name="clean_env")
def clean_env_fixture(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Run in an empty directory with no FIELDRULES_* variables set."""
    for key in list(os.environ):
        if key.upper().startswith("FIELDRULES_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
