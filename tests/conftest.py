"""Pytest configuration helpers for animate_thumbnail tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the source directory is importable without requiring an editable install.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def reset_runtime_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure each test runs with the default runtime configuration."""

    from animate_thumbnail.config import RUNTIME_SCRIPT_ENV_VAR, configure

    monkeypatch.delenv(RUNTIME_SCRIPT_ENV_VAR, raising=False)
    configure(runtime_script=None)
    yield
    configure(runtime_script=None)


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture()
def stub_runtime_path() -> Path:
    """Path to a minimal stand-in for the CreateJS runtime."""

    return FIXTURES_DIR / "stub_createjs.js"


@pytest.fixture(scope="session")
def chromium() -> None:
    """Skip the requesting test when Chromium cannot be launched here."""

    try:
        from playwright.sync_api import Error, sync_playwright
    except ImportError:  # pragma: no cover - dependency availability varies
        pytest.skip("Playwright is unavailable in this environment")

    try:
        with sync_playwright() as playwright:
            playwright.chromium.launch().close()
    except Error as exc:
        pytest.skip(f"Chromium cannot be launched: {exc.message}")
