"""Tests for installing the CreateJS runtime."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests

from animate_thumbnail import runtime
from animate_thumbnail.browser import BrowserRenderer
from animate_thumbnail.config import DEFAULT_RUNTIME_SCRIPT, configure
from animate_thumbnail.errors import RenderError
from animate_thumbnail.runtime import RUNTIME_URL, ensure_runtime

CREATEJS_BODY = b"/*!\n* @license CreateJS\n*/\nthis.createjs=this.createjs||{};" + b"x" * 20000


class FakeResponse:
    def __init__(self, body: bytes, status: int = 200) -> None:
        self._body = body
        self._status = status

    def __enter__(self) -> FakeResponse:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def raise_for_status(self) -> None:
        if self._status >= 400:
            raise requests.HTTPError(f"{self._status} error")

    def iter_content(self, chunk_size: int = 1):
        for start in range(0, len(self._body), chunk_size):
            yield self._body[start : start + chunk_size]


@pytest.fixture()
def downloads(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Serve CREATEJS_BODY for every download and record the requested URLs."""

    requested: list[str] = []

    def fake_get(url: str, **kwargs: object) -> FakeResponse:
        requested.append(url)
        return FakeResponse(CREATEJS_BODY)

    monkeypatch.setattr(runtime.requests, "get", fake_get)
    return requested


def test_missing_runtime_is_downloaded(tmp_path: Path, downloads: list[str]) -> None:
    target = tmp_path / "lib" / "createjs.min.js"

    assert ensure_runtime(target) == target
    assert target.read_bytes() == CREATEJS_BODY
    assert downloads == [RUNTIME_URL]
    assert list(target.parent.iterdir()) == [target]


def test_existing_runtime_is_not_downloaded(tmp_path: Path, downloads: list[str]) -> None:
    target = tmp_path / "createjs.min.js"
    target.write_text("var createjs = {};")

    ensure_runtime(target)

    assert downloads == []
    assert target.read_text() == "var createjs = {};"


def test_http_failure_leaves_no_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(runtime.requests, "get", lambda url, **kwargs: FakeResponse(b"", status=404))
    target = tmp_path / "createjs.min.js"

    with pytest.raises(RenderError, match="Unable to install"):
        ensure_runtime(target)

    assert list(tmp_path.iterdir()) == []


def test_unexpected_body_rejected(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(runtime.requests, "get", lambda url, **kwargs: FakeResponse(b"<html>captive portal</html>"))
    target = tmp_path / "createjs.min.js"

    with pytest.raises(RenderError, match="did not return a CreateJS build"):
        ensure_runtime(target)

    assert list(tmp_path.iterdir()) == []


def test_default_runtime_lives_in_package_lib() -> None:
    assert DEFAULT_RUNTIME_SCRIPT.parent == Path(runtime.__file__).resolve().parent / "lib"
    assert (DEFAULT_RUNTIME_SCRIPT.parent / "README.md").is_file()


def test_only_the_default_runtime_is_installed(tmp_path: Path) -> None:
    assert BrowserRenderer.from_config().install_runtime is True

    configure(runtime_script=tmp_path / "createjs.js")
    assert BrowserRenderer.from_config().install_runtime is False
