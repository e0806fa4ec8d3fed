"""Install the CreateJS runtime that Animate canvas exports are rendered with."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

import requests

from .config import DEFAULT_RUNTIME_SCRIPT
from .errors import RenderError

__all__ = ["RUNTIME_URL", "ensure_runtime"]

logger = logging.getLogger(__name__)

RUNTIME_URL: Final[str] = "https://code.createjs.com/1.0.0/createjs.min.js"
"""Official CreateJS 1.0.0 combined build (MIT licensed), the release Animate targets."""

_RUNTIME_MARKER: Final[bytes] = b"createjs"


def ensure_runtime(
    path: Path = DEFAULT_RUNTIME_SCRIPT,
    *,
    url: str = RUNTIME_URL,
    timeout: float = 30.0,
) -> Path:
    """Return *path*, downloading the CreateJS build from *url* first if it is absent."""

    if path.is_file():
        return path

    logger.info("Installing CreateJS runtime from %s to %s", url, path)
    partial = path.with_name(path.name + ".part")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with requests.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            with open(partial, "wb") as f:
                for chunk in response.iter_content(chunk_size=8192):
                    f.write(chunk)

        if _RUNTIME_MARKER not in partial.read_bytes()[:4096]:
            raise RenderError(f"{url} did not return a CreateJS build")
        partial.replace(path)
    except (requests.RequestException, OSError) as exc:
        raise RenderError(f"Unable to install CreateJS runtime from {url}: {exc}") from exc
    finally:
        partial.unlink(missing_ok=True)

    return path
