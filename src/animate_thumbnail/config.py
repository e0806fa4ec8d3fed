"""Configuration helpers for locating the bundled CreateJS runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Final

__all__ = [
    "DEFAULT_RUNTIME_SCRIPT",
    "RUNTIME_SCRIPT_ENV_VAR",
    "RuntimeConfig",
    "configure",
    "get_config",
]

RUNTIME_SCRIPT_ENV_VAR: Final[str] = "ANIMATE_THUMBNAIL_RUNTIME"
"""Environment variable that overrides the bundled runtime location."""

DEFAULT_RUNTIME_SCRIPT: Final[Path] = Path(__file__).resolve().parent / "lib" / "createjs.min.js"
"""Location of the CreateJS build shipped alongside the package."""


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Process-wide settings shared by every browser render."""

    runtime_script: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "runtime_script", _coerce_path(self.runtime_script))


_CONFIG: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """Return the cached :class:`RuntimeConfig` instance."""

    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _build_config()
    return _CONFIG


def configure(*, runtime_script: str | Path | None = None) -> RuntimeConfig:
    """Rebuild the global configuration with optional overrides."""

    global _CONFIG
    _CONFIG = _build_config(runtime_script=runtime_script)
    return _CONFIG


def _build_config(*, runtime_script: str | Path | None = None) -> RuntimeConfig:
    if runtime_script is not None:
        return RuntimeConfig(runtime_script=_coerce_path(runtime_script))

    env_value = os.environ.get(RUNTIME_SCRIPT_ENV_VAR)
    if env_value:
        return RuntimeConfig(runtime_script=_coerce_path(env_value))

    return RuntimeConfig(runtime_script=DEFAULT_RUNTIME_SCRIPT)


def _coerce_path(value: str | Path | PathLike[str]) -> Path:
    if isinstance(value, Path):
        candidate = value
    else:
        text = str(value).strip()
        if not text:
            raise ValueError("Runtime script overrides cannot be empty")
        candidate = Path(text)
    return candidate.expanduser().resolve()
