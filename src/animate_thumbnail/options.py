"""Thumbnail options and their validation."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidInputError

__all__ = ["ImageFormat", "ThumbnailOptions", "coerce_options"]


class ImageFormat(Enum):
    """Encodings a thumbnail can be produced in, keyed by MIME type."""

    JPEG = "image/jpeg"
    PNG = "image/png"

    @property
    def mime_type(self) -> str:
        return self.value

    @property
    def pil_format(self) -> str:
        return self.name

    @classmethod
    def coerce(cls, value: ImageFormat | str) -> ImageFormat:
        """Return the format named by *value* (a member, MIME type or short name)."""

        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text == member.value:
                return member
        aliases = {"jpeg": cls.JPEG, "jpg": cls.JPEG, "png": cls.PNG}
        try:
            return aliases[text]
        except KeyError:
            raise InvalidInputError(f"Unsupported image format: {value!r}") from None


@dataclass(frozen=True, slots=True)
class ThumbnailOptions:
    """Settings applied to a single thumbnail request."""

    width: int = 200
    height: int = 113
    scale: float = 0.104
    stop_point: float = 0.125
    image_format: ImageFormat = ImageFormat.JPEG
    image_quality: float = 0.6
    render_timeout_ms: int = 5000
    capture_timeout_ms: int = 30000
    debug_mode: bool = False
    preload_script: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "image_format", ImageFormat.coerce(self.image_format))

        for name in ("width", "height", "render_timeout_ms", "capture_timeout_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidInputError(f"{name} must be a positive integer, got {value!r}")

        if not _is_number(self.scale) or self.scale <= 0:
            raise InvalidInputError(f"scale must be a positive number, got {self.scale!r}")

        for name in ("stop_point", "image_quality"):
            value = getattr(self, name)
            if not _is_number(value) or not 0.0 <= value <= 1.0:
                raise InvalidInputError(f"{name} must lie between 0 and 1, got {value!r}")

        if self.preload_script is not None and not isinstance(self.preload_script, str):
            raise InvalidInputError("preload_script must be JavaScript source text")

    def replace(self, **changes: Any) -> ThumbnailOptions:
        """Return a validated copy with *changes* applied."""

        return coerce_options({**_as_dict(self), **changes})


def coerce_options(value: ThumbnailOptions | Mapping[str, Any] | None) -> ThumbnailOptions:
    """Return :class:`ThumbnailOptions` built from *value*, filling in defaults."""

    if value is None:
        return ThumbnailOptions()
    if isinstance(value, ThumbnailOptions):
        return value
    if not isinstance(value, Mapping):
        raise InvalidInputError(f"Options must be a mapping, got {type(value).__name__}")

    known = {field.name for field in dataclasses.fields(ThumbnailOptions)}
    unknown = sorted(set(value) - known)
    if unknown:
        raise InvalidInputError(f"Unknown options: {', '.join(unknown)}")

    try:
        return ThumbnailOptions(**value)
    except TypeError as exc:
        raise InvalidInputError(str(exc)) from exc


def _as_dict(options: ThumbnailOptions) -> dict[str, Any]:
    return {field.name: getattr(options, field.name) for field in dataclasses.fields(options)}


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)
