"""Exception hierarchy for thumbnail generation."""

from __future__ import annotations

__all__ = [
    "DataUrlError",
    "DecodeError",
    "InvalidInputError",
    "RenderError",
    "ThumbnailError",
    "UnsupportedAssetError",
]


class ThumbnailError(RuntimeError):
    """Base class for every failure raised while producing a thumbnail."""


class InvalidInputError(ThumbnailError):
    """Raised when the asset path or the options cannot be used."""


class UnsupportedAssetError(ThumbnailError):
    """Raised when the asset is neither an Animate script nor an image."""


class RenderError(ThumbnailError):
    """Raised when the browser could not render the Animate composition."""


class DecodeError(ThumbnailError):
    """Raised when a source image cannot be read or decoded."""


class DataUrlError(ThumbnailError):
    """Raised when a string is not a well-formed base64 data URL."""
