"""Thumbnail previews for Animate canvas exports and static images.

The public entry points are :func:`generate`, which returns a data URL (or an
empty string when nothing could be produced), :func:`generate_outcome`, which
reports the failure cause as well, and :func:`write_data_url` for persisting
JPEG output.
"""

from __future__ import annotations

from .dataurl import write_data_url
from .errors import (
    DataUrlError,
    DecodeError,
    InvalidInputError,
    RenderError,
    ThumbnailError,
    UnsupportedAssetError,
)
from .options import ImageFormat, ThumbnailOptions
from .service import ThumbnailOutcome, ThumbnailService, generate, generate_outcome

__all__ = [
    "DataUrlError",
    "DecodeError",
    "ImageFormat",
    "InvalidInputError",
    "RenderError",
    "ThumbnailError",
    "ThumbnailOptions",
    "ThumbnailOutcome",
    "ThumbnailService",
    "UnsupportedAssetError",
    "__version__",
    "generate",
    "generate_outcome",
    "write_data_url",
]

__version__ = "0.1.0"
