"""Resize static images into thumbnails using Pillow."""

from __future__ import annotations

import logging
from os import PathLike

from PIL import Image

from .dataurl import encode_data_url
from .errors import DecodeError, ThumbnailError
from .options import ImageFormat, ThumbnailOptions

__all__ = ["ImageResizer"]

logger = logging.getLogger(__name__)

_JPEG_BACKGROUND = (0, 0, 0)
_PNG_BACKGROUND = (0, 0, 0, 0)


class ImageResizer:
    """Stretch a raster image onto a fixed-size surface and encode it."""

    def __init__(self, *, resample: Image.Resampling = Image.Resampling.LANCZOS) -> None:
        self._resample = resample

    def resize(self, image_path: str | PathLike[str], options: ThumbnailOptions) -> str:
        """Return a data URL of *image_path* scaled to exactly ``width x height``.

        The aspect ratio is not preserved; callers wanting letterboxing or
        cropping must prepare the source first.
        """

        size = (options.width, options.height)
        source = self._decode(image_path)

        try:
            if options.image_format is ImageFormat.JPEG:
                surface = Image.new("RGB", size, _JPEG_BACKGROUND)
            else:
                surface = Image.new("RGBA", size, _PNG_BACKGROUND)

            stretched = source.convert("RGBA").resize(size, self._resample)
            surface.paste(stretched, (0, 0), stretched)
            data_url = encode_data_url(surface, options.image_format, options.image_quality)
        except (ValueError, OverflowError, MemoryError) as exc:
            raise ThumbnailError(f"Unable to produce a {size[0]}x{size[1]} thumbnail: {exc}") from exc

        logger.debug("Resized %s from %sx%s to %sx%s", image_path, *source.size, *size)
        return data_url

    def _decode(self, image_path: str | PathLike[str]) -> Image.Image:
        try:
            with Image.open(image_path) as handle:
                handle.load()
                return handle.copy()
        except (OSError, Image.DecompressionBombError) as exc:
            raise DecodeError(f"Unable to decode {image_path!s}: {exc}") from exc
