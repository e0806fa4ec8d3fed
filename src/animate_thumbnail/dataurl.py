"""Encode images as data URLs and persist JPEG data URLs to disk."""

from __future__ import annotations

import base64
import binascii
import io
import logging
import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from PIL import Image

from .errors import DataUrlError
from .options import ImageFormat

__all__ = ["DataUrl", "encode_data_url", "parse_data_url", "quality_to_pil", "write_data_url"]

logger = logging.getLogger(__name__)

_DATA_URL_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.*)$")
_JPEG_DATA_URL_PATTERN = re.compile(r"^data:image/jpeg;base64,(.*)$")


@dataclass(frozen=True, slots=True)
class DataUrl:
    """A decoded ``data:`` URL."""

    mime_type: str
    payload: bytes


def quality_to_pil(quality: float) -> int:
    """Map a canvas-style 0..1 quality onto Pillow's JPEG 1..95 scale."""

    return max(1, min(95, round(quality * 100)))


def encode_data_url(image: Image.Image, image_format: ImageFormat, quality: float) -> str:
    """Return *image* encoded with *image_format* as a base64 data URL."""

    buffer = io.BytesIO()
    if image_format is ImageFormat.JPEG:
        image.convert("RGB").save(buffer, format=image_format.pil_format, quality=quality_to_pil(quality))
    else:
        image.save(buffer, format=image_format.pil_format)
    payload = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:{image_format.mime_type};base64,{payload}"


def parse_data_url(data_url: str) -> DataUrl:
    """Split *data_url* into its MIME type and decoded payload."""

    match = _DATA_URL_PATTERN.fullmatch(data_url or "")
    if match is None:
        raise DataUrlError("Value is not a base64 data URL")
    try:
        payload = base64.b64decode(match.group("payload"), validate=True)
    except binascii.Error as exc:
        raise DataUrlError(f"Invalid base64 payload: {exc}") from exc
    return DataUrl(mime_type=match.group("mime"), payload=payload)


def write_data_url(data_url: str, dest_path: str | PathLike[str]) -> str:
    """Write a JPEG *data_url* to *dest_path* and return *data_url* unchanged.

    Anything other than a JPEG data URL is ignored. Decoding and I/O failures
    are logged rather than raised, so the return value is always the input.
    """

    match = _JPEG_DATA_URL_PATTERN.fullmatch(data_url) if isinstance(data_url, str) else None
    if match is None:
        logger.warning("write_data_url: not a JPEG data URL, nothing written to %s", dest_path)
        return data_url

    try:
        payload = base64.b64decode(match.group(1))
        Path(dest_path).write_bytes(payload)
    except (binascii.Error, OSError) as exc:
        logger.error("write_data_url: %s", exc)
    return data_url
