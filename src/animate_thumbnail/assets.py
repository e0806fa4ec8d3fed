"""Classify asset paths and derive the symbol names Animate exports use."""

from __future__ import annotations

import os
import re
from enum import Enum
from os import PathLike

from .errors import InvalidInputError

__all__ = [
    "IMAGE_SUFFIXES",
    "SCRIPT_SUFFIXES",
    "AssetKind",
    "classify_asset",
    "clip_name_for",
    "normalize_asset_path",
]

SCRIPT_SUFFIXES: tuple[str, ...] = (".js",)
IMAGE_SUFFIXES: tuple[str, ...] = (".png", ".jpg", ".jpeg")

_CLIP_NAME_PATTERN = re.compile(r"^.*/|\..*")


class AssetKind(Enum):
    """Kinds of input the generator knows how to thumbnail."""

    SCRIPT = "script"
    IMAGE = "image"
    UNSUPPORTED = "unsupported"


def normalize_asset_path(value: str | PathLike[str] | None) -> str:
    """Return a normalized copy of *value*, rejecting missing paths."""

    if value is None:
        raise InvalidInputError("No asset path specified.")
    try:
        text = os.fspath(value)
    except TypeError as exc:
        raise InvalidInputError(f"Asset path must be a string or path, got {value!r}") from exc
    if not text.strip():
        raise InvalidInputError("No asset path specified.")
    return os.path.normpath(text)


def classify_asset(path: str) -> AssetKind:
    """Return the :class:`AssetKind` for *path* based on its (case-sensitive) suffix."""

    if path.endswith(SCRIPT_SUFFIXES):
        return AssetKind.SCRIPT
    if path.endswith(IMAGE_SUFFIXES):
        return AssetKind.IMAGE
    return AssetKind.UNSUPPORTED


def clip_name_for(path: str) -> str:
    """Return the library symbol for *path*: the file name up to its first dot.

    Animate names the root clip after the published file, so ``out/intro.js``
    exposes ``lib.intro``.
    """

    return _CLIP_NAME_PATTERN.sub("", path.replace(os.sep, "/"))
