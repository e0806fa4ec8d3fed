"""High level entry points that dispatch thumbnail requests by asset kind."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike
from typing import Any

from .assets import AssetKind, classify_asset, normalize_asset_path
from .browser import BrowserRenderer
from .errors import RenderError, ThumbnailError, UnsupportedAssetError
from .options import ThumbnailOptions, coerce_options
from .resize import ImageResizer

__all__ = ["ThumbnailOutcome", "ThumbnailService", "generate", "generate_outcome"]

logger = logging.getLogger(__name__)

OptionsLike = ThumbnailOptions | Mapping[str, Any] | None


@dataclass(frozen=True, slots=True)
class ThumbnailOutcome:
    """Result of a thumbnail request: a data URL or the error that prevented it."""

    data_url: str
    error: ThumbnailError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data_url: str) -> ThumbnailOutcome:
        return cls(data_url=data_url)

    @classmethod
    def failure(cls, error: ThumbnailError) -> ThumbnailOutcome:
        return cls(data_url="", error=error)


class ThumbnailService:
    """Produce thumbnails for Animate scripts and raster images."""

    def __init__(
        self,
        renderer: BrowserRenderer | None = None,
        resizer: ImageResizer | None = None,
    ) -> None:
        self._renderer = renderer or BrowserRenderer.from_config()
        self._resizer = resizer or ImageResizer()

    async def generate(self, asset_path: str | PathLike[str] | None, options: OptionsLike = None) -> str:
        """Return a data URL thumbnail for *asset_path*, or ``""`` on any failure."""

        outcome = await self.generate_outcome(asset_path, options)
        return outcome.data_url

    async def generate_outcome(
        self,
        asset_path: str | PathLike[str] | None,
        options: OptionsLike = None,
    ) -> ThumbnailOutcome:
        """Return a :class:`ThumbnailOutcome` describing the thumbnail for *asset_path*.

        Failures are logged and reported through :attr:`ThumbnailOutcome.error`
        instead of being raised.
        """

        try:
            data_url = await self._dispatch(asset_path, options)
        except ThumbnailError as exc:
            logger.error("generate: %s: %s", type(exc).__name__, exc)
            return ThumbnailOutcome.failure(exc)
        except OSError as exc:
            logger.error("generate: %s", exc)
            return ThumbnailOutcome.failure(RenderError(str(exc)))
        except Exception as exc:
            logger.exception("generate: unexpected failure for %s", asset_path)
            return ThumbnailOutcome.failure(ThumbnailError(str(exc)))
        return ThumbnailOutcome.success(data_url)

    async def _dispatch(self, asset_path: str | PathLike[str] | None, options: OptionsLike) -> str:
        path = normalize_asset_path(asset_path)
        resolved = coerce_options(options)

        kind = classify_asset(path)
        if kind is AssetKind.SCRIPT:
            return await self._renderer.render(path, resolved)
        if kind is AssetKind.IMAGE:
            return await asyncio.to_thread(self._resizer.resize, path, resolved)
        raise UnsupportedAssetError(f"Asset must be JavaScript or an image: {path}")


async def generate(asset_path: str | PathLike[str] | None, options: OptionsLike = None) -> str:
    """Return a data URL thumbnail for *asset_path* using the configured runtime."""

    return await ThumbnailService().generate(asset_path, options)


async def generate_outcome(
    asset_path: str | PathLike[str] | None,
    options: OptionsLike = None,
) -> ThumbnailOutcome:
    """Return a :class:`ThumbnailOutcome` for *asset_path* using the configured runtime."""

    return await ThumbnailService().generate_outcome(asset_path, options)
