"""Render Animate canvas exports to thumbnails in a headless browser."""

from __future__ import annotations

import asyncio
import functools
import logging
from importlib import resources
from os import PathLike
from pathlib import Path
from typing import Any

from playwright.async_api import Browser, ConsoleMessage, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from ..assets import clip_name_for
from ..config import DEFAULT_RUNTIME_SCRIPT, RuntimeConfig, get_config
from ..errors import RenderError
from ..options import ThumbnailOptions
from ..runtime import ensure_runtime

__all__ = ["BrowserRenderer"]

logger = logging.getLogger(__name__)

_DEVTOOLS_FLAG = "--auto-open-devtools-for-tabs"
_GLOBAL_EVAL = "source => { (0, eval)(source); }"
_BROWSER_TYPES = frozenset({"chromium", "firefox", "webkit"})


@functools.cache
def _capture_script() -> str:
    return resources.files(__package__).joinpath("capture.js").read_text(encoding="utf-8")


class BrowserRenderer:
    """Drive a browser through the CreateJS runtime to snapshot a composition.

    Every call launches its own browser and closes it before returning, so
    renderers hold no state beyond their configuration and may be shared.
    """

    def __init__(
        self,
        runtime_path: str | PathLike[str],
        *,
        browser_type: str = "chromium",
        install_runtime: bool = False,
    ) -> None:
        self._runtime_path = Path(runtime_path)
        self._browser_type = browser_type
        self._install_runtime = install_runtime

    @classmethod
    def from_config(cls, config: RuntimeConfig | None = None) -> BrowserRenderer:
        """Return a renderer using the runtime configured for this process.

        The bundled location is installed on first use when it is still empty;
        explicit overrides are used as given.
        """

        config = config or get_config()
        return cls(
            config.runtime_script,
            install_runtime=config.runtime_script == DEFAULT_RUNTIME_SCRIPT,
        )

    @property
    def runtime_path(self) -> Path:
        return self._runtime_path

    @property
    def install_runtime(self) -> bool:
        return self._install_runtime

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def render(self, script_path: str | PathLike[str], options: ThumbnailOptions) -> str:
        """Return a data URL of the composition published as *script_path*."""

        if self._install_runtime:
            await asyncio.to_thread(ensure_runtime, self._runtime_path)
        runtime_source = self._read_source(self._runtime_path, "runtime")
        asset_source = self._read_source(Path(script_path), "asset")

        params = {
            "assetPath": str(script_path),
            "clipName": clip_name_for(str(script_path)),
            "width": options.width,
            "height": options.height,
            "scale": options.scale,
            "stopPoint": options.stop_point,
            "imageType": options.image_format.mime_type,
            "imageQuality": options.image_quality,
        }

        try:
            async with asyncio.timeout(options.capture_timeout_ms / 1000):
                async with async_playwright() as playwright:
                    result = await self._render_in_browser(
                        playwright,
                        options,
                        (runtime_source, options.preload_script, asset_source),
                        params,
                    )
        except TimeoutError as exc:
            raise RenderError(
                f"Rendering {script_path!s} exceeded {options.capture_timeout_ms} ms"
            ) from exc
        except PlaywrightError as exc:
            raise RenderError(f"Browser failed while rendering {script_path!s}: {exc.message}") from exc

        if result is None:
            raise RenderError("An error occurred generating the image.")
        return result

    # ------------------------------------------------------------------
    # Browser helpers
    # ------------------------------------------------------------------
    async def _render_in_browser(
        self,
        playwright: Playwright,
        options: ThumbnailOptions,
        sources: tuple[str | None, ...],
        params: dict[str, Any],
    ) -> str | None:
        browser = await self._launch(playwright, options)
        try:
            page = await browser.new_page()
            page.on("console", _log_console_message)
            page.on("pageerror", lambda error: logger.warning("browser page error: %s", error))

            await self._load_sources(page, sources)
            return await page.evaluate(_capture_script(), params)
        finally:
            await browser.close()

    async def _launch(self, playwright: Playwright, options: ThumbnailOptions) -> Browser:
        if self._browser_type not in _BROWSER_TYPES:
            raise RenderError(f"Unknown browser type: {self._browser_type!r}")
        launcher = getattr(playwright, self._browser_type)
        launch_args: dict[str, Any] = {
            "headless": not options.debug_mode,
            "timeout": options.render_timeout_ms,
        }
        if options.debug_mode and self._browser_type == "chromium":
            launch_args["args"] = [_DEVTOOLS_FLAG]

        logger.debug("Launching %s (timeout %s ms)", self._browser_type, options.render_timeout_ms)
        return await launcher.launch(**launch_args)

    async def _load_sources(self, page: Page, sources: tuple[str | None, ...]) -> None:
        # Indirect eval runs in the global scope, so `var` declarations in the
        # exported asset become the globals the capture routine looks up.
        for source in sources:
            if source:
                await page.evaluate(_GLOBAL_EVAL, source)

    def _read_source(self, path: Path, label: str) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise RenderError(f"Unable to read {label} script {path!s}: {exc}") from exc


def _log_console_message(message: ConsoleMessage) -> None:
    logger.info("browser console: %s", message.text)
