"""Headless browser rendering for Animate canvas exports."""

from .renderer import BrowserRenderer

__all__ = ["BrowserRenderer"]
