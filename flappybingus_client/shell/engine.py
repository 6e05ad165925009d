"""pywebview implementation of the web engine protocol."""

from __future__ import annotations

import json
from typing import Any

__all__ = ["WebviewEngine"]


class WebviewEngine:
    """Drives a pywebview window: navigation, reload and page zoom."""

    RELOAD_SCRIPT: str = "window.location.reload();"
    ZOOM_SCRIPT: str = "document.documentElement.style.zoom = {value};"

    def __init__(self, window: Any) -> None:
        """
        Wrap a pywebview window.

        Args:
            window: `webview.Window` returned by `webview.create_window`.
        """
        self._window = window

    def url_load(self, url: str) -> None:
        """Navigate the window to `url`."""
        self._window.load_url(url)

    def page_reload(self) -> None:
        """Reload the current document."""
        self._window.evaluate_js(self.RELOAD_SCRIPT)

    def zoom_set(self, zoom: float) -> None:
        """
        Apply a CSS zoom factor to the document element.

        Args:
            zoom: Zoom factor, 1.0 being 100%.
        """
        value: str = json.dumps(f"{zoom:.2f}")
        self._window.evaluate_js(self.ZOOM_SCRIPT.format(value=value))
