"""System browser launching."""

from __future__ import annotations

import logging
import webbrowser
from typing import Protocol

__all__ = ["BrowserFacade", "DesktopBrowserLauncher", "SystemBrowserFacade"]

logger = logging.getLogger(__name__)


class BrowserFacade(Protocol):
    """Platform browser capabilities."""

    def isBrowseSupported(self) -> bool:
        """Whether a browser can be launched on this platform."""

    def url_browse(self, url: str) -> bool:
        """
        Open a URL.

        Args:
            url: Absolute URL.

        Returns:
            True when the platform accepted the request.
        """


class SystemBrowserFacade:
    """Browser facade over the `webbrowser` module."""

    def isBrowseSupported(self) -> bool:
        """Whether `webbrowser` can find a usable browser."""
        try:
            webbrowser.get()
        except webbrowser.Error:
            return False
        return True

    def url_browse(self, url: str) -> bool:
        """Open `url` in a new browser tab."""
        return webbrowser.open(url, new=2)


class DesktopBrowserLauncher:
    """Opens the game in the system browser, failing loudly when it cannot."""

    def __init__(self, facade: BrowserFacade | None = None) -> None:
        self._facade: BrowserFacade = facade or SystemBrowserFacade()

    def url_open(self, url: str) -> None:
        """
        Open a URL in the system browser.

        Args:
            url: Absolute URL.

        Raises:
            RuntimeError: When browsing is unsupported or the launch fails.
        """
        if not self._facade.isBrowseSupported():
            raise RuntimeError("Desktop browsing is not supported on this platform.")
        try:
            opened: bool = self._facade.url_browse(url)
        except Exception as exc:
            raise RuntimeError(f"Unable to open browser for {url}") from exc
        if not opened:
            raise RuntimeError(f"Unable to open browser for {url}")
        logger.info(f"Opened {url} in system browser")
