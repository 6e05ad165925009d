"""Capability protocols between the client core and the desktop shell."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from flappybingus_client.common.types import ClientConfig

Action = Callable[[], None]


class SerialExecutor(Protocol):
    """Runs submitted actions one at a time, in submission order."""

    def submit(self, action: Action) -> None:
        """
        Queue an action and return without waiting for it.

        Args:
            action: Zero-argument callable.
        """


class WebEngine(Protocol):
    """Browser engine operations used by the zoom/navigation controller."""

    def url_load(self, url: str) -> None:
        """
        Navigate to a URL.

        Args:
            url: Absolute URL.
        """

    def page_reload(self) -> None:
        """Reload the current page."""

    def zoom_set(self, zoom: float) -> None:
        """
        Apply a page zoom factor.

        Args:
            zoom: Zoom factor, 1.0 being 100%.
        """


class ClientActions(Protocol):
    """Menu-bound operations of a client window."""

    def page_reload(self) -> None:
        """Reload the game page."""

    def external_open(self) -> None:
        """Open the game in the system browser."""

    def zoom_increase(self) -> None:
        """Zoom in one step."""

    def zoom_decrease(self) -> None:
        """Zoom out one step."""

    def zoom_reset(self) -> None:
        """Restore the default zoom."""


class BrowserLauncher(Protocol):
    """Opens URLs outside the embedded webview."""

    def url_open(self, url: str) -> None:
        """
        Open a URL in the platform browser.

        Args:
            url: Absolute URL.

        Raises:
            RuntimeError: When the platform cannot open a browser.
        """


class ClientWindow(Protocol):
    """Displayable window handle."""

    def show(self) -> None:
        """Display the window."""


class WindowFactory(Protocol):
    """Creates windows from a resolved configuration."""

    def create(self, config: ClientConfig) -> ClientWindow:
        """
        Create a window for a configuration.

        Args:
            config: Validated client configuration.

        Returns:
            Window handle, not yet shown.
        """
