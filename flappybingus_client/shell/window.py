"""
pywebview window factory.

`WebviewWindowFactory.create()` turns a resolved `ClientConfig` into a window
handle. `show()` opens the window on the game URL, wires the zoom/navigation
controller and menu, and blocks in the GUI loop until the window closes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from flappybingus_client.common.types import ClientConfig
from flappybingus_client.shell.backend import BrowserLauncher
from flappybingus_client.shell.controller import WebViewController
from flappybingus_client.shell.engine import WebviewEngine
from flappybingus_client.shell.executor import ThreadSerialExecutor
from flappybingus_client.shell.menu import menu_build
from flappybingus_client.shell.runtime import WebviewRuntime

__all__ = ["WindowActions", "WebviewClientWindow", "WebviewWindowFactory"]

logger = logging.getLogger(__name__)


class WindowActions:
    """Menu actions of one window, bound at construction."""

    def __init__(
        self, controller: WebViewController, launcher: BrowserLauncher, game_url: str
    ) -> None:
        self._controller: WebViewController = controller
        self._launcher: BrowserLauncher = launcher
        self._game_url: str = game_url

    def page_reload(self) -> None:
        self._controller.page_reload()

    def external_open(self) -> None:
        """Open the game externally; failures are reported, not raised into the GUI."""
        try:
            self._launcher.url_open(self._game_url)
        except RuntimeError as e:
            logger.error(f"Open in browser failed: {e}")

    def zoom_increase(self) -> None:
        self._controller.zoom_increase()

    def zoom_decrease(self) -> None:
        self._controller.zoom_decrease()

    def zoom_reset(self) -> None:
        self._controller.zoom_reset()


class WebviewClientWindow:
    """Window handle for one client configuration."""

    def __init__(
        self,
        config: ClientConfig,
        runtime: WebviewRuntime,
        launcher: BrowserLauncher,
        executor_factory: Callable[[], ThreadSerialExecutor],
    ) -> None:
        self._config: ClientConfig = config
        self._runtime: WebviewRuntime = runtime
        self._launcher: BrowserLauncher = launcher
        self._executor_factory: Callable[[], ThreadSerialExecutor] = executor_factory
        self.controller: WebViewController | None = None
        self.actions: WindowActions | None = None

    def show(self) -> None:
        """
        Create the window and run the GUI loop until it closes.

        Raises:
            RuntimeError: If the webview runtime was not initialized.
        """
        webview = self._runtime.module_get()
        game_url: str = self._config.gameUrl_get()
        logger.info(
            f"Opening {game_url} ({self._config.width}x{self._config.height}"
            f"{', fullscreen' if self._config.fullscreen else ''})"
        )

        window = webview.create_window(
            self._config.title,
            url=game_url,
            width=self._config.width,
            height=self._config.height,
            fullscreen=self._config.fullscreen,
        )

        executor: ThreadSerialExecutor = self._executor_factory()
        self.controller = WebViewController(WebviewEngine(window), executor)
        self.actions = WindowActions(self.controller, self._launcher, game_url)
        menu = menu_build(self.actions) if self._config.show_menu else None

        try:
            self._runtime.loop_run(menu=menu)
        finally:
            executor.shutdown(wait=False)
            logger.debug("Window closed")


class WebviewWindowFactory:
    """Creates pywebview-backed client windows."""

    def __init__(
        self,
        runtime: WebviewRuntime,
        launcher: BrowserLauncher,
        executor_factory: Callable[[], ThreadSerialExecutor] = ThreadSerialExecutor,
    ) -> None:
        self._runtime: WebviewRuntime = runtime
        self._launcher: BrowserLauncher = launcher
        self._executor_factory: Callable[[], ThreadSerialExecutor] = executor_factory

    def create(self, config: ClientConfig) -> WebviewClientWindow:
        """Create a window handle for `config`."""
        return WebviewClientWindow(config, self._runtime, self._launcher, self._executor_factory)
