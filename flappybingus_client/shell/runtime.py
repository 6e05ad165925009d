"""
Embedded webview runtime lifecycle.

The pywebview toolkit is initialized explicitly by the composition root,
exactly once, rather than through import-time or static state. Later
`initialize()` calls are harmless no-ops.
"""

from __future__ import annotations

import importlib
import logging
import threading
from collections.abc import Callable
from types import ModuleType
from typing import Any

from flappybingus_client.common.shell_config import WebviewConfig

__all__ = ["WebviewRuntime"]

logger = logging.getLogger(__name__)


def _webviewModule_import() -> ModuleType:
    """Import the pywebview package."""
    return importlib.import_module("webview")


class WebviewRuntime:
    """Owns one-time pywebview initialization and the GUI loop."""

    def __init__(
        self,
        config: WebviewConfig | None = None,
        module_loader: Callable[[], Any] = _webviewModule_import,
    ) -> None:
        """
        Prepare the runtime without touching the toolkit.

        Args:
            config: Webview settings from the shell settings file.
            module_loader: Returns the pywebview module; replaceable in tests.
        """
        self._config: WebviewConfig = config or WebviewConfig()
        self._module_loader: Callable[[], Any] = module_loader
        self._lock: threading.Lock = threading.Lock()
        self._initialized: bool = False
        self._module: Any = None

    def initialize(self) -> bool:
        """
        Load and configure pywebview once.

        Returns:
            True on the call that performed initialization, False afterwards.
        """
        with self._lock:
            if self._initialized:
                return False
            module = self._module_loader()
            if not self._config.debug:
                logging.getLogger("pywebview").setLevel(logging.WARNING)
            self._module = module
            self._initialized = True
        logger.info("Webview runtime initialized")
        return True

    def isInitialized(self) -> bool:
        """Whether `initialize()` has completed."""
        return self._initialized

    def module_get(self) -> Any:
        """
        Get the initialized pywebview module.

        Returns:
            pywebview module.

        Raises:
            RuntimeError: If `initialize()` has not been called.
        """
        if not self._initialized:
            raise RuntimeError("Webview runtime not initialized. Call runtime.initialize() first.")
        return self._module

    def loop_run(self, menu: list[Any] | None = None) -> None:
        """
        Run the GUI loop until every window is closed.

        Args:
            menu: Application menus, or None for no menu bar.
        """
        webview = self.module_get()
        logger.debug(f"Starting GUI loop (gui={self._config.gui or 'auto'})")
        webview.start(
            menu=menu or [],
            debug=self._config.debug,
            gui=self._config.gui,
            private_mode=self._config.private_mode,
        )
