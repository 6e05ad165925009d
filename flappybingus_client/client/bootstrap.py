"""Client bootstrap helpers for settings, logging and shell wiring."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from flappybingus_client.common.shell_config import ShellConfig, ShellConfigLoader
from flappybingus_client.shell.browser import DesktopBrowserLauncher
from flappybingus_client.shell.runtime import WebviewRuntime
from flappybingus_client.shell.window import WebviewWindowFactory

logger = logging.getLogger(__name__)


def shellConfig_load(env: Mapping[str, str], config_path: Path | None = None) -> ShellConfig:
    """
    Load shell settings from file, or defaults when none exists.

    Args:
        env: Environment mapping (for FLAPPYBINGUS_CLIENT_CONFIG).
        config_path: Optional explicit settings path.

    Returns:
        Loaded shell settings.
    """
    return ShellConfigLoader.config_load(file_path=config_path, env=env)


def loggingWithConfig_setup(config: ShellConfig, logging_setup_func) -> None:
    """
    Setup client logging from shell settings.

    Args:
        config: Loaded shell settings.
        logging_setup_func: Logging setup callback.
    """
    logging_setup_func(config.logging.level, config.logging.format, config.logging.file)


def runtime_initialize(config: ShellConfig) -> WebviewRuntime:
    """
    Create and initialize the webview runtime.

    Args:
        config: Loaded shell settings.

    Returns:
        Initialized runtime.
    """
    runtime: WebviewRuntime = WebviewRuntime(config.webview)
    runtime.initialize()
    return runtime


def windowFactory_create(runtime: WebviewRuntime) -> WebviewWindowFactory:
    """
    Create the window factory used for a valid configuration.

    Args:
        runtime: Initialized webview runtime.

    Returns:
        pywebview window factory with a system browser launcher.
    """
    return WebviewWindowFactory(runtime, DesktopBrowserLauncher())
