"""Desktop shell collaborators: webview window, engine control, menus."""

from flappybingus_client.shell.backend import (
    BrowserLauncher,
    ClientActions,
    ClientWindow,
    SerialExecutor,
    WebEngine,
    WindowFactory,
)
from flappybingus_client.shell.controller import WebViewController
from flappybingus_client.shell.executor import ThreadSerialExecutor

__all__ = [
    "BrowserLauncher",
    "ClientActions",
    "ClientWindow",
    "SerialExecutor",
    "ThreadSerialExecutor",
    "WebEngine",
    "WebViewController",
    "WindowFactory",
]
