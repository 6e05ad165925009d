"""
Client usage text and error reporting.

Flag scanning itself lives in `flappybingus_client.common.config`; this
module owns only what the user sees.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Protocol, TextIO

__all__ = ["ClientOutput", "StreamOutput", "usage_text", "errors_print", "FAILURE_BANNER"]

FAILURE_BANNER: str = "FlappyBingus Desktop Client failed to start:"


class ClientOutput(Protocol):
    """Line-oriented output sink."""

    def println(self, message: str) -> None:
        """Write a line to standard output."""

    def errln(self, message: str) -> None:
        """Write a line to standard error."""


class StreamOutput:
    """Output sink writing to text streams (stdout/stderr by default)."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out: TextIO = out or sys.stdout
        self._err: TextIO = err or sys.stderr

    def println(self, message: str) -> None:
        print(message, file=self._out)

    def errln(self, message: str) -> None:
        print(message, file=self._err)


def usage_text() -> str:
    """
    Build the help text.

    Returns:
        Multi-line usage string.
    """
    return "\n".join(
        [
            "FlappyBingus Desktop Client",
            "",
            "Usage:",
            "  flappybingus-client [options]",
            "",
            "Options:",
            "  --server <url>       Base server URL (default: http://localhost:3000)",
            "  --path <path>        Path to load within the server (default: /)",
            "  --width <px>         Window width (default: 1280)",
            "  --height <px>        Window height (default: 720)",
            "  --title <text>       Window title (default: FlappyBingus)",
            "  --fullscreen         Start in fullscreen mode",
            "  --windowed           Start in windowed mode",
            "  --no-menu            Hide the menu bar",
            "  -h, --help           Show this help text",
            "",
            "Environment:",
            "  FLAPPYBINGUS_SERVER_URL     Default server URL",
            "  FLAPPYBINGUS_PATH           Default path",
            "  FLAPPYBINGUS_CLIENT_WIDTH   Default width",
            "  FLAPPYBINGUS_CLIENT_HEIGHT  Default height",
            "  FLAPPYBINGUS_CLIENT_TITLE   Default window title",
            "  FLAPPYBINGUS_CLIENT_CONFIG  Shell settings file (logging, webview)",
        ]
    )


def errors_print(output: ClientOutput, errors: Iterable[str]) -> None:
    """
    Report startup errors beneath the failure banner.

    Args:
        output: Output sink.
        errors: Error messages in detection order.
    """
    output.errln(FAILURE_BANNER)
    for error in errors:
        output.errln(f" - {error}")
