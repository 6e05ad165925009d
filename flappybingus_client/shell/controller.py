"""Zoom and navigation state for the embedded game view."""

from __future__ import annotations

import logging
import threading

from flappybingus_client.shell.backend import SerialExecutor, WebEngine

__all__ = ["WebViewController", "ZOOM_DEFAULT", "ZOOM_STEP", "ZOOM_MIN"]

logger = logging.getLogger(__name__)

ZOOM_DEFAULT: float = 1.0
ZOOM_STEP: float = 0.1
ZOOM_MIN: float = 0.2


class WebViewController:
    """Tracks the zoom factor and forwards engine work to a serial executor.

    Menu actions arrive on arbitrary threads. Each zoom step computes, stores
    and submits its value under one lock, so the engine applies zoom values
    in the same order the state was written.
    """

    def __init__(self, engine: WebEngine, executor: SerialExecutor) -> None:
        self._engine: WebEngine = engine
        self._executor: SerialExecutor = executor
        self._zoom: float = ZOOM_DEFAULT
        self._lock: threading.Lock = threading.Lock()

    def url_load(self, url: str) -> None:
        """Navigate the engine to `url`."""
        logger.debug(f"Loading {url}")
        self._executor.submit(lambda: self._engine.url_load(url))

    def page_reload(self) -> None:
        """Reload the current page."""
        self._executor.submit(self._engine.page_reload)

    def zoom_increase(self) -> None:
        """Zoom in one step."""
        with self._lock:
            self._zoom_update(self._zoom + ZOOM_STEP)

    def zoom_decrease(self) -> None:
        """Zoom out one step, never below the floor."""
        with self._lock:
            self._zoom_update(max(ZOOM_MIN, self._zoom - ZOOM_STEP))

    def zoom_reset(self) -> None:
        """Restore the default zoom."""
        with self._lock:
            self._zoom_update(ZOOM_DEFAULT)

    def zoom_get(self) -> float:
        """Current zoom factor."""
        return self._zoom

    def _zoom_update(self, value: float) -> None:
        """
        Store a zoom factor and submit it to the engine.

        Callers hold `_lock`.

        Args:
            value: New zoom factor. The submitted action applies this value
                even if further zoom calls happen before it runs.
        """
        self._zoom = value
        logger.debug(f"Zoom set to {value:.2f}")
        self._executor.submit(lambda: self._engine.zoom_set(value))
