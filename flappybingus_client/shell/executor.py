"""
Serial execution of engine work on a dedicated rendering thread.

Engine-affecting actions are never run on the caller's thread. They are
queued and executed one at a time, in submission order, by a single worker.
"""

from __future__ import annotations

import logging
import queue
import threading

from flappybingus_client.shell.backend import Action

__all__ = ["ThreadSerialExecutor"]

logger = logging.getLogger(__name__)

_STOP = object()


class ThreadSerialExecutor:
    """Single worker thread draining a FIFO of zero-argument actions."""

    def __init__(self, name: str = "flappybingus-render") -> None:
        """
        Start the worker thread.

        Args:
            name: Worker thread name.
        """
        self._queue: queue.Queue[object] = queue.Queue()
        self._lock: threading.Lock = threading.Lock()
        self._closed: bool = False
        self._worker: threading.Thread = threading.Thread(
            target=self._actions_loop, name=name, daemon=True
        )
        self._worker.start()

    def submit(self, action: Action) -> None:
        """
        Queue an action for the worker.

        Args:
            action: Zero-argument callable.

        Raises:
            RuntimeError: If the executor has been shut down.
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("Executor has been shut down")
            self._queue.put(action)

    def shutdown(self, wait: bool = True) -> None:
        """
        Stop accepting work; queued actions still run.

        Args:
            wait: Block until the worker has drained the queue.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_STOP)
        if wait and threading.current_thread() is not self._worker:
            self._worker.join()

    def _actions_loop(self) -> None:
        """Run queued actions until the stop marker is reached."""
        while True:
            item = self._queue.get()
            if item is _STOP:
                return
            try:
                item()  # type: ignore[operator]
            except Exception:
                logger.exception("Rendering action failed")
