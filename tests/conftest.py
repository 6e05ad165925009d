"""Pytest configuration and shared fixtures for flappybingus_client tests

This module provides fakes for the output sink and window factory that the
runner hands results to, plus common logging setup.
"""

import logging

import pytest

from flappybingus_client.common.types import ClientConfig


class RecordingOutput:
    """Output sink that keeps every line"""

    def __init__(self) -> None:
        self.out_lines: list[str] = []
        self.err_lines: list[str] = []

    def println(self, message: str) -> None:
        self.out_lines.append(message)

    def errln(self, message: str) -> None:
        self.err_lines.append(message)


class RecordingWindow:
    """Window handle that counts show() calls"""

    def __init__(self) -> None:
        self.show_calls: int = 0

    def show(self) -> None:
        self.show_calls += 1


class RecordingWindowFactory:
    """Window factory that records every configuration it receives"""

    def __init__(self) -> None:
        self.configs: list[ClientConfig] = []
        self.windows: list[RecordingWindow] = []

    @property
    def created(self) -> int:
        return len(self.configs)

    def create(self, config: ClientConfig) -> RecordingWindow:
        self.configs.append(config)
        window = RecordingWindow()
        self.windows.append(window)
        return window


@pytest.fixture
def recording_output() -> RecordingOutput:
    """Fresh recording output sink"""
    return RecordingOutput()


@pytest.fixture
def recording_factory() -> RecordingWindowFactory:
    """Fresh recording window factory"""
    return RecordingWindowFactory()


@pytest.fixture
def sample_config() -> ClientConfig:
    """Valid configuration with default values"""
    return ClientConfig(
        server_url="http://localhost:3000",
        path="/",
        width=1280,
        height=720,
        title="FlappyBingus",
    )


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """Setup logging for tests"""
    caplog.set_level(logging.DEBUG)


class FakeWebviewWindow:
    """Stand-in for webview.Window recording engine calls"""

    def __init__(self, title: str, **kwargs) -> None:
        self.title = title
        self.kwargs = kwargs
        self.loaded: list[str] = []
        self.scripts: list[str] = []

    def load_url(self, url: str) -> None:
        self.loaded.append(url)

    def evaluate_js(self, script: str) -> None:
        self.scripts.append(script)


class FakeWebviewModule:
    """Stand-in for the pywebview module: window creation and GUI loop"""

    def __init__(self) -> None:
        self.windows: list[FakeWebviewWindow] = []
        self.start_calls: list[dict] = []

    def create_window(self, title: str, **kwargs) -> FakeWebviewWindow:
        window = FakeWebviewWindow(title, **kwargs)
        self.windows.append(window)
        return window

    def start(self, **kwargs) -> None:
        self.start_calls.append(kwargs)


@pytest.fixture
def fake_webview() -> FakeWebviewModule:
    """Fresh fake pywebview module"""
    return FakeWebviewModule()
