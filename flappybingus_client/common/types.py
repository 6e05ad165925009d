"""Common types and data structures for the FlappyBingus client"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from flappybingus_client.common.urls import gameUrl_build


class IssueKind(Enum):
    """Categories of configuration problems"""
    MISSING_VALUE = "missing_value"      # Value flag without a following value
    UNKNOWN_OPTION = "unknown_option"    # Unrecognized token
    INVALID_INTEGER = "invalid_integer"  # Non-numeric or non-positive width/height
    INVALID_URL = "invalid_url"          # Scheme, host or syntax violation


@dataclass(frozen=True)
class ConfigIssue:
    """Single human-readable configuration problem"""
    kind: IssueKind
    message: str


@dataclass(frozen=True)
class ClientConfig:
    """Launch-ready client configuration

    Dimensions are validated on construction so that every code path that
    builds a config is protected, not only the resolver.
    """
    server_url: str
    path: str
    width: int
    height: int
    title: str
    fullscreen: bool = False
    show_menu: bool = True

    def __post_init__(self) -> None:
        """Validate window dimensions"""
        if self.width <= 0:
            raise ValueError("width must be positive")
        if self.height <= 0:
            raise ValueError("height must be positive")

    def gameUrl_get(self) -> str:
        """
        Build the full URL of the game page.

        Returns:
            Server URL with the configured path resolved against it.
        """
        return gameUrl_build(self.server_url, self.path)


@dataclass(frozen=True)
class HelpOutcome:
    """Resolution result when help was requested"""


@dataclass(frozen=True)
class ErrorsOutcome:
    """Resolution result carrying every detected problem, in detection order"""
    issues: tuple[ConfigIssue, ...]

    def __post_init__(self) -> None:
        """Reject an empty issue list"""
        if not self.issues:
            raise ValueError("ErrorsOutcome requires at least one issue")

    @property
    def errors(self) -> list[str]:
        """Error messages in detection order"""
        return [issue.message for issue in self.issues]


@dataclass(frozen=True)
class ConfigOutcome:
    """Resolution result carrying a valid configuration"""
    config: ClientConfig


ParseOutcome = HelpOutcome | ErrorsOutcome | ConfigOutcome
