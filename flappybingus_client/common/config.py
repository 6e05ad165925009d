"""
Launch configuration resolution.

Resolution merges three layers, lowest precedence first:

1. Built-in defaults
2. `FLAPPYBINGUS_*` environment variables
3. Command-line flags

Problems never stop the scan. Every unknown option, missing value, malformed
dimension and URL problem is collected so that one invocation reports all of
them. A help request wins over everything, including collected errors.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field

from flappybingus_client.common.types import (
    ClientConfig,
    ConfigIssue,
    ConfigOutcome,
    ErrorsOutcome,
    HelpOutcome,
    IssueKind,
    ParseOutcome,
)
from flappybingus_client.common.urls import InvalidUrlError, url_normalize

__all__ = [
    "DEFAULT_SERVER",
    "DEFAULT_TITLE",
    "DEFAULT_PATH",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "ENV_SERVER_URL",
    "ENV_PATH",
    "ENV_WIDTH",
    "ENV_HEIGHT",
    "ENV_TITLE",
    "config_resolve",
]

DEFAULT_SERVER: str = "http://localhost:3000"
DEFAULT_TITLE: str = "FlappyBingus"
DEFAULT_PATH: str = "/"
DEFAULT_WIDTH: int = 1280
DEFAULT_HEIGHT: int = 720

ENV_SERVER_URL: str = "FLAPPYBINGUS_SERVER_URL"
ENV_PATH: str = "FLAPPYBINGUS_PATH"
ENV_WIDTH: str = "FLAPPYBINGUS_CLIENT_WIDTH"
ENV_HEIGHT: str = "FLAPPYBINGUS_CLIENT_HEIGHT"
ENV_TITLE: str = "FLAPPYBINGUS_CLIENT_TITLE"

HELP_FLAGS: frozenset[str] = frozenset({"-h", "--help"})
VALUE_FLAGS: frozenset[str] = frozenset({"--server", "--path", "--width", "--height", "--title"})

INT_MAX: int = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class _Draft:
    """Mutable working state of one resolution pass"""
    server: str
    title: str
    path: str
    width: int
    height: int
    fullscreen: bool = False
    show_menu: bool = True
    help_requested: bool = False
    issues: list[ConfigIssue] = field(default_factory=list)

    def issue_add(self, kind: IssueKind, message: str) -> None:
        """Record a problem in detection order"""
        self.issues.append(ConfigIssue(kind=kind, message=message))


def config_resolve(args: Sequence[str] | None, env: Mapping[str, str]) -> ParseOutcome:
    """
    Resolve launch configuration from arguments and environment.

    Args:
        args:
            Command-line tokens, without the program name.
        env:
            Environment mapping (usually `os.environ`).

    Returns:
        `HelpOutcome` when `-h`/`--help` is present, `ErrorsOutcome` with
        every detected problem, or `ConfigOutcome` with a valid config.
    """
    draft: _Draft = draftFromEnvironment_build(env)

    for token, value in _tokens_iterate(list(args or [])):
        token_apply(draft, token, value)

    if draft.help_requested:
        return HelpOutcome()

    server_url: str = draft.server
    try:
        server_url = url_normalize(draft.server).value
    except InvalidUrlError as exc:
        draft.issue_add(IssueKind.INVALID_URL, str(exc))

    path: str = path_normalize(draft.path)
    title: str = draft.title if draft.title.strip() else DEFAULT_TITLE

    if draft.issues:
        return ErrorsOutcome(issues=tuple(draft.issues))

    return ConfigOutcome(
        config=ClientConfig(
            server_url=server_url,
            path=path,
            width=draft.width,
            height=draft.height,
            title=title,
            fullscreen=draft.fullscreen,
            show_menu=draft.show_menu,
        )
    )


def draftFromEnvironment_build(env: Mapping[str, str]) -> _Draft:
    """
    Seed a resolution draft from defaults and environment overrides.

    Args:
        env: Environment mapping.

    Returns:
        Draft with environment integer errors already recorded.
    """
    draft: _Draft = _Draft(
        server=env.get(ENV_SERVER_URL, DEFAULT_SERVER),
        title=env.get(ENV_TITLE, DEFAULT_TITLE),
        path=env.get(ENV_PATH, DEFAULT_PATH),
        width=DEFAULT_WIDTH,
        height=DEFAULT_HEIGHT,
    )
    draft.width = positiveInt_parse(env.get(ENV_WIDTH), DEFAULT_WIDTH, ENV_WIDTH, draft)
    draft.height = positiveInt_parse(env.get(ENV_HEIGHT), DEFAULT_HEIGHT, ENV_HEIGHT, draft)
    return draft


def token_apply(draft: _Draft, token: str, value: str | None) -> None:
    """
    Apply one command-line option to the draft.

    Args:
        draft: Resolution draft to update.
        token: Option token.
        value: Value claimed by a value flag, None when it had none.
    """
    if token in HELP_FLAGS:
        draft.help_requested = True
    elif token in VALUE_FLAGS:
        if value is None:
            draft.issue_add(IssueKind.MISSING_VALUE, f"Missing value for {token}")
        elif token == "--server":
            draft.server = value
        elif token == "--path":
            draft.path = value
        elif token == "--title":
            draft.title = value
        elif token == "--width":
            draft.width = positiveInt_parse(value, draft.width, "Width", draft)
        elif token == "--height":
            draft.height = positiveInt_parse(value, draft.height, "Height", draft)
    elif token == "--fullscreen":
        draft.fullscreen = True
    elif token == "--windowed":
        draft.fullscreen = False
    elif token == "--no-menu":
        draft.show_menu = False
    else:
        draft.issue_add(IssueKind.UNKNOWN_OPTION, f"Unknown option: {token}")


def positiveInt_parse(raw: str | None, fallback: int, label: str, draft: _Draft) -> int:
    """
    Parse a strictly positive 32-bit integer.

    Args:
        raw: Raw value, or None when the source did not provide one.
        fallback: Value kept when parsing fails.
        label: Error label (`Width`/`Height` or the environment key).
        draft: Draft that collects the error.

    Returns:
        Parsed value, or the fallback.
    """
    if raw is None:
        return fallback
    text: str = raw.strip()
    if _INTEGER.fullmatch(text):
        parsed: int = int(text)
        if 0 < parsed <= INT_MAX:
            return parsed
    draft.issue_add(IssueKind.INVALID_INTEGER, f"{label} must be a positive integer")
    return fallback


def path_normalize(path: str | None) -> str:
    """
    Normalize the in-game path.

    Args:
        path: Resolved path value.

    Returns:
        `/` for a blank path, otherwise the trimmed path with a leading slash.
    """
    if path is None or not path.strip():
        return DEFAULT_PATH
    trimmed: str = path.strip()
    return trimmed if trimmed.startswith("/") else "/" + trimmed


def _tokens_iterate(tokens: list[str]) -> Iterator[tuple[str, str | None]]:
    """
    Walk tokens, pairing value flags with their values.

    A value flag always claims the following slot, even when that slot is
    missing or holds another `--` flag; such a flag is then reported as a
    missing value and is not re-read as an option.

    Yields:
        `(token, value)` pairs; value is None for tokens without one.
    """
    index: int = 0
    while index < len(tokens):
        token: str = tokens[index]
        value: str | None = None
        if token in VALUE_FLAGS:
            index += 1
            if index < len(tokens) and not tokens[index].startswith("--"):
                value = tokens[index]
        yield token, value
        index += 1
