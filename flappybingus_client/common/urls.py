"""
Server URL normalization and game URL construction.

`url_normalize` turns user or environment supplied server addresses such as
`localhost:8080` or `https://example.com/game/` into strict absolute
`http`/`https` URLs. `gameUrl_build` joins a normalized server URL with the
in-game path that the window should open.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

__all__ = ["InvalidUrlError", "NormalizedUrl", "url_normalize", "gameUrl_build"]

ALLOWED_SCHEMES: tuple[str, ...] = ("http", "https")
DEFAULT_SCHEME_PREFIX: str = "http://"

# Characters that may never appear unescaped in a URI
_ILLEGAL_CHARS = re.compile(r'[\s"<>\\^`{|}\x00-\x1f\x7f]')
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class InvalidUrlError(ValueError):
    """Raised when a server URL cannot be normalized"""


@dataclass(frozen=True)
class NormalizedUrl:
    """Canonical absolute http(s) URL"""
    value: str

    def __str__(self) -> str:
        return self.value


def url_normalize(raw: str | None) -> NormalizedUrl:
    """
    Validate and canonicalize a server URL.

    Args:
        raw:
            Server URL as typed by the user or read from the environment.
            A missing scheme is inferred as `http://`.

    Returns:
        Normalized URL with at most the root path keeping its trailing slash.

    Raises:
        InvalidUrlError:
            Raised when the input is blank, syntactically invalid, uses a
            scheme other than http/https, or has no host.
    """
    if raw is None or not raw.strip():
        raise InvalidUrlError("Server URL is required")

    candidate: str = raw.strip()
    if "://" not in candidate:
        candidate = DEFAULT_SCHEME_PREFIX + candidate

    parts: SplitResult = _uri_split(candidate, raw)

    # urlsplit lowercases the scheme; the check must see it as typed
    scheme: str = candidate[: len(parts.scheme)]
    if scheme not in ALLOWED_SCHEMES:
        raise InvalidUrlError("Server URL must start with http:// or https://")
    if not parts.hostname or not parts.hostname.strip():
        raise InvalidUrlError("Server URL must include a host")

    path: str = parts.path
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]

    netloc: str = parts.netloc
    if netloc.endswith(":"):
        netloc = netloc[:-1]

    return NormalizedUrl(urlunsplit((scheme, netloc, path, parts.query, parts.fragment)))


def gameUrl_build(base_url: str, path: str | None) -> str:
    """
    Resolve the game path against the server URL.

    Args:
        base_url:
            Normalized server URL.
        path:
            Path within the server. Blank means `/`; a missing leading slash
            is added.

    Returns:
        Absolute game URL. An absolute path replaces any path of the base.
    """
    base: str = base_url if base_url.endswith("/") else base_url + "/"
    target: str = "/" if path is None or not path.strip() else path.strip()
    if not target.startswith("/"):
        target = "/" + target
    return urljoin(base, target)


def _uri_split(candidate: str, raw: str) -> SplitResult:
    """
    Parse a URI, rejecting what a strict URI parser would reject.

    Args:
        candidate: String to parse, scheme already inferred.
        raw: Original input, quoted in the error message.

    Returns:
        Split URI parts.

    Raises:
        InvalidUrlError: On any syntax violation.
    """
    if _ILLEGAL_CHARS.search(candidate) or _BAD_ESCAPE.search(candidate):
        raise InvalidUrlError(f"Invalid server URL: {raw}")
    try:
        parts: SplitResult = urlsplit(candidate)
        # Port is parsed lazily; touching it validates range and digits
        parts.port
    except ValueError as exc:
        raise InvalidUrlError(f"Invalid server URL: {raw}") from exc
    return parts
