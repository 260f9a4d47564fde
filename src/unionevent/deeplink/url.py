"""
Deep-link URL helper

Splits and joins the parts of an application deep link:

    com.example.app://?index=1            scheme, empty host, query
    com.example.app:///Children?index=1   ...with a path

The host is always empty so the link reads ``scheme://``. Path segments
and query keys/values are percent-encoded with RFC 3986 rules, nothing
left unescaped, so any printable Unicode survives a round trip.
"""

import urllib.parse
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from ..errors import DeepLinkError

# "%3F%3F" decodes to "??". Marks a value that could not be encoded or decoded
# (very rare, e.g. a lone UTF-16 surrogate).
ENCODING_FAILURE = "%3F%3F"
DECODING_FAILURE = "??"


def _encode(text: str) -> str:
    try:
        return urllib.parse.quote(text, safe="", errors="strict")
    except UnicodeEncodeError:
        return ENCODING_FAILURE


def _decode(text: str) -> str:
    try:
        return urllib.parse.unquote(text, errors="strict")
    except UnicodeDecodeError:
        return DECODING_FAILURE


def join_path(path_items: Optional[Sequence[str]]) -> str:
    """
    Join path segments into an encoded path with a leading slash.

    A first segment that already starts with ``/`` (such as the ``"/"``
    returned by ``path_components``) does not produce a double slash.
    """
    segments = list(path_items or [])
    if segments and segments[0].startswith("/"):
        segments[0] = segments[0][1:]
        if not segments[0]:
            segments.pop(0)
    return "/" + "/".join(_encode(s) for s in segments)


def path_components(path: str) -> List[str]:
    """
    Split an encoded path into decoded components.

    The first component is always ``"/"``; a trailing empty component is
    dropped. ``"/This/That"`` gives ``["/", "This", "That"]``.
    """
    parts = path.split("/")
    if parts and not parts[0]:
        parts[0] = "/"
    else:
        parts.insert(0, "/")
    if len(parts) > 1 and not parts[-1]:
        parts.pop()
    return [parts[0]] + [_decode(p) for p in parts[1:]]


def encode_query(key_values: Optional[Dict[str, str]]) -> str:
    """Encode a key/value mapping as a query string (no leading ``?``)."""
    return "&".join(f"{_encode(k)}={_encode(v)}" for k, v in (key_values or {}).items())


def key_values_from_query(query: str) -> Dict[str, str]:
    """
    Transform a URL query string into a key/value dictionary.

    ``+`` is kept literally. A key without ``=`` maps to an empty string;
    for repeated keys the last value wins.
    """
    query = query.lstrip("?")
    result: Dict[str, str] = {}
    if not query:
        return result
    for pair in query.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        result[_decode(key)] = _decode(value)
    return result


def build_url(scheme: str, path_items: Optional[Sequence[str]] = None, key_values: Optional[Dict[str, str]] = None) -> str:
    """
    Build a deep link.

    Args:
        scheme: URL scheme, usually the application's bundle id
        path_items: Path segments, e.g. ``["Children"]`` (default ``/``)
        key_values: Query values to pass to the application

    Example:
        >>> build_url("com.example.app", ["Children"], {"index": "1"})
        'com.example.app:///Children?index=1'
    """
    url = f"{urllib.parse.quote(scheme, safe='+-.')}://{join_path(path_items)}"
    query = encode_query(key_values)
    if query:
        url = f"{url}?{query}"
    return url


def split_scheme(url: str) -> Tuple[str, str]:
    """Split ``scheme:rest`` keeping the scheme's case."""
    scheme, sep, rest = url.partition(":")
    if not sep or not scheme or "/" in scheme or "?" in scheme:
        raise DeepLinkError(f"No scheme in URL: {url!r}")
    return _decode(scheme), rest


class DeepLink(BaseModel):
    """A decoded deep link."""
    scheme: str
    host: str = ""
    path: List[str] = Field(default_factory=lambda: ["/"])
    query: Dict[str, str] = Field(default_factory=dict)
    fragment: str = ""

    def matches(self, scheme: str, path_items: Optional[Sequence[str]] = None) -> bool:
        """True if this link has ``scheme`` and the path built from ``path_items``."""
        return self.scheme == scheme and self.path == path_components(join_path(path_items))

    def to_url(self) -> str:
        return build_url(self.scheme, self.path, self.query)


def parse_url(url: str) -> DeepLink:
    """
    Decode a deep link into scheme, path components and query values.

    Raises:
        DeepLinkError: If ``url`` has no scheme
    """
    scheme, rest = split_scheme(url.strip())
    try:
        parts = urllib.parse.urlsplit(rest)
    except ValueError as e:
        raise DeepLinkError(f"Malformed URL {url!r}: {e}") from e
    return DeepLink(
        scheme=scheme,
        host=parts.netloc,
        path=path_components(parts.path),
        query=key_values_from_query(parts.query),
        fragment=_decode(parts.fragment),
    )
