"""String and path helpers shared by the URL resolvers.

Pure functions with no I/O: separator normalization, invalid-character
stripping, case-insensitive prefix handling and duplicate-free joining.
"""

from __future__ import annotations

import re
from typing import Final

URL_SEPARATOR: Final[str] = "/"
PATH_SEPARATOR: Final[str] = "\\"

SITE_MARKER: Final[str] = "@"
APPLICATION_MARKER: Final[str] = "~"

INVALID_PATH_CHARS: Final[frozenset[str]] = frozenset('"<>|' + "".join(chr(i) for i in range(32)))

_SCHEME_RE: Final = re.compile(r"^[A-Za-z][\w+.-]*://")


def to_url_separators(path: str) -> str:
    return path.replace(PATH_SEPARATOR, URL_SEPARATOR)


def remove_invalid_path_chars(path: str) -> str:
    """Drop characters that can never appear in a published file path."""
    return "".join(ch for ch in path if ch not in INVALID_PATH_CHARS)


def combine(*parts: str) -> str:
    """Join URL segments with exactly one separator between each pair.

    The first segment keeps its characters; later segments are cleaned of
    invalid path characters. Empty segments are skipped.

    Examples:
        >>> combine("/site1/", "/channels/1.html")
        '/site1/channels/1.html'
        >>> combine("", "a")
        'a'

    """
    if not parts:
        return ""
    result = to_url_separators(parts[0] or "")
    for part in parts[1:]:
        segment = remove_invalid_path_chars(to_url_separators(part or ""))
        if not segment:
            continue
        if not result:
            result = segment
            continue
        result = result.rstrip(URL_SEPARATOR) + URL_SEPARATOR + segment.lstrip(URL_SEPARATOR)
    return result


def strip_trailing_separator(url: str) -> str:
    """Return ``url`` without its trailing slash, keeping a bare ``/`` intact."""
    if not url:
        return URL_SEPARATOR
    if url != URL_SEPARATOR and url.endswith(URL_SEPARATOR):
        return url[:-1]
    return url


def starts_with_ignore_case(text: str, prefix: str) -> bool:
    if not text or not prefix:
        return False
    return text.lower().startswith(prefix.lower())


def replace_starts_with_ignore_case(text: str, prefix: str, replacement: str) -> str:
    """Replace a leading ``prefix`` (case-insensitive) once."""
    if not starts_with_ignore_case(text, prefix):
        return text
    return replacement + text[len(prefix) :]


def replace_starts_with(text: str, prefix: str, replacement: str) -> str:
    """Replace a leading ``prefix`` (case-sensitive) once."""
    if not text or not prefix or not text.startswith(prefix):
        return text
    return replacement + text[len(prefix) :]


def is_protocol_url(url: str) -> bool:
    """True for absolute URLs such as ``https://...`` or ``javascript:`` links."""
    if not url:
        return False
    return _SCHEME_RE.match(url) is not None or url.lower().startswith("javascript:")


def is_virtual_url(url: str) -> bool:
    """True when ``url`` uses the site (``@``) or application (``~``) notation."""
    if not url:
        return False
    return url.startswith((SITE_MARKER, APPLICATION_MARKER))


def expand_application_path(url: str, application_root: str = URL_SEPARATOR) -> str:
    """Expand the ``~`` notation against the application root.

    Anything else is returned with normalized separators only.

    Examples:
        >>> expand_application_path("~/site1")
        '/site1'
        >>> expand_application_path("~/site1", "/cms")
        '/cms/site1'
        >>> expand_application_path("http://example.com/a")
        'http://example.com/a'

    """
    if not url:
        return ""
    if url.startswith(APPLICATION_MARKER):
        url = combine(application_root or URL_SEPARATOR, url[1:])
    return to_url_separators(url)


def add_virtual_to_url(url: str) -> str:
    """Prefix a bare relative URL with ``@/`` so it resolves against the site root."""
    if not url or is_protocol_url(url):
        return url
    if not is_virtual_url(url):
        return combine(SITE_MARKER + URL_SEPARATOR, url)
    return url


def add_virtual_to_path(path: str) -> str:
    """Prefix a file path with ``@`` unless it already carries a marker."""
    if not path:
        return path
    path = to_url_separators(path)
    if not is_virtual_url(path):
        return SITE_MARKER + path
    return path
