"""Set-Cookie parsing for the login exchange.

Only the cookie's name and value are kept; Path, Domain, Expires and the
other attributes are discarded.
"""

from __future__ import annotations

from typing import Iterable, Optional
from urllib.parse import quote, unquote

SESSION_COOKIE = "connect.sid"

# Characters a cookie-octet may carry unescaped (RFC 6265 section 4.1.1).
_COOKIE_SAFE = "!#$&'()*+-./:<=>?@[]^_`{|}~"


def parse_set_cookie(header: str) -> Optional[tuple[str, str]]:
    """Parse one Set-Cookie value into (name, decoded value).

    Returns None when the leading name=value pair is missing or has an
    empty name.
    """
    pair = header.split(";", 1)[0]
    name, sep, value = pair.partition("=")
    name = name.strip()
    if not sep or not name:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    return name, unquote(value)


def find_cookie(headers: Iterable[str], name: str = SESSION_COOKIE) -> Optional[str]:
    """Value of the first parseable cookie called ``name`` across repeated headers."""
    for header in headers:
        parsed = parse_set_cookie(header)
        if parsed is not None and parsed[0] == name:
            return parsed[1]
    return None


def serialize_cookie(name: str, value: str) -> str:
    """Render a name=value pair for a Cookie request header."""
    return f"{name}={quote(value, safe=_COOKIE_SAFE)}"
