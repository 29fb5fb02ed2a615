"""
PhishGuard – URL Parser & Normalizer
Splits a raw URL into the components the threat checks work on.
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qsl, quote, unquote, urlsplit

import idna

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

# Characters a hostname can never contain once the authority is split off.
FORBIDDEN_HOST_CHARS = set("<>^|%\\\"`{}")
# Delimiters that may only show up in a host through percent-decoding.
HOST_DELIMITERS = set(":/?#@[]")

# Characters left as-is when building the normalized href; everything else
# (spaces, quotes, non-ASCII) is percent-encoded the way browsers do.
USERINFO_SAFE = "!$%&'()*+,-._~"
PATH_SAFE = "!$%&'()*+,-./:;=@[\\]^_|~"
QUERY_SAFE = "!$%&()*+,-./:;=?@[\\]^_`{|}~"
FRAGMENT_SAFE = "!#$%&'()*+,-./:;=?@[\\]^_{|}~"


class MalformedURLError(ValueError):
    """Raised when a string cannot be parsed as an absolute URL with a host."""


@dataclass(frozen=True)
class ParsedURL:
    scheme: str
    host: str
    path: str
    query: tuple[tuple[str, str], ...]
    href: str
    port: Optional[int] = None

    @property
    def length(self) -> int:
        return len(self.href)

    @property
    def param_names(self) -> frozenset[str]:
        return frozenset(name for name, _ in self.query)


def _decode_host(hostname: str) -> str:
    if "%" not in hostname:
        return hostname.lower()
    try:
        decoded = unquote(hostname, errors="strict")
    except UnicodeDecodeError as e:
        raise MalformedURLError(f"invalid host encoding {hostname!r}") from e
    if any(c in HOST_DELIMITERS for c in decoded):
        raise MalformedURLError(f"invalid host {decoded!r}")
    return decoded.lower()


def _ascii_host(host: str) -> str:
    """Punycode form of the host for the href; IPv6 literals keep their brackets."""
    if ":" in host:
        return f"[{host}]"
    if host.isascii():
        return host
    try:
        return idna.encode(host, uts46=True).decode("ascii")
    except idna.IDNAError as e:
        raise MalformedURLError(f"invalid international host {host!r}: {e}") from e


def parse_url(raw: str) -> ParsedURL:
    """
    Parse and normalize an absolute URL.
    Raises MalformedURLError for blank input, a missing scheme or host,
    an invalid port, or a host with forbidden characters.

    `host` stays in Unicode so script checks can see it; `href` carries the
    punycode host and a percent-encoded path, query and fragment.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise MalformedURLError("empty URL")

    try:
        parts = urlsplit(raw.strip())
        port = parts.port
    except ValueError as e:
        raise MalformedURLError(str(e)) from e

    if not parts.scheme:
        raise MalformedURLError(f"no scheme in {raw!r}")
    if not parts.netloc:
        raise MalformedURLError(f"no authority in {raw!r}")

    host = _decode_host(parts.hostname or "")
    if not host:
        raise MalformedURLError(f"no host in {raw!r}")
    if any(c.isspace() or c in FORBIDDEN_HOST_CHARS for c in host):
        raise MalformedURLError(f"invalid host {host!r}")

    userinfo = ""
    if parts.username is not None:
        userinfo = quote(parts.username, safe=USERINFO_SAFE)
        if parts.password is not None:
            userinfo += ":" + quote(parts.password, safe=USERINFO_SAFE)
        userinfo += "@"

    if port is not None and DEFAULT_PORTS.get(parts.scheme) == port:
        port = None

    path = parts.path or "/"
    href = f"{parts.scheme}://{userinfo}{_ascii_host(host)}"
    if port is not None:
        href += f":{port}"
    href += quote(path, safe=PATH_SAFE)
    if parts.query:
        href += "?" + quote(parts.query, safe=QUERY_SAFE)
    if parts.fragment:
        href += "#" + quote(parts.fragment, safe=FRAGMENT_SAFE)

    return ParsedURL(
        scheme=parts.scheme,
        host=host,
        path=path,
        query=tuple(parse_qsl(parts.query, keep_blank_values=True)),
        href=href,
        port=port,
    )
