import re
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from .errors import InvalidURLError

TARGET_URL_HEADER = "X-Target-Url"

_LOCAL_HOSTNAMES = frozenset({"localhost", "127.0.0.1"})
_PRIVATE_HOST_PATTERN = re.compile(r"^(?:192\.168\.|10\.)")


@dataclass
class Route:
    url: str
    headers: Dict[str, str]
    proxied: bool = False


def parse_absolute_url(url: str) -> httpx.URL:
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidURLError() from exc
    if not parsed.scheme or not parsed.host:
        raise InvalidURLError()
    return parsed


def is_local_host(hostname: str) -> bool:
    hostname = hostname.lower()
    return hostname in _LOCAL_HOSTNAMES or bool(_PRIVATE_HOST_PATTERN.match(hostname))


def select_route(url: str, headers: Dict[str, str], relay: Optional[str]) -> Route:
    """Send loopback and private-range targets through the local relay.

    The relay receives the original path and query and reads the real
    destination from the X-Target-Url header. Passing ``relay=None`` turns
    relaying off.
    """
    parsed = parse_absolute_url(url)
    if relay is None or not is_local_host(parsed.host):
        return Route(url=url, headers=dict(headers))

    relayed_headers = dict(headers)
    relayed_headers[TARGET_URL_HEADER] = url
    path = parsed.raw_path.decode("ascii")
    return Route(url=f"{relay.rstrip('/')}{path}", headers=relayed_headers, proxied=True)
