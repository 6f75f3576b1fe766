import json
from dataclasses import dataclass
from logging import getLogger
from typing import Dict, Optional

from .auth import resolve_auth
from .body import EncodedBody, apply_content_type, encode_body
from .errors import InvalidHeadersError, MissingURLError
from .models import HttpMethod, RequestDraft
from .routing import parse_absolute_url, select_route

logger = getLogger(__name__)


@dataclass
class OutboundRequest:
    method: HttpMethod
    url: str
    headers: Dict[str, str]
    target_url: str
    body: Optional[EncodedBody] = None
    proxied: bool = False


def parse_headers_text(text: str) -> Dict[str, str]:
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise InvalidHeadersError() from exc
    if not isinstance(data, dict):
        raise InvalidHeadersError()

    headers = {}
    for key, value in data.items():
        if isinstance(value, str):
            headers[key] = value
        elif isinstance(value, (int, float, bool)):
            headers[key] = json.dumps(value)
        else:
            raise InvalidHeadersError()
    return headers


def draft_headers(draft: RequestDraft) -> Dict[str, str]:
    if draft.headers_text is not None:
        return parse_headers_text(draft.headers_text)
    return dict(draft.headers)


def effective_headers(draft: RequestDraft) -> Dict[str, str]:
    """Headers as the editor should show them, with Content-Type derived from the body."""
    try:
        headers = draft_headers(draft)
    except InvalidHeadersError:
        headers = dict(draft.headers)
    return apply_content_type(headers, draft.body)


def build_request(draft: RequestDraft, relay: Optional[str] = None) -> OutboundRequest:
    if not draft.url:
        raise MissingURLError()
    parse_absolute_url(draft.url)
    headers = draft_headers(draft)

    headers, url = resolve_auth(draft.auth, headers, draft.url)
    headers, body = encode_body(draft.method, draft.body, headers)
    route = select_route(url, headers, relay)

    logger.debug("Built %s %s (target %s)", draft.method.value, route.url, url)
    return OutboundRequest(
        method=draft.method,
        url=route.url,
        headers=route.headers,
        target_url=url,
        body=body,
        proxied=route.proxied,
    )
