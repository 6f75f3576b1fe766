from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import urlencode

from .models import (
    BodyConfig,
    FormDataBody,
    FormEntry,
    HttpMethod,
    NoBody,
    RawBody,
    UrlEncodedBody,
)

CONTENT_TYPE = "Content-Type"
JSON_CONTENT_TYPE = "application/json"
FORM_URLENCODED_CONTENT_TYPE = "application/x-www-form-urlencoded"

BODYLESS_METHODS = frozenset({HttpMethod.GET, HttpMethod.HEAD})


@dataclass
class EncodedBody:
    kind: str
    content: Optional[str] = None
    fields: List[Tuple[str, str]] = field(default_factory=list)

    def to_httpx_kwargs(self) -> Dict[str, Any]:
        if self.kind == "form-data":
            # A (None, value) file tuple is rendered as a plain multipart field.
            return {"files": [(key, (None, value)) for key, value in self.fields]}
        return {"content": (self.content or "").encode("utf-8")}


def content_type_for(body: BodyConfig) -> Optional[str]:
    """Content-Type implied by a body configuration; None means the transport picks it."""
    if isinstance(body, FormDataBody):
        return None
    if isinstance(body, UrlEncodedBody):
        return FORM_URLENCODED_CONTENT_TYPE
    return JSON_CONTENT_TYPE


def apply_content_type(headers: Dict[str, str], body: BodyConfig) -> Dict[str, str]:
    derived = {k: v for k, v in headers.items() if k.lower() != CONTENT_TYPE.lower()}
    content_type = content_type_for(body)
    if content_type is not None:
        derived[CONTENT_TYPE] = content_type
    return derived


def filled_entries(entries: Iterable[FormEntry]) -> List[Tuple[str, str]]:
    return [(entry.key, entry.value) for entry in entries if entry.key and entry.value]


def encode_body(
    method: HttpMethod, body: BodyConfig, headers: Dict[str, str]
) -> Tuple[Dict[str, str], Optional[EncodedBody]]:
    headers = apply_content_type(headers, body)

    if method in BODYLESS_METHODS or isinstance(body, NoBody):
        return headers, None

    if isinstance(body, RawBody):
        if not body.text:
            return headers, None
        return headers, EncodedBody(kind=body.type, content=body.text)

    pairs = filled_entries(body.entries)
    if isinstance(body, UrlEncodedBody):
        return headers, EncodedBody(kind=body.type, content=urlencode(pairs))
    return headers, EncodedBody(kind=body.type, fields=pairs)
