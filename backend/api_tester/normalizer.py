import json
from dataclasses import dataclass, field
from typing import Any, Dict

from .models import ResponseRecord


@dataclass
class RawResponse:
    status: int
    status_text: str
    headers: Dict[str, str] = field(default_factory=dict)
    text: str = ""


def parse_body(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return text


def normalize_response(raw: RawResponse) -> ResponseRecord:
    return ResponseRecord(
        status=raw.status,
        status_text=raw.status_text,
        headers=dict(raw.headers),
        body=parse_body(raw.text),
    )
