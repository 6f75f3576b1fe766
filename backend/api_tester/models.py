import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _new_id() -> str:
    return uuid.uuid4().hex


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ApiKeyLocation(str, Enum):
    HEADER = "header"
    QUERY = "query"


# Auth configuration

class NoAuth(BaseModel):
    type: Literal["none"] = "none"


class BearerAuth(BaseModel):
    type: Literal["bearer"] = "bearer"
    token: str = ""


class BasicAuth(BaseModel):
    type: Literal["basic"] = "basic"
    username: str = ""
    password: str = ""


class ApiKeyAuth(BaseModel):
    type: Literal["apikey"] = "apikey"
    key: str = ""
    value: str = ""
    location: ApiKeyLocation = ApiKeyLocation.HEADER


AuthConfig = Annotated[
    Union[NoAuth, BearerAuth, BasicAuth, ApiKeyAuth],
    Field(discriminator="type"),
]


# Body configuration

class FormEntry(BaseModel):
    id: str = Field(default_factory=_new_id)
    key: str = ""
    value: str = ""


class NoBody(BaseModel):
    type: Literal["none"] = "none"


class RawBody(BaseModel):
    type: Literal["raw"] = "raw"
    text: str = ""


class _FormBody(BaseModel):
    entries: List[FormEntry] = Field(default_factory=list)

    @field_validator("entries")
    @classmethod
    def _unique_ids(cls, entries: List[FormEntry]) -> List[FormEntry]:
        seen = set()
        for entry in entries:
            if entry.id in seen:
                raise ValueError(f"duplicate form entry id {entry.id!r}")
            seen.add(entry.id)
        return entries


class FormDataBody(_FormBody):
    type: Literal["form-data"] = "form-data"


class UrlEncodedBody(_FormBody):
    type: Literal["x-www-form-urlencoded"] = "x-www-form-urlencoded"


class EntryUpdate(BaseModel):
    key: Optional[str] = None
    value: Optional[str] = None


BodyConfig = Annotated[
    Union[NoBody, RawBody, FormDataBody, UrlEncodedBody],
    Field(discriminator="type"),
]


class RequestDraft(BaseModel):
    method: HttpMethod = HttpMethod.GET
    url: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    headers_text: Optional[str] = None
    body: BodyConfig = Field(default_factory=NoBody)
    auth: AuthConfig = Field(default_factory=NoAuth)

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class DraftView(RequestDraft):
    effective_headers: Dict[str, str] = Field(default_factory=dict)


class HistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    name: str
    method: HttpMethod
    url: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ResponseRecord(BaseModel):
    status: int
    status_text: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Any = None


class ErrorPayload(BaseModel):
    error: str
