from .builder import OutboundRequest, build_request
from .config import Settings
from .errors import (
    ApiTesterError,
    FormBodyRequiredError,
    FormEntryNotFoundError,
    HistoryEntryNotFoundError,
    InvalidHeadersError,
    InvalidURLError,
    MissingURLError,
    RequestBuildError,
    RequestInFlightError,
    TransportError,
)
from .models import (
    ApiKeyAuth,
    ApiKeyLocation,
    BasicAuth,
    BearerAuth,
    ErrorPayload,
    FormDataBody,
    FormEntry,
    HistoryEntry,
    HttpMethod,
    NoAuth,
    NoBody,
    RawBody,
    RequestDraft,
    ResponseRecord,
    UrlEncodedBody,
)
from .session import RequestSession

__all__ = [
    "ApiKeyAuth",
    "ApiKeyLocation",
    "ApiTesterError",
    "FormBodyRequiredError",
    "FormEntryNotFoundError",
    "BasicAuth",
    "BearerAuth",
    "ErrorPayload",
    "FormDataBody",
    "FormEntry",
    "HistoryEntry",
    "HistoryEntryNotFoundError",
    "HttpMethod",
    "InvalidHeadersError",
    "InvalidURLError",
    "MissingURLError",
    "NoAuth",
    "NoBody",
    "OutboundRequest",
    "RawBody",
    "RequestBuildError",
    "RequestDraft",
    "RequestInFlightError",
    "RequestSession",
    "ResponseRecord",
    "Settings",
    "TransportError",
    "UrlEncodedBody",
    "build_request",
]
