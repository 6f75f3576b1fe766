"""The single editing session: draft, last response, transient history."""

from logging import getLogger
from typing import List, Optional, Union

from .builder import build_request, effective_headers
from .config import Settings
from .errors import (
    FormBodyRequiredError,
    FormEntryNotFoundError,
    RequestBuildError,
    RequestInFlightError,
    TransportError,
)
from .history import RequestHistory
from .models import (
    DraftView,
    ErrorPayload,
    FormDataBody,
    FormEntry,
    RequestDraft,
    ResponseRecord,
    UrlEncodedBody,
)
from .normalizer import normalize_response
from .transport import HttpxTransport, Transport

logger = getLogger(__name__)

SendResult = Union[ResponseRecord, ErrorPayload]


class RequestSession:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[Transport] = None,
        draft: Optional[RequestDraft] = None,
    ):
        self.settings = settings or Settings()
        self.transport = transport or HttpxTransport(
            timeout=self.settings.request_timeout,
            follow_redirects=self.settings.follow_redirects,
        )
        self.draft = draft or RequestDraft()
        self.history = RequestHistory(limit=self.settings.history_limit)
        self.response: Optional[SendResult] = None
        self.sending = False

    def view(self) -> DraftView:
        return DraftView(
            **self.draft.model_dump(),
            effective_headers=effective_headers(self.draft),
        )

    def replay(self, entry_id: str) -> RequestDraft:
        self.draft = self.history.replay(entry_id, self.draft)
        return self.draft

    def _form_entries(self) -> List[FormEntry]:
        body = self.draft.body
        if not isinstance(body, (FormDataBody, UrlEncodedBody)):
            raise FormBodyRequiredError()
        return body.entries

    def add_entry(self, key: str = "", value: str = "") -> FormEntry:
        entry = FormEntry(key=key, value=value)
        self.draft.body.entries = [*self._form_entries(), entry]
        return entry

    def update_entry(
        self, entry_id: str, key: Optional[str] = None, value: Optional[str] = None
    ) -> FormEntry:
        """Change one entry in place; ``None`` leaves a field as it is."""
        entries = self._form_entries()
        for index, entry in enumerate(entries):
            if entry.id == entry_id:
                changes = {"key": key, "value": value}
                updated = entry.model_copy(
                    update={k: v for k, v in changes.items() if v is not None}
                )
                self.draft.body.entries = [
                    *entries[:index], updated, *entries[index + 1 :]
                ]
                return updated
        raise FormEntryNotFoundError(entry_id)

    def remove_entry(self, entry_id: str) -> None:
        entries = self._form_entries()
        remaining = [entry for entry in entries if entry.id != entry_id]
        if len(remaining) == len(entries):
            raise FormEntryNotFoundError(entry_id)
        self.draft.body.entries = remaining

    async def send(self) -> SendResult:
        """Build and dispatch the current draft.

        Validation and transport failures end up as an ErrorPayload in
        ``self.response``; only a concurrent send raises.
        """
        if self.sending:
            raise RequestInFlightError()

        self.sending = True
        self.response = None
        try:
            self.response = await self._dispatch(self.draft)
        finally:
            self.sending = False
        return self.response

    async def _dispatch(self, draft: RequestDraft) -> SendResult:
        try:
            outbound = build_request(draft, relay=self.settings.relay)
        except RequestBuildError as exc:
            logger.warning("Not sending %s %r: %s", draft.method.value, draft.url, exc.message)
            return ErrorPayload(error=exc.message)

        self.history.record(draft.method, draft.url)
        logger.info(
            "Sending %s %s%s",
            outbound.method.value,
            outbound.url,
            f" (relay for {outbound.target_url})" if outbound.proxied else "",
        )
        logger.debug("Request headers: %s", outbound.headers)

        try:
            raw = await self.transport.send(outbound)
        except TransportError as exc:
            return ErrorPayload(error=exc.message)
        return normalize_response(raw)
