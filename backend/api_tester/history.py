from typing import List

import httpx

from .config import DEFAULT_HISTORY_LIMIT
from .errors import HistoryEntryNotFoundError
from .models import HistoryEntry, HttpMethod, RequestDraft


def request_path(url: str) -> str:
    return httpx.URL(url).raw_path.decode("ascii").split("?", 1)[0]


class RequestHistory:
    """Recently dispatched requests, newest first, capped at ``limit`` entries."""

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT):
        self.limit = limit
        self._entries: List[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, method: HttpMethod, url: str) -> HistoryEntry:
        entry = HistoryEntry(
            name=f"{method.value} {request_path(url)}",
            method=method,
            url=url,
        )
        self._entries = [entry, *self._entries][: self.limit]
        return entry

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def get(self, entry_id: str) -> HistoryEntry:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        raise HistoryEntryNotFoundError(entry_id)

    def replay(self, entry_id: str, draft: RequestDraft) -> RequestDraft:
        entry = self.get(entry_id)
        return draft.model_copy(
            update={"method": entry.method, "url": entry.url}, deep=True
        )

    def clear(self) -> None:
        self._entries = []
