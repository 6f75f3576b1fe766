import pytest
from pydantic import ValidationError

from api_tester.errors import HistoryEntryNotFoundError
from api_tester.history import RequestHistory
from api_tester.models import BearerAuth, HttpMethod, RequestDraft


class TestRequestHistory:
    def test_record_derives_name_from_path(self) -> None:
        history = RequestHistory()

        entry = history.record(HttpMethod.POST, "https://api.example.com/v1/users?page=2")

        assert entry.name == "POST /v1/users"
        assert entry.method == HttpMethod.POST
        assert entry.url == "https://api.example.com/v1/users?page=2"
        assert entry.id

    def test_name_keeps_percent_encoding(self) -> None:
        entry = RequestHistory().record(HttpMethod.GET, "https://api.example.com/a%20b?q=1")

        assert entry.name == "GET /a%20b"

    def test_bare_host_name_uses_root_path(self) -> None:
        entry = RequestHistory().record(HttpMethod.GET, "https://api.example.com")

        assert entry.name == "GET /"

    def test_newest_first(self) -> None:
        history = RequestHistory()
        first = history.record(HttpMethod.GET, "https://a.example.com/1")
        second = history.record(HttpMethod.GET, "https://a.example.com/2")

        assert history.entries() == [second, first]

    def test_capped_at_limit_dropping_oldest(self) -> None:
        history = RequestHistory(limit=10)
        prior = [
            history.record(HttpMethod.GET, f"https://a.example.com/{i}") for i in range(10)
        ]
        assert len(history) == 10

        newest = history.record(HttpMethod.DELETE, "https://a.example.com/new")

        entries = history.entries()
        assert len(entries) == 10
        assert entries[0] == newest
        assert prior[0] not in entries
        assert entries[1:] == list(reversed(prior[1:]))

    def test_entries_are_immutable(self) -> None:
        entry = RequestHistory().record(HttpMethod.GET, "https://a.example.com/")

        with pytest.raises(ValidationError):
            entry.url = "https://b.example.com/"

    def test_entries_returns_a_copy(self) -> None:
        history = RequestHistory()
        history.record(HttpMethod.GET, "https://a.example.com/")

        history.entries().clear()

        assert len(history) == 1

    def test_replay_copies_method_and_url_only(self) -> None:
        history = RequestHistory()
        entry = history.record(HttpMethod.PUT, "https://a.example.com/items/1")
        draft = RequestDraft(
            method="GET",
            url="https://other.example.com/",
            headers={"Accept": "*/*"},
            auth=BearerAuth(token="t"),
        )

        replayed = history.replay(entry.id, draft)

        assert replayed.method == HttpMethod.PUT
        assert replayed.url == "https://a.example.com/items/1"
        assert replayed.headers == {"Accept": "*/*"}
        assert replayed.auth == BearerAuth(token="t")
        assert draft.url == "https://other.example.com/"

    def test_replay_unknown_id(self) -> None:
        with pytest.raises(HistoryEntryNotFoundError):
            RequestHistory().replay("missing", RequestDraft())

    def test_clear(self) -> None:
        history = RequestHistory()
        history.record(HttpMethod.GET, "https://a.example.com/")

        history.clear()

        assert history.entries() == []
