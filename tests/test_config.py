import pytest

from api_tester.config import Settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.relay == "http://localhost:5001"
        assert settings.history_limit == 10

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_TESTER_RELAY_URL", "http://127.0.0.1:7000")
        monkeypatch.setenv("API_TESTER_HISTORY_LIMIT", "3")

        settings = Settings()

        assert settings.relay == "http://127.0.0.1:7000"
        assert settings.history_limit == 3

    def test_relay_disabled(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_TESTER_RELAY_ENABLED", "false")

        assert Settings().relay is None
