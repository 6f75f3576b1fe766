import pytest

from api_tester.config import Settings
from api_tester.session import RequestSession

from .fakes import FakeTransport


@pytest.fixture
def settings() -> Settings:
    return Settings(relay_url="http://localhost:5001", history_limit=10)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def session(settings: Settings, transport: FakeTransport) -> RequestSession:
    return RequestSession(settings=settings, transport=transport)
