import pytest
import httpx
from fastapi.testclient import TestClient

from price_api.main import app
from price_api.routes.price import get_price_source
from price_api.services.price.sources import CoinGeckoPriceSource, MockPriceSource


def coingecko_source(handler):
    """Live source whose outbound calls are answered by ``handler``."""
    return CoinGeckoPriceSource(transport=httpx.MockTransport(handler))


def make_client(source):
    app.dependency_overrides[get_price_source] = lambda: source
    return TestClient(app)


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def mock_client():
    return make_client(MockPriceSource())


@pytest.fixture
def live_client_factory():
    """Build a client in live mode; pass a handler taking an httpx.Request."""
    def factory(handler):
        return make_client(coingecko_source(handler))
    return factory
