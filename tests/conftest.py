import pytest
from unittest.mock import Mock, AsyncMock
from fastapi.testclient import TestClient
from slappd.config import Settings
from slappd.main import create_app
from slappd.untappd.models import BeerInfo, SearchResponse
from factories import make_item


@pytest.fixture
def settings():
    """Settings for testing."""
    return Settings(
        slack_token="tok-a,tok-b",
        slack_signing_secret=None,
        untappd_client_id="test-client-id",
        untappd_client_secret="test-client-secret",
        untappd_base_url="https://untappd.test/v4",
        max_results=5
    )


@pytest.fixture
def beer_info():
    return BeerInfo.model_validate({
        "bid": 123,
        "beer_name": "Hopslam",
        "beer_label": "https://labels.example.com/123.jpeg",
        "beer_style": "IPA - Imperial / Double",
        "beer_abv": 10,
        "beer_ibu": 70,
        "beer_description": "A double IPA brewed with honey.",
        "rating_score": 4.1234,
        "brewery": {"brewery_id": 2, "brewery_name": "Bell's Brewery"}
    })


@pytest.fixture
def mock_untappd(beer_info):
    untappd = Mock()
    untappd.search = AsyncMock(return_value=SearchResponse(items=[make_item(i) for i in range(1, 4)]))
    untappd.info = AsyncMock(return_value=beer_info)
    return untappd


@pytest.fixture
def client(settings, mock_untappd):
    return TestClient(create_app(settings, untappd=mock_untappd))
