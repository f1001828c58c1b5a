import pytest
from pathlib import Path
from unittest.mock import MagicMock

from nimbus_wx.models.station_directory import StationDirectory


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def stations_csv(test_assets_dir) -> Path:
    """Sample station table in airport-codes layout."""
    return test_assets_dir / 'stations.csv'


@pytest.fixture
def directory(stations_csv) -> StationDirectory:
    """Directory loaded from the sample station table."""
    return StationDirectory.from_file(stations_csv)


class MockResponse:
    """Minimal mock for requests.Response."""

    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            from requests.exceptions import HTTPError
            raise HTTPError(f"HTTP {self.status_code}")


@pytest.fixture
def make_session():
    """Factory for a mock requests session returning a fixed response."""
    def _make(response_text="", status_code=200):
        session = MagicMock()
        session.headers = {}
        session.get.return_value = MockResponse(response_text, status_code)
        return session
    return _make
