"""
Pytest configuration and fixtures for category-manager tests.
"""

from unittest.mock import MagicMock

import pytest
import requests

from api.category_api import CategoryAPI
from models.category import Category
from services.category_service import CategoryService

BASE_URL = "http://api.test/api"


def make_response(status_code: int = 200, payload=None, json_error: bool = False) -> MagicMock:
    """Build a stand-in for requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if json_error:
        response.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session() -> MagicMock:
    """A mocked requests.Session."""
    mock = MagicMock(spec=requests.Session)
    mock.headers = {}
    return mock


@pytest.fixture
def api(session: MagicMock) -> CategoryAPI:
    return CategoryAPI(BASE_URL, session=session)


@pytest.fixture
def mock_api() -> MagicMock:
    """A mocked CategoryAPI for service-level tests."""
    mock = MagicMock(spec=CategoryAPI)
    mock.base_url = BASE_URL
    return mock


@pytest.fixture
def service(mock_api: MagicMock) -> CategoryService:
    return CategoryService(mock_api)


@pytest.fixture
def live_service(mock_api: MagicMock) -> CategoryService:
    """Service loaded in live mode with two server categories."""
    mock_api.is_reachable.return_value = True
    mock_api.list_categories.return_value = [
        Category(10, "Technology", "2024-05-01T00:00:00Z", "2024-05-01T00:00:00Z"),
        Category(11, "Business"),
    ]
    svc = CategoryService(mock_api)
    assert svc.load() is None
    mock_api.reset_mock()
    return svc


@pytest.fixture
def demo_service(mock_api: MagicMock) -> CategoryService:
    """Service that fell back to the sample dataset."""
    mock_api.is_reachable.return_value = False
    svc = CategoryService(mock_api)
    svc.load()
    mock_api.reset_mock()
    return svc
