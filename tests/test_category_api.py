"""
Tests for the REST client.
"""

from unittest.mock import PropertyMock

import pytest
import requests

from api.category_api import (
    CategoryAPI,
    CategoryApiError,
    CategoryApiResponseError,
    CategoryApiUnreachableError,
)
from utils.constants import PROBE_TIMEOUT_SECONDS

from conftest import BASE_URL, make_response


class TestConnectivityProbe:
    """Tests for is_reachable()."""

    def test_ok_status_is_reachable(self, api, session) -> None:
        session.get.return_value = make_response(200, [])
        assert api.is_reachable() is True
        session.get.assert_called_once_with(
            f"{BASE_URL}/categories", timeout=PROBE_TIMEOUT_SECONDS, stream=True
        )

    def test_body_is_never_read(self, api, session) -> None:
        """A slow body must not extend the check, so only headers are awaited."""
        response = make_response(200, [])
        content = PropertyMock(return_value=b"[]")
        type(response).content = content
        session.get.return_value = response

        assert api.is_reachable() is True
        assert session.get.call_args.kwargs["stream"] is True
        response.json.assert_not_called()
        response.iter_content.assert_not_called()
        content.assert_not_called()
        response.close.assert_called_once()

    def test_error_status_is_unreachable(self, api, session) -> None:
        response = make_response(503)
        session.get.return_value = response
        assert api.is_reachable() is False
        response.close.assert_called_once()

    def test_connection_error_is_unreachable(self, api, session) -> None:
        session.get.side_effect = requests.ConnectionError("refused")
        assert api.is_reachable() is False

    def test_timeout_is_unreachable(self, api, session) -> None:
        session.get.side_effect = requests.Timeout("timed out")
        assert api.is_reachable() is False
        assert session.get.call_count == 1

    def test_sends_json_accept_header(self, session) -> None:
        CategoryAPI(BASE_URL + "/", session=session)
        assert session.headers["Accept"] == "application/json"


class TestListCategories:
    """Tests for list_categories()."""

    def test_bare_array(self, api, session) -> None:
        session.request.return_value = make_response(200, [
            {"id": 1, "name": "Technology", "created_at": "2024-01-01", "updated_at": "2024-01-01"},
            {"id": "2", "name": "Business"},
        ])
        categories = api.list_categories()
        assert [c.id for c in categories] == [1, 2]
        assert categories[0].created_at == "2024-01-01"
        assert categories[1].updated_at is None
        session.request.assert_called_once()
        assert session.request.call_args[0] == ("GET", f"{BASE_URL}/categories")

    def test_data_envelope(self, api, session) -> None:
        session.request.return_value = make_response(
            200, {"data": [{"id": 7, "name": "Health"}], "current_page": 1}
        )
        categories = api.list_categories()
        assert len(categories) == 1
        assert categories[0].name == "Health"

    def test_non_ok_status_is_unreachable_error(self, api, session) -> None:
        session.request.return_value = make_response(500)
        with pytest.raises(CategoryApiUnreachableError) as exc:
            api.list_categories()
        assert exc.value.status_code == 500
        assert "status: 500" in str(exc.value)

    def test_invalid_json_is_response_error(self, api, session) -> None:
        session.request.return_value = make_response(200, json_error=True)
        with pytest.raises(CategoryApiResponseError):
            api.list_categories()

    def test_wrong_shape_is_response_error(self, api, session) -> None:
        session.request.return_value = make_response(200, {"message": "ok"})
        with pytest.raises(CategoryApiResponseError):
            api.list_categories()

    def test_item_without_name_is_response_error(self, api, session) -> None:
        session.request.return_value = make_response(200, [{"id": 1}])
        with pytest.raises(CategoryApiResponseError):
            api.list_categories()

    def test_connection_error_is_wrapped(self, api, session) -> None:
        session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(CategoryApiUnreachableError):
            api.list_categories()


class TestMutations:
    """Tests for create / update / delete."""

    def test_create_posts_name(self, api, session) -> None:
        session.request.return_value = make_response(201, {"id": 9, "name": "Travel"})
        category = api.create("Travel")
        assert category.id == 9
        args, kwargs = session.request.call_args
        assert args == ("POST", f"{BASE_URL}/categories")
        assert kwargs["json"] == {"name": "Travel"}

    def test_create_unwraps_envelope(self, api, session) -> None:
        session.request.return_value = make_response(201, {"data": {"id": 9, "name": "Travel"}})
        assert api.create("Travel").name == "Travel"

    def test_update_puts_to_item_url(self, api, session) -> None:
        session.request.return_value = make_response(200, {})
        api.update(3, "Science")
        args, kwargs = session.request.call_args
        assert args == ("PUT", f"{BASE_URL}/categories/3")
        assert kwargs["json"] == {"name": "Science"}

    def test_delete_hits_item_url(self, api, session) -> None:
        session.request.return_value = make_response(204)
        api.delete(3)
        assert session.request.call_args[0] == ("DELETE", f"{BASE_URL}/categories/3")

    def test_failed_delete_raises(self, api, session) -> None:
        session.request.return_value = make_response(404)
        with pytest.raises(CategoryApiError):
            api.delete(3)
