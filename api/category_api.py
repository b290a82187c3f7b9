import logging

import requests

from models.category import Category
from utils.constants import PROBE_TIMEOUT_SECONDS, REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class CategoryApiError(Exception):
    """Base error for any failed call to the category API."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CategoryApiUnreachableError(CategoryApiError):
    """Network failure, timeout, or a non-OK HTTP status."""


class CategoryApiResponseError(CategoryApiError):
    """The server answered OK but the body is not what we expect."""


class CategoryAPI:
    """Thin client for the REST endpoints under {base_url}/categories."""

    def __init__(self, base_url: str, session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers["Accept"] = "application/json"

    @property
    def collection_url(self) -> str:
        return f"{self.base_url}/categories"

    def item_url(self, category_id: int) -> str:
        return f"{self.collection_url}/{category_id}"

    def close(self):
        self._session.close()

    # ── Connectivity ─────────────────────────────────────────────────────────
    def is_reachable(self) -> bool:
        """Single GET against the list endpoint, bounded by PROBE_TIMEOUT_SECONDS.

        Only the status line and headers are waited for; the body is never
        downloaded, so a slow body cannot stretch the check past the timeout.
        """
        try:
            response = self._session.get(
                self.collection_url, timeout=PROBE_TIMEOUT_SECONDS, stream=True
            )
        except requests.RequestException as e:
            logger.info("API connection failed: %s", e)
            return False
        try:
            reachable = 200 <= response.status_code < 300
        finally:
            response.close()
        if not reachable:
            logger.info("API probe returned status %s", response.status_code)
        return reachable

    # ── CRUD ─────────────────────────────────────────────────────────────────
    def list_categories(self) -> list[Category]:
        data = self._json(self._request("GET", self.collection_url))
        # Paginated responses wrap the list in {"data": [...]}
        if isinstance(data, dict) and "data" in data:
            data = data["data"]
        if not isinstance(data, list):
            raise CategoryApiResponseError(f"Expected a list of categories, got {type(data).__name__}")
        try:
            return [Category.from_dict(item) for item in data]
        except (ValueError, TypeError) as e:
            raise CategoryApiResponseError(str(e)) from e

    def create(self, name: str) -> Category:
        data = self._json(self._request("POST", self.collection_url, json={"name": name}))
        try:
            return Category.from_dict(data)
        except (ValueError, TypeError) as e:
            raise CategoryApiResponseError(str(e)) from e

    def update(self, category_id: int, name: str):
        self._request("PUT", self.item_url(category_id), json={"name": name})

    def delete(self, category_id: int):
        self._request("DELETE", self.item_url(category_id))

    # ── Internals ────────────────────────────────────────────────────────────
    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            response = self._session.request(method, url, timeout=REQUEST_TIMEOUT_SECONDS, **kwargs)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise CategoryApiUnreachableError(str(e)) from e
        if not response.ok:
            logger.error("%s %s returned status %s", method, url, response.status_code)
            raise CategoryApiUnreachableError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _json(response: requests.Response):
        try:
            return response.json()
        except ValueError as e:
            raise CategoryApiResponseError(f"Invalid JSON in response: {e}") from e
