import logging
from dataclasses import dataclass, field
from typing import Callable

from api.category_api import CategoryAPI, CategoryApiError
from models.category import Category
from utils.constants import MOCK_CATEGORIES
from utils.date_helpers import now_iso
from utils.text_helpers import matches, parse_bulk_names

logger = logging.getLogger(__name__)


@dataclass
class Notice:
    title: str
    detail: str
    severity: str = "info"   # 'info' | 'success' | 'warning' | 'error'


@dataclass
class BulkResult:
    total: int
    completed: int = 0
    failed: list[str] = field(default_factory=list)
    notice: Notice | None = None

    @property
    def all_succeeded(self) -> bool:
        return not self.failed


class CategoryService:
    """Holds the session's category list and routes each action to the API
    (live mode) or to the in-memory list (demo mode)."""

    def __init__(self, api: CategoryAPI):
        self._api = api
        self._categories: list[Category] = []
        self.demo_mode = False
        self.api_error: str | None = None
        self._next_id = 1

    @property
    def base_url(self) -> str:
        return self._api.base_url

    def get_all(self) -> list[Category]:
        return list(self._categories)

    def get_by_id(self, category_id: int) -> Category | None:
        return next((c for c in self._categories if c.id == category_id), None)

    def search(self, term: str) -> list[Category]:
        return [c for c in self._categories if matches(c.name, term)]

    # ── Loading / mode selection ─────────────────────────────────────────────
    def load(self) -> Notice | None:
        """Probe the API and fetch the list, falling back to sample data.

        Returns a notice when the app ends up in demo mode, None otherwise.
        """
        self.api_error = None
        if not self._api.is_reachable():
            self._enter_demo_mode(
                "Cannot connect to the category API. Running in demo mode with sample data."
            )
            return Notice(
                "Demo Mode",
                "Using sample data. Configure your API URL to connect to real data.",
            )
        try:
            self._categories = self._api.list_categories()
        except CategoryApiError as e:
            logger.error("Error fetching categories: %s", e)
            self._enter_demo_mode(f"API Error: {e}. Running in demo mode.")
            return Notice(
                "Connection Error",
                "Switched to demo mode. Check your API configuration.",
                "error",
            )
        self.demo_mode = False
        return None

    def _enter_demo_mode(self, reason: str):
        logger.warning("Switching to demo mode: %s", reason)
        self.demo_mode = True
        self.api_error = reason
        self._categories = [Category.from_dict(dict(c)) for c in MOCK_CATEGORIES]
        self._next_id = max(c.id for c in self._categories) + 1

    def _take_next_id(self) -> int:
        category_id = self._next_id
        self._next_id += 1
        return category_id

    # ── CRUD ─────────────────────────────────────────────────────────────────
    def create(self, name: str) -> Notice:
        name = self._validate_name(name)
        if self.demo_mode:
            stamp = now_iso()
            self._categories.append(Category(self._take_next_id(), name, stamp, stamp))
            return Notice("Success (Demo)", "Category created in demo mode.", "success")

        self._categories.append(self._api.create(name))
        return Notice("Success", "Category created successfully.", "success")

    def rename(self, category_id: int, name: str) -> Notice:
        name = self._validate_name(name)
        cat = self.get_by_id(category_id)
        if cat is None:
            raise ValueError(f"Category {category_id} no longer exists.")
        if self.demo_mode:
            cat.name = name
            cat.updated_at = now_iso()
            return Notice("Success (Demo)", "Category updated in demo mode.", "success")

        self._api.update(category_id, name)
        cat.name = name
        return Notice("Success", "Category updated successfully.", "success")

    def delete(self, category_id: int, confirm: Callable[[Category], bool]) -> Notice | None:
        """Remove a category once confirm(category) returns True.

        Returns None when the user declines; nothing is changed in that case.
        """
        cat = self.get_by_id(category_id)
        if cat is None:
            raise ValueError(f"Category {category_id} no longer exists.")
        if not confirm(cat):
            return None
        if self.demo_mode:
            self._categories.remove(cat)
            return Notice("Success (Demo)", "Category deleted in demo mode.", "success")

        self._api.delete(category_id)
        self._categories.remove(cat)
        return Notice("Success", "Category deleted successfully.", "success")

    def bulk_create(
        self,
        text: str,
        on_progress: Callable[[int, int, list[str]], None] | None = None,
    ) -> BulkResult:
        names = parse_bulk_names(text)
        if not names:
            raise ValueError("Please enter at least one category name.")
        result = BulkResult(total=len(names))

        if self.demo_mode:
            stamp = now_iso()
            for name in names:
                self._categories.append(Category(self._take_next_id(), name, stamp, stamp))
            result.completed = len(names)
            result.notice = Notice(
                "Success (Demo)", f"{result.completed} categories created in demo mode.", "success"
            )
            if on_progress:
                on_progress(result.completed, result.total, result.failed)
            return result

        # One request at a time; earlier successes stay if a later one fails
        for name in names:
            try:
                self._categories.append(self._api.create(name))
                result.completed += 1
            except CategoryApiError as e:
                logger.error('Error creating category "%s": %s', name, e)
                result.failed.append(name)
            if on_progress:
                on_progress(result.completed, result.total, list(result.failed))

        if result.all_succeeded:
            result.notice = Notice(
                "Success", f"All {result.completed} categories created successfully.", "success"
            )
        else:
            result.notice = Notice(
                "Partial Success",
                f"{result.completed} categories created, {len(result.failed)} failed.",
                "error",
            )
        return result

    @staticmethod
    def _validate_name(name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValueError("Category name is required.")
        return name
