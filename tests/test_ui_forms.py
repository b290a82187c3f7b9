"""
Behaviour tests for the category widgets.

Widgets are built with __new__ and their child widgets replaced by mocks, so
no display is needed; only the event handlers are exercised.
"""

from unittest.mock import MagicMock, call, patch

import pytest

pytest.importorskip("customtkinter")

from ui.components.bulk_category_form import BulkCategoryForm  # noqa: E402
from ui.components.category_form import CategoryForm  # noqa: E402
from ui.tabs.categories_tab import CategoriesTab  # noqa: E402


def make_bulk_form(service, text: str) -> BulkCategoryForm:
    form = BulkCategoryForm.__new__(BulkCategoryForm)
    form._svc = service
    form._on_notice = MagicMock()
    form._processing = False
    form._done = False
    form.saved = False
    form._textbox = MagicMock()
    form._textbox.get.return_value = text
    for name in ("_count_label", "_create_btn", "_cancel_btn", "_progress_frame",
                 "_progress_label", "_progress_bar", "_failed_var"):
        setattr(form, name, MagicMock())
    form.after = MagicMock()
    form.update_idletasks = MagicMock()
    return form


class TestBulkCategoryForm:
    """Tests for BulkCategoryForm."""

    def test_typing_enables_create(self, demo_service) -> None:
        form = make_bulk_form(demo_service, "A\nB")
        form._update_count()
        form._count_label.configure.assert_called_with(text="2 categories to add")
        form._create_btn.configure.assert_called_with(state="normal")

    def test_successful_run_cannot_be_resubmitted(self, demo_service) -> None:
        form = make_bulk_form(demo_service, "Music\nSports")
        form._on_create()

        assert form.saved is True
        assert [c.name for c in demo_service.get_all()][-2:] == ["Music", "Sports"]
        form._textbox.configure.assert_called_with(state="disabled")
        form.after.assert_called_once()

        # A keystroke during the auto-close delay must not re-enable Create
        form._create_btn.configure.reset_mock()
        form._update_count()
        form._create_btn.configure.assert_not_called()

    def test_partial_failure_allows_retry(self, live_service, mock_api) -> None:
        from api.category_api import CategoryApiUnreachableError
        from models.category import Category

        mock_api.create.side_effect = [Category(50, "Good"), CategoryApiUnreachableError("refused")]
        form = make_bulk_form(live_service, "Good\nBad")
        form._on_create()

        assert form._done is False
        form.after.assert_not_called()
        form._failed_var.set.assert_called_with("Failed: Bad")
        assert form._create_btn.configure.call_args == call(state="normal")


class TestCategoryForm:
    """Tests for CategoryForm."""

    def _make_form(self, service, typed: str, category=None) -> CategoryForm:
        form = CategoryForm.__new__(CategoryForm)
        form._svc = service
        form._on_notice = MagicMock()
        form._category = category
        form.saved = False
        form._name_entry = MagicMock()
        form._name_entry.get.return_value = typed
        form._error_var = MagicMock()
        form.destroy = MagicMock()
        return form

    def test_save_reads_entry_text(self, demo_service) -> None:
        form = self._make_form(demo_service, "  Travel ")
        form._on_save()
        assert demo_service.get_all()[-1].name == "Travel"
        assert form.saved is True
        form.destroy.assert_called_once()

    def test_rename_reads_entry_text(self, demo_service) -> None:
        form = self._make_form(demo_service, "Tech", category=demo_service.get_by_id(1))
        form._on_save()
        assert demo_service.get_by_id(1).name == "Tech"

    def test_blank_entry_shows_inline_error(self, demo_service) -> None:
        form = self._make_form(demo_service, "   ")
        form._on_save()
        form._error_var.set.assert_called_once_with("Category name is required.")
        assert form.saved is False
        form.destroy.assert_not_called()


class TestCategoriesTabSearch:
    """Tests for the search toolbar state in CategoriesTab."""

    def _make_tab(self, service, typed: str) -> CategoriesTab:
        tab = CategoriesTab.__new__(CategoriesTab)
        tab._svc = service
        tab._search_entry = MagicMock()
        tab._search_entry.get.return_value = typed
        tab._scroll = MagicMock()
        tab._scroll.winfo_children.return_value = []
        tab._clear_btn = MagicMock()
        tab._count_label = MagicMock()
        tab._add_row = MagicMock()
        tab._show_empty = MagicMock()
        return tab

    @patch("ui.tabs.categories_tab.ctk")
    def test_whitespace_search_shows_full_list(self, _ctk, demo_service) -> None:
        tab = self._make_tab(demo_service, "  ")
        tab._load()
        assert tab._add_row.call_count == 4
        tab._show_empty.assert_not_called()
        tab._clear_btn.grid_remove.assert_called_once()
        tab._count_label.configure.assert_called_with(text="")

    @patch("ui.tabs.categories_tab.ctk")
    def test_search_shows_count_and_clear_button(self, _ctk, demo_service) -> None:
        tab = self._make_tab(demo_service, "tech")
        tab._load()
        assert [c.args[1].name for c in tab._add_row.call_args_list] == ["Technology"]
        tab._clear_btn.grid.assert_called_once()
        tab._count_label.configure.assert_called_with(text="1 of 4 categories")

    @patch("ui.tabs.categories_tab.ctk")
    def test_clear_search_empties_entry(self, _ctk, demo_service) -> None:
        tab = self._make_tab(demo_service, "tech")
        tab._clear_search()
        tab._search_entry.delete.assert_called_once_with(0, "end")
