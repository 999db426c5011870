"""Tests for the client-side bookmark controller and its pure filters."""

from unittest.mock import Mock

import pytest

from client.api import ApiError
from client.state import BookmarkController, category_options, filter_bookmarks


@pytest.fixture
def api(sample_bookmarks):
    api = Mock()
    api.list.return_value = [dict(b) for b in sample_bookmarks]
    return api


@pytest.fixture
def controller(api):
    controller = BookmarkController(api)
    controller.load()
    return controller


class TestFilterBookmarks:
    def test_empty_term_and_all_matches_everything(self, sample_bookmarks):
        assert filter_bookmarks(sample_bookmarks, "", "All") == sample_bookmarks

    def test_search_is_case_insensitive_across_fields(self, sample_bookmarks):
        assert filter_bookmarks(sample_bookmarks, "FIRST", "All") == [sample_bookmarks[0]]
        assert filter_bookmarks(sample_bookmarks, "b.TEST", "All") == [sample_bookmarks[1]]
        assert filter_bookmarks(sample_bookmarks, "a", "All") == [sample_bookmarks[0]]

    def test_category_is_exact(self, sample_bookmarks):
        assert filter_bookmarks(sample_bookmarks, "", "Tools") == [sample_bookmarks[1]]
        assert filter_bookmarks(sample_bookmarks, "", "tools") == []

    def test_search_and_category_intersect(self, sample_bookmarks):
        assert filter_bookmarks(sample_bookmarks, "first", "Tools") == []

    def test_tolerates_missing_fields(self):
        assert filter_bookmarks([{"id": 1, "title": "X"}], "x", "All") == [{"id": 1, "title": "X"}]


class TestCategoryOptions:
    def test_all_first_then_unique_non_empty(self):
        bookmarks = [
            {"category": "Tools"},
            {"category": ""},
            {"category": "Development"},
            {"category": "Tools"},
            {},
        ]
        assert category_options(bookmarks) == ["All", "Tools", "Development"]

    def test_empty_collection(self):
        assert category_options([]) == ["All"]


class TestLoad:
    def test_populates_mirror(self, controller, sample_bookmarks):
        assert controller.bookmarks == sample_bookmarks
        assert controller.loading is False
        assert controller.error is None
        assert controller.categories == ["All", "Development", "Tools"]

    def test_failure_sets_error_and_stops_loading(self, api):
        api.list.side_effect = ApiError("HTTP 500", 500)
        controller = BookmarkController(api)
        assert controller.loading is True

        controller.load()

        assert controller.loading is False
        assert controller.bookmarks == []
        assert controller.error == "Failed to load bookmarks: HTTP 500"


class TestVisible:
    def test_derived_from_search_and_category(self, controller, sample_bookmarks):
        controller.search_term = "b"
        controller.selected_category = "Tools"
        assert controller.visible == [sample_bookmarks[1]]

        controller.selected_category = "All"
        assert len(controller.visible) == 2


class TestSubmit:
    def test_requires_title_and_url(self, controller, api):
        controller.form["title"] = "Only title"
        assert controller.submit() is False
        api.create.assert_not_called()

    def test_create_appends_server_record(self, controller, api):
        created = {"id": 555, "title": "New", "url": "https://new.test", "category": "",
                   "description": "", "dateAdded": "2024-03-01"}
        api.create.return_value = created
        controller.show_form = True
        controller.form.update(title="New", url="https://new.test")

        assert controller.submit() is True

        api.create.assert_called_once_with({"title": "New", "url": "https://new.test",
                                            "category": "", "description": ""})
        assert controller.bookmarks[-1] == created
        assert controller.form == {"title": "", "url": "", "category": "", "description": ""}
        assert controller.show_form is False

    def test_update_replaces_matching_entry(self, controller, api, sample_bookmarks):
        updated = dict(sample_bookmarks[0], title="A2")
        api.update.return_value = updated

        controller.start_edit(controller.bookmarks[0])
        assert controller.form["title"] == "A"
        assert controller.show_form is True
        controller.form["title"] = "A2"

        assert controller.submit() is True

        api.update.assert_called_once()
        assert api.update.call_args.args[0] == 1
        assert controller.bookmarks == [updated, sample_bookmarks[1]]
        assert controller.editing is None

    def test_failure_keeps_mirror(self, controller, api, sample_bookmarks):
        api.create.side_effect = ApiError("Title and URL are required", 400)
        controller.form.update(title="X", url="https://x.test")

        assert controller.submit() is False

        assert controller.bookmarks == sample_bookmarks
        assert controller.error == "Failed to save bookmark: Title and URL are required"
        assert controller.form["title"] == "X"


class TestDeleteAndClear:
    def test_delete_removes_after_success(self, controller, api, sample_bookmarks):
        assert controller.delete(1) is True
        api.delete.assert_called_once_with(1)
        assert controller.bookmarks == [sample_bookmarks[1]]

    def test_delete_failure(self, controller, api, sample_bookmarks):
        api.delete.side_effect = ApiError("Bookmark not found", 404)

        assert controller.delete(1) is False
        assert controller.bookmarks == sample_bookmarks
        assert controller.error == "Failed to delete bookmark: Bookmark not found"

    def test_clear_all(self, controller, api):
        assert controller.clear_all() is True
        assert controller.bookmarks == []

    def test_clear_failure(self, controller, api, sample_bookmarks):
        api.clear.side_effect = ApiError("HTTP 500", 500)
        assert controller.clear_all() is False
        assert controller.bookmarks == sample_bookmarks
        assert controller.error == "Failed to clear: HTTP 500"


class TestImportExport:
    def test_import_reloads(self, controller, api):
        api.import_bookmarks.return_value = {"message": "Successfully imported 1 bookmarks", "count": 1}
        api.list.return_value = [{"id": 9, "title": "X", "url": "https://x.test"}]

        result = controller.import_records([{"title": "X", "url": "https://x.test"}])

        assert result["count"] == 1
        assert api.list.call_count == 2
        assert controller.bookmarks == [{"id": 9, "title": "X", "url": "https://x.test"}]

    def test_import_rejects_non_list_locally(self, controller, api):
        assert controller.import_records({"title": "X"}) is None
        api.import_bookmarks.assert_not_called()
        assert controller.error == "Import failed: Invalid format"

    def test_export(self, controller, api, sample_bookmarks):
        api.export.return_value = (sample_bookmarks, "bookmarks-2024-01-01.json")
        assert controller.export() == (sample_bookmarks, "bookmarks-2024-01-01.json")

    def test_export_failure(self, controller, api):
        api.export.side_effect = ApiError("Connection refused")
        assert controller.export() is None
        assert controller.error == "Failed to export: Connection refused"


class TestErrorSlot:
    def test_new_failure_overwrites_and_dismiss_clears(self, controller, api):
        api.delete.side_effect = ApiError("first")
        controller.delete(1)
        api.clear.side_effect = ApiError("second")
        controller.clear_all()

        assert controller.error == "Failed to clear: second"
        controller.dismiss_error()
        assert controller.error is None
