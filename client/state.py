# client/state.py
"""Client-side mirror of the bookmark collection.

The controller only changes its mirror after the API confirms a mutation.
Failures land in a single error slot that the next failure overwrites.
"""
import logging

from client.api import ApiError

logger = logging.getLogger(__name__)

ALL_CATEGORIES = 'All'


def empty_form():
    return {'title': '', 'url': '', 'category': '', 'description': ''}


def filter_bookmarks(bookmarks, search_term, category):
    """Bookmarks whose title, description or url contain search_term
    (case-insensitive) and whose category matches, "All" matching any."""
    term = (search_term or '').lower()
    visible = []
    for b in bookmarks:
        matches_search = (
            term in (b.get('title') or '').lower()
            or term in (b.get('description') or '').lower()
            or term in (b.get('url') or '').lower()
        )
        matches_category = category == ALL_CATEGORIES or b.get('category') == category
        if matches_search and matches_category:
            visible.append(b)
    return visible


def category_options(bookmarks):
    options = [ALL_CATEGORIES]
    for b in bookmarks:
        category = b.get('category')
        if category and category not in options:
            options.append(category)
    return options


class BookmarkController:
    def __init__(self, api):
        self.api = api
        self.bookmarks = []
        self.loading = True
        self.error = None
        self.search_term = ''
        self.selected_category = ALL_CATEGORIES
        self.show_form = False
        self.editing = None
        self.form = empty_form()

    @property
    def visible(self):
        return filter_bookmarks(self.bookmarks, self.search_term, self.selected_category)

    @property
    def categories(self):
        return category_options(self.bookmarks)

    def _fail(self, prefix, error):
        self.error = f"{prefix}: {error.message if isinstance(error, ApiError) else error}"
        logger.warning(self.error)

    def dismiss_error(self):
        self.error = None

    def load(self):
        self.loading = True
        self.error = None
        try:
            self.bookmarks = self.api.list()
        except ApiError as e:
            self._fail('Failed to load bookmarks', e)
        finally:
            self.loading = False

    def start_edit(self, bookmark):
        self.form = {
            'title': bookmark.get('title', ''),
            'url': bookmark.get('url', ''),
            'category': bookmark.get('category', ''),
            'description': bookmark.get('description', '')
        }
        self.editing = bookmark
        self.show_form = True

    def reset_form(self):
        self.form = empty_form()
        self.editing = None
        self.show_form = False

    def submit(self):
        """Create or update from the form draft. Returns True on success."""
        if not self.form.get('title') or not self.form.get('url'):
            return False
        self.error = None
        try:
            if self.editing is not None:
                edited_id = self.editing['id']
                updated = self.api.update(edited_id, dict(self.form))
                self.bookmarks = [updated if b.get('id') == edited_id else b for b in self.bookmarks]
            else:
                created = self.api.create(dict(self.form))
                self.bookmarks = self.bookmarks + [created]
        except ApiError as e:
            self._fail('Failed to save bookmark', e)
            return False
        self.reset_form()
        return True

    def delete(self, bookmark_id):
        try:
            self.api.delete(bookmark_id)
        except ApiError as e:
            self._fail('Failed to delete bookmark', e)
            return False
        self.bookmarks = [b for b in self.bookmarks if b.get('id') != bookmark_id]
        return True

    def clear_all(self):
        try:
            self.api.clear()
        except ApiError as e:
            self._fail('Failed to clear', e)
            return False
        self.bookmarks = []
        return True

    def import_records(self, records):
        if not isinstance(records, list):
            self._fail('Import failed', 'Invalid format')
            return None
        try:
            result = self.api.import_bookmarks(records)
        except ApiError as e:
            self._fail('Import failed', e)
            return None
        # Imported ids are assigned by the server, so reload instead of patching
        self.load()
        return result

    def export(self):
        try:
            return self.api.export()
        except ApiError as e:
            self._fail('Failed to export', e)
            return None
