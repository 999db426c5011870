import copy
import json
import logging
import os
import stat
import tempfile
from datetime import date
from pathlib import Path

from flask import current_app

from utils.errors import PersistenceError

logger = logging.getLogger(__name__)


def _seed_bookmarks():
    today = date.today().isoformat()
    return [
        {
            'id': 1,
            'title': 'React Documentation',
            'url': 'https://react.dev',
            'category': 'Development',
            'description': 'Official React documentation and guides',
            'dateAdded': today
        },
        {
            'id': 2,
            'title': 'MDN Web Docs',
            'url': 'https://developer.mozilla.org',
            'category': 'Development',
            'description': 'Web development resources and references',
            'dateAdded': today
        },
        {
            'id': 3,
            'title': 'GitHub',
            'url': 'https://github.com',
            'category': 'Tools',
            'description': 'Code hosting and collaboration platform',
            'dateAdded': today
        }
    ]


class BookmarkStore:
    """Read-all / replace-all access to the bookmark collection.

    There is no locking: every caller reads the whole collection, changes it
    in memory and writes the whole collection back, so the last writer wins.
    """

    def initialize(self):
        raise NotImplementedError

    def read_all(self):
        raise NotImplementedError

    def write_all(self, bookmarks):
        raise NotImplementedError


class FileBookmarkStore(BookmarkStore):
    """Collection persisted as a single pretty-printed JSON array on disk."""

    def __init__(self, path):
        self.path = Path(path)

    def initialize(self):
        """Create the file with seed data if it is missing. Existing files are left alone."""
        if self.path.exists():
            return False
        self.write_all(_seed_bookmarks())
        logger.info(f"Created {self.path} with default bookmarks")
        return True

    def read_all(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.error(f"Error reading bookmarks: {self.path} does not exist")
            return []
        except (OSError, ValueError) as e:
            logger.error(f"Error reading bookmarks from {self.path}: {str(e)}")
            return []

        if not isinstance(data, list):
            logger.error(f"Error reading bookmarks: {self.path} does not contain a JSON array")
            return []

        bookmarks = [b for b in data if isinstance(b, dict)]
        if len(bookmarks) != len(data):
            logger.warning(f"Skipping {len(data) - len(bookmarks)} non-object entries in {self.path}")
        return bookmarks

    def write_all(self, bookmarks):
        # Write to a sibling temp file and swap it in so readers never see a partial document
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix='.bookmarks-', suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(list(bookmarks), f, indent=2, ensure_ascii=False)
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing bookmarks to {self.path}: {str(e)}", exc_info=True)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError() from e

    def _file_mode(self):
        """Mode for the rewritten file: the current one's, or the umask default for a new file."""
        if self.path.exists():
            return stat.S_IMODE(self.path.stat().st_mode)
        mask = os.umask(0)
        os.umask(mask)
        return 0o666 & ~mask

    def __repr__(self):
        return f'<FileBookmarkStore {self.path}>'


class MemoryBookmarkStore(BookmarkStore):
    """In-process store with the same contract, used by tests and scripts."""

    def __init__(self, bookmarks=None):
        self._bookmarks = copy.deepcopy(list(bookmarks)) if bookmarks is not None else None

    def initialize(self):
        if self._bookmarks is not None:
            return False
        self._bookmarks = _seed_bookmarks()
        return True

    def read_all(self):
        return copy.deepcopy(self._bookmarks or [])

    def write_all(self, bookmarks):
        self._bookmarks = copy.deepcopy(list(bookmarks))

    def __repr__(self):
        return f'<MemoryBookmarkStore {len(self._bookmarks or [])} bookmarks>'


def get_store():
    """Return the bookmark store attached to the running Flask app."""
    return current_app.extensions['bookmark_store']
