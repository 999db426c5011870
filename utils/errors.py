# utils/errors.py


class BookmarkError(Exception):
    """Base class for failures that map onto an HTTP error response."""
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.message}


class ValidationError(BookmarkError):
    status_code = 400
    default_message = 'Title and URL are required'


class NotFoundError(BookmarkError):
    status_code = 404
    default_message = 'Bookmark not found'


class MalformedInputError(BookmarkError):
    status_code = 400
    default_message = 'Invalid bookmarks format'


class PersistenceError(BookmarkError):
    status_code = 500
    default_message = 'Failed to save bookmarks'
