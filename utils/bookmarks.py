# utils/bookmarks.py
"""Bookmark operations behind the REST endpoints.

Every mutating operation follows the same cycle: read the whole collection
from the store, change it in memory, write the whole collection back.
"""
import logging
import time
from datetime import date

from pydantic import ValidationError as PydanticValidationError

from schemas.bookmark_schemas import BookmarkCreate, BookmarkUpdate
from utils.errors import MalformedInputError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

TEXT_FIELDS = ('title', 'url', 'category', 'description')


def today():
    return date.today().isoformat()


def next_id(bookmarks, count=1):
    """Return `count` new ids for `bookmarks`.

    Ids are millisecond timestamps, bumped past the largest existing id so
    they stay unique within the collection even when two requests land in
    the same millisecond.
    """
    token = int(time.time() * 1000)
    existing = [b.get('id') for b in bookmarks if isinstance(b.get('id'), (int, float))]
    if existing:
        token = max(token, int(max(existing)) + 1)
    return [token + offset for offset in range(count)]


def parse_bookmark_id(raw_id):
    """Turn a path id into a number, or None when it can't match anything."""
    if isinstance(raw_id, (int, float)):
        return raw_id
    try:
        return int(raw_id)
    except (TypeError, ValueError):
        pass
    try:
        return float(raw_id)
    except (TypeError, ValueError):
        return None


def _find_index(bookmarks, raw_id):
    bookmark_id = parse_bookmark_id(raw_id)
    if bookmark_id is None:
        return -1
    for index, bookmark in enumerate(bookmarks):
        if bookmark.get('id') == bookmark_id:
            return index
    return -1


def _validate(schema, payload):
    if not isinstance(payload, dict):
        raise ValidationError()
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        logger.info(f"Rejected bookmark payload: {e.error_count()} validation error(s)")
        raise ValidationError() from e


def list_bookmarks(store):
    return store.read_all()


def create_bookmark(store, payload):
    fields = _validate(BookmarkCreate, payload).editable_fields()

    bookmarks = store.read_all()
    new_bookmark = {
        'id': next_id(bookmarks)[0],
        **fields,
        'dateAdded': today()
    }
    bookmarks.append(new_bookmark)
    store.write_all(bookmarks)

    logger.info(f"Created bookmark {new_bookmark['id']}")
    return new_bookmark


def update_bookmark(store, bookmark_id, payload):
    fields = _validate(BookmarkUpdate, payload).editable_fields()

    bookmarks = store.read_all()
    index = _find_index(bookmarks, bookmark_id)
    if index == -1:
        raise NotFoundError()

    # id, dateAdded and any extra keys are carried over untouched
    bookmarks[index] = {**bookmarks[index], **fields}
    store.write_all(bookmarks)

    logger.info(f"Updated bookmark {bookmarks[index]['id']}")
    return bookmarks[index]


def delete_bookmark(store, bookmark_id):
    bookmarks = store.read_all()
    index = _find_index(bookmarks, bookmark_id)
    if index == -1:
        raise NotFoundError()

    removed = bookmarks.pop(index)
    store.write_all(bookmarks)

    logger.info(f"Deleted bookmark {removed['id']}")
    return {'message': 'Bookmark deleted successfully'}


def clear_bookmarks(store):
    store.write_all([])
    logger.info("Cleared all bookmarks")
    return {'message': 'All bookmarks cleared successfully'}


def export_bookmarks(store):
    """Return the collection and the dated filename it should be saved under."""
    return store.read_all(), f"bookmarks-{today()}.json"


def import_bookmarks(store, records):
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise MalformedInputError()

    bookmarks = store.read_all()
    ids = next_id(bookmarks, count=len(records))

    for new_id, record in zip(ids, records):
        imported = {k: v for k, v in record.items() if k != 'id'}
        for field in TEXT_FIELDS:
            if imported.get(field) is None:
                imported[field] = ''
        if not imported.get('dateAdded'):
            imported['dateAdded'] = today()
        bookmarks.append({'id': new_id, **imported})

    store.write_all(bookmarks)

    count = len(records)
    logger.info(f"Imported {count} bookmarks")
    return {
        'message': f"Successfully imported {count} bookmarks",
        'count': count
    }
