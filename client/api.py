# client/api.py
import logging
import re

import requests

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_FILENAME = 'bookmarks.json'


class ApiError(Exception):
    """A failed call against the bookmark API, carrying a user-facing message."""

    def __init__(self, message, status_code=None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def filename_from_disposition(header):
    if not header:
        return DEFAULT_EXPORT_FILENAME
    match = re.search(r'filename="?([^";]+)"?', header)
    return match.group(1) if match else DEFAULT_EXPORT_FILENAME


class BookmarkApiClient:
    """Thin wrapper over the /api/bookmarks endpoints."""

    def __init__(self, base_url='http://localhost:3001/api', session=None, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method, endpoint, **kwargs):
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"API call failed for {endpoint}: {str(e)}")
            raise ApiError(str(e)) from e

        if not response.ok:
            try:
                message = response.json().get('error')
            except (ValueError, AttributeError):
                message = None
            message = message or f"HTTP {response.status_code}"
            logger.error(f"API call failed for {endpoint}: {message}")
            raise ApiError(message, response.status_code)
        return response

    def list(self):
        return self._request('GET', '/bookmarks').json()

    def create(self, data):
        return self._request('POST', '/bookmarks', json=data).json()

    def update(self, bookmark_id, data):
        return self._request('PUT', f'/bookmarks/{bookmark_id}', json=data).json()

    def delete(self, bookmark_id):
        return self._request('DELETE', f'/bookmarks/{bookmark_id}').json()

    def clear(self):
        return self._request('DELETE', '/bookmarks').json()

    def import_bookmarks(self, records):
        return self._request('POST', '/bookmarks/import', json={'bookmarks': records}).json()

    def export(self):
        """Return (records, suggested filename) for the current collection."""
        response = self._request('GET', '/bookmarks/export')
        file_name = filename_from_disposition(response.headers.get('Content-Disposition'))
        return response.json(), file_name
