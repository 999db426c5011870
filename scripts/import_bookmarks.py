# scripts/import_bookmarks.py
import json
import sys
from pathlib import Path

# Add the parent directory to the Python path properly
current_dir = Path(__file__).resolve().parent
backend_dir = current_dir.parent
sys.path.insert(0, str(backend_dir))

from config import Config
from database import FileBookmarkStore
from utils.bookmarks import import_bookmarks
from utils.errors import BookmarkError


def load_records(json_path):
    """Read an export file, or an {"bookmarks": [...]} import payload"""
    with open(json_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get('bookmarks')
    return data


def import_bookmarks_file(json_path, store=None):
    """Append the bookmarks in json_path to the configured bookmarks file"""
    print(f"Reading JSON file from: {json_path}")
    store = store or FileBookmarkStore(Config.BOOKMARKS_FILE)

    records = load_records(json_path)
    before = len(store.read_all())
    result = import_bookmarks(store, records)

    print(f"\n{result['message']}")
    print(f"Bookmarks file now holds {before + result['count']} bookmarks")
    return result


if __name__ == '__main__':
    if len(sys.argv) != 2:
        print("Usage: python scripts/import_bookmarks.py <path_to_bookmarks.json>")
        sys.exit(1)

    try:
        import_bookmarks_file(sys.argv[1])
    except (OSError, ValueError) as e:
        print(f"Could not read {sys.argv[1]}: {e}")
        sys.exit(1)
    except BookmarkError as e:
        print(f"Import failed: {e.message}")
        sys.exit(1)
