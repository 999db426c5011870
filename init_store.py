# init_store.py
from pathlib import Path
import sys

# Add the repository root to the Python path
sys.path.append(str(Path(__file__).resolve().parent))
from config import Config
from database import FileBookmarkStore


def init_bookmarks_file(path=None):
    """Create the bookmarks file with the default bookmarks if it is missing"""
    store = FileBookmarkStore(path or Config.BOOKMARKS_FILE)
    print(f"Bookmarks file: {store.path}")

    if store.initialize():
        print(f"Created bookmarks file with {len(store.read_all())} default bookmarks")
    else:
        print("Bookmarks file already exists, leaving it unchanged")
    return store


if __name__ == '__main__':
    init_bookmarks_file(sys.argv[1] if len(sys.argv) > 1 else None)
