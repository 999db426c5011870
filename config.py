# config.py
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

load_dotenv()


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {'1', 'true', 'yes', 'on'}


class Config:
    BOOKMARKS_FILE = os.getenv('BOOKMARKS_FILE', os.path.join(BASE_DIR, 'data', 'bookmarks.json'))
    SEED_BOOKMARKS = _env_flag('SEED_BOOKMARKS', True)
    PORT = int(os.getenv('PORT', 3001))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10MB max request size
