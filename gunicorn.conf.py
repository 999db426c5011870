# gunicorn.conf.py
import os

# Configure logging to stdout
accesslog = '-'
errorlog = '-'
loglevel = os.getenv('LOG_LEVEL', 'info').lower()

# Get PORT from environment or use default
port = os.getenv('PORT', '3001')
bind = f"0.0.0.0:{port}"

# The JSON file is rewritten without locking; more than one worker can lose updates
workers = int(os.getenv('WEB_CONCURRENCY', 1))
threads = 1
worker_class = "sync"
timeout = 30

wsgi_app = "app:app"
proc_name = "bookmark_manager"
