# app.py
from flask import Flask, jsonify, request, g
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from werkzeug.middleware.proxy_fix import ProxyFix
from routes.bookmarks_routes import bookmarks_bp
from database import FileBookmarkStore, get_store
from utils.errors import BookmarkError
from config import Config
import logging
import time
import sys

# Configure logging to output to stdout
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def create_app(config=None, store=None):
    """Build the Flask app. `store` overrides the file-backed store from the config."""
    config = config or Config

    app = Flask(__name__)
    app.config.from_object(config)

    # Use ProxyFix to handle proxy headers when running behind a reverse proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    app.json.sort_keys = False  # Preserve order of keys in JSON responses

    CORS(app, resources={
        r"/api/*": {
            "origins": config.CORS_ORIGINS,
            "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            "allow_headers": ["Content-Type"],
            "expose_headers": ["Content-Type", "Content-Disposition"]
        }
    })

    # Ensure URLs with or without trailing slashes are handled the same way
    app.url_map.strict_slashes = False

    if store is None:
        store = FileBookmarkStore(config.BOOKMARKS_FILE)
        if config.SEED_BOOKMARKS:
            store.initialize()
    app.extensions['bookmark_store'] = store
    logger.info(f"Using bookmark store {store!r}")

    app.register_blueprint(bookmarks_bp)

    @app.before_request
    def before_request():
        g.start_time = time.time()

    @app.after_request
    def after_request(response):
        # Log request duration
        duration = time.time() - g.get('start_time', time.time())
        logger.info(f"{request.method} {request.path} -> {response.status_code} in {duration:.3f} seconds")
        return response

    @app.errorhandler(BookmarkError)
    def handle_bookmark_error(e):
        if e.status_code >= 500:
            logger.error(f"Request to {request.path} failed: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if request.path.startswith('/api/'):
            return jsonify({'error': e.description}), e.code
        return e

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.error(f"Unhandled error on {request.method} {request.path}: {str(e)}", exc_info=True)
        return jsonify({'error': 'Internal server error'}), 500

    @app.route('/health', methods=['GET'])
    def health():
        """Health check endpoint that also reports where bookmarks are kept"""
        store = get_store()
        return jsonify({
            'status': 'healthy',
            'bookmarks_file': str(getattr(store, 'path', 'memory')),
            'timestamp': time.time()
        })

    return app


app = create_app()

if __name__ == '__main__':
    logger.info(f"Bookmark server running on http://localhost:{Config.PORT}")
    logger.info(f"Bookmarks file: {Config.BOOKMARKS_FILE}")
    app.run(debug=True, port=Config.PORT)
