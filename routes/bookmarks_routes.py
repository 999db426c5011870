# routes/bookmarks_routes.py
from flask import Blueprint, request, jsonify
from database import get_store
from utils import bookmarks as ops
from utils.errors import MalformedInputError
import logging

logger = logging.getLogger(__name__)
bookmarks_bp = Blueprint('bookmarks_bp', __name__, url_prefix='/api/bookmarks')

# Errors raised by the operations are turned into {"error": ...} responses
# by the BookmarkError handler registered in app.py


@bookmarks_bp.route("", methods=['GET'])
def get_bookmarks():
    return jsonify(ops.list_bookmarks(get_store())), 200


@bookmarks_bp.route("", methods=['POST'])
def create_bookmark():
    data = request.get_json(silent=True)
    new_bookmark = ops.create_bookmark(get_store(), data)
    return jsonify(new_bookmark), 201


@bookmarks_bp.route("/<bookmark_id>", methods=['PUT'])
def update_bookmark(bookmark_id):
    data = request.get_json(silent=True)
    updated = ops.update_bookmark(get_store(), bookmark_id, data)
    return jsonify(updated), 200


@bookmarks_bp.route("/<bookmark_id>", methods=['DELETE'])
def delete_bookmark(bookmark_id):
    return jsonify(ops.delete_bookmark(get_store(), bookmark_id)), 200


@bookmarks_bp.route("", methods=['DELETE'])
def clear_bookmarks():
    return jsonify(ops.clear_bookmarks(get_store())), 200


@bookmarks_bp.route("/import", methods=['POST'])
def import_bookmarks():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise MalformedInputError()
    return jsonify(ops.import_bookmarks(get_store(), data.get('bookmarks'))), 200


@bookmarks_bp.route("/export", methods=['GET'])
def export_bookmarks():
    bookmarks, file_name = ops.export_bookmarks(get_store())
    response = jsonify(bookmarks)
    response.headers['Content-Disposition'] = f'attachment; filename="{file_name}"'
    return response
