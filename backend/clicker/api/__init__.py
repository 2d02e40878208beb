"""HTTP blueprints and the helpers they share."""

from flask import request, jsonify


def envelope(payload=None, message='', success=True, status=200):
    """Every response body is ``{success, message, payload}``."""
    return jsonify({'success': success, 'message': message, 'payload': payload}), status


def request_field(name):
    # Body, then query string, then path params; first non-empty value wins
    body = request.get_json(silent=True)
    sources = (body if isinstance(body, dict) else {}, request.args, request.view_args or {})
    for source in sources:
        value = source.get(name)
        if value is not None and value != '':
            return value
    return None
