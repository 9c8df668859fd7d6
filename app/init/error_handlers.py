# app/init/error_handlers.py

"""
Error Handlers

JSON error responses for the API surface.
"""

import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


def install_error_handlers(app):
    """
    Install JSON error handlers on the Flask application.

    Args:
        app: The Flask application instance.
    """

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception(f"Unhandled error: {error}")
        return jsonify({'error': 'Internal server error'}), 500
